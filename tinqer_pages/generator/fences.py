"""Hand fenced code blocks to a highlight callback from inside the block parser.

Fences are recognised by a :class:`~markdown.blockprocessors.BlockProcessor`
rather than a text preprocessor, so a fence nested in a list item or a
blockquote is seen once its container has been de-indented, and a fence
without a closing line runs to the end of its container. The callback's HTML
is stashed and emitted verbatim.

Raw HTML inside a fence must not reach Python-Markdown's HTML block
preprocessor, which would stash it before the block parser runs. A guard
preprocessor swaps ``<`` inside fenced regions for :data:`LT_SENTINEL`; the
block processor swaps it back before highlighting and a postprocessor escapes
any sentinel left elsewhere.
"""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ
from xml.etree.ElementTree import Element, SubElement

from markdown.blockprocessors import BlockProcessor
from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor
from markdown.preprocessors import Preprocessor

if typ.TYPE_CHECKING:
    from markdown import Markdown
    from markdown.blockparser import BlockParser

HighlightCallback = cabc.Callable[[str, str | None], str]

FENCE_OPEN_PATTERN = re.compile(
    r"^(?P<indent>[ ]{0,3})(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>[^\n]*)$",
    re.MULTILINE,
)
FENCE_CLOSE_PATTERN = re.compile(r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})[ \t]*$")
LANGUAGE_PATTERN = re.compile(r"[A-Za-z0-9_+#.-]+")
CONTAINER_PREFIX_PATTERN = re.compile(r"^(?:[ ]{0,3}>[ ]?)*[ ]*")

LT_SENTINEL = "\x1e"


def find_opening_fence(block: str) -> re.Match[str] | None:
    """Return the first line of ``block`` that opens a code fence.

    Backtick fences whose info string contains a backtick are inline code
    spans, not fences, and are skipped.
    """
    for match in FENCE_OPEN_PATTERN.finditer(block):
        if match.group("fence").startswith("`") and "`" in match.group("info"):
            continue
        return match
    return None


def closes_fence(line: str, fence: str) -> bool:
    """Return ``True`` when ``line`` closes a fence opened with ``fence``."""
    match = FENCE_CLOSE_PATTERN.match(line)
    if match is None:
        return False
    closing = match.group("fence")
    return closing[0] == fence[0] and len(closing) >= len(fence)


def fence_language(info: str) -> str | None:
    """Return the lexer name from a fence info string such as ``rust,no_run``."""
    match = LANGUAGE_PATTERN.match(info.strip())
    return match.group(0) if match else None


class FencedCodeExtension(Extension):
    """Replace fenced code blocks with the output of a highlight callback."""

    def __init__(self, highlight_callback: HighlightCallback) -> None:
        super().__init__()
        self.highlight_callback = highlight_callback

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the guard ahead of raw HTML handling and the block processor."""
        md.preprocessors.register(FenceGuardPreprocessor(md), "tinqer_fence_guard", 25)
        md.parser.blockprocessors.register(
            FencedCodeProcessor(md.parser, self.highlight_callback),
            "tinqer_fenced_code",
            75,
        )
        md.postprocessors.register(
            FenceGuardPostprocessor(md), "tinqer_fence_guard", 15
        )


class FenceGuardPreprocessor(Preprocessor):
    """Hide ``<`` inside fenced regions from the HTML block preprocessor."""

    def run(self, lines: list[str]) -> list[str]:
        """Return ``lines`` with ``<`` replaced by the sentinel inside fences."""
        guarded: list[str] = []
        fence: str | None = None
        for line in lines:
            content = line[CONTAINER_PREFIX_PATTERN.match(line).end() :]
            if fence is None:
                opening = find_opening_fence(content)
                if opening is not None:
                    fence = opening.group("fence")
            elif closes_fence(content, fence):
                fence = None
            else:
                line = line.replace("<", LT_SENTINEL)
            guarded.append(line)
        return guarded


class FencedCodeProcessor(BlockProcessor):
    """Consume a fenced code block, across blank lines, and stash its HTML."""

    def __init__(self, parser: BlockParser, highlight_callback: HighlightCallback) -> None:
        super().__init__(parser)
        self.highlight_callback = highlight_callback

    def test(self, parent: Element, block: str) -> bool:
        return find_opening_fence(block) is not None

    def run(self, parent: Element, blocks: list[str]) -> None:
        """Emit any text before the fence, then the highlighted code.

        Blocks following the opening line are consumed until a matching
        closing fence; text after the closing line is pushed back for the
        parser. Without a closing fence every remaining block of the current
        container belongs to the code.
        """
        block = blocks.pop(0)
        opening = typ.cast("re.Match[str]", find_opening_fence(block))
        before = block[: opening.start()].rstrip("\n")
        if before.strip():
            self.parser.parseBlocks(parent, [before])
        fence = opening.group("fence")
        indent = len(opening.group("indent"))
        language = fence_language(opening.group("info"))

        code_lines: list[str] = []
        lines = block[opening.end() :].split("\n")[1:]
        while True:
            for idx, line in enumerate(lines):
                if closes_fence(line, fence):
                    rest = "\n".join(lines[idx + 1 :])
                    if rest.strip():
                        blocks.insert(0, rest)
                    self._emit(parent, code_lines, indent, language)
                    return
                code_lines.append(line)
            if not blocks:
                break
            code_lines.append("")
            lines = blocks.pop(0).split("\n")

        while code_lines and not code_lines[-1].strip():
            code_lines.pop()
        self._emit(parent, code_lines, indent, language)

    def _emit(
        self,
        parent: Element,
        code_lines: list[str],
        indent: int,
        language: str | None,
    ) -> None:
        """Highlight the collected lines and append the stashed result to ``parent``."""
        dedented = [_strip_indent(line, indent) for line in code_lines]
        code = "".join(f"{line}\n" for line in dedented).replace(LT_SENTINEL, "<")
        html = self.highlight_callback(code, language)
        paragraph = SubElement(parent, "p")
        paragraph.text = self.parser.md.htmlStash.store(html)


class FenceGuardPostprocessor(Postprocessor):
    """Escape sentinels left outside code, where the guard over-reached."""

    def run(self, text: str) -> str:
        return text.replace(LT_SENTINEL, "&lt;")


def _strip_indent(line: str, indent: int) -> str:
    """Remove up to ``indent`` leading spaces, as the opening fence was indented."""
    spaces = len(line) - len(line.lstrip(" "))
    return line[min(spaces, indent) :]


__all__ = [
    "FENCE_OPEN_PATTERN",
    "FencedCodeExtension",
    "FencedCodeProcessor",
    "HighlightCallback",
    "closes_fence",
    "fence_language",
    "find_opening_fence",
]
