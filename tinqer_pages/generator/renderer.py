"""Utilities for rendering markdown and syntax-highlighted code snippets.

:class:`HtmlContentRenderer` splits Python-Markdown's conversion into the two
halves the page pipeline needs: :meth:`~HtmlContentRenderer.parse` runs the
preprocessors, block parser and treeprocessors and exposes a flat token
stream, and :meth:`~HtmlContentRenderer.render` serializes the processed tree
into HTML. Fenced code blocks are handed to a pluggable highlight callback,
which defaults to Pygments.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape
from xml.etree.ElementTree import Element

from markdown import Markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from tinqer_pages.generator.anchors import HeadingAnchorExtension
from tinqer_pages.generator.fences import FencedCodeExtension, HighlightCallback
from tinqer_pages.generator.linkify import BareLinkExtension
from tinqer_pages.generator.models import ParsedDocument
from tinqer_pages.markdown_parser import Token, heading_level

CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class MarkdownRenderer(typ.Protocol):
    """Markdown engine used by the page builder."""

    def parse(self, text: str) -> ParsedDocument:
        """Parse ``text`` into a token stream plus renderer state."""
        ...

    def render(self, document: ParsedDocument) -> str:
        """Serialize a parsed document into an HTML fragment."""
        ...


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        highlight_callback: HighlightCallback | None = None,
    ) -> None:
        """Initialize a renderer with a pygments style and highlight callback.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        highlight_callback : callable, optional
            Function receiving ``(code, language)`` for every fenced code block
            and returning the HTML to emit. Defaults to :meth:`code_block`.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self.highlight: HighlightCallback = highlight_callback or self.code_block

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        return self.render(self.parse(text))

    def parse(self, text: str) -> ParsedDocument:
        """Run every parsing stage of Python-Markdown short of serialization.

        Parameters
        ----------
        text : str
            Markdown source.

        Returns
        -------
        ParsedDocument
            Token stream (headings carry their literal source text) and the
            processed element tree ready for :meth:`render`.
        """
        if not text.strip():
            return ParsedDocument(tokens=[])
        token_extension = TokenStreamExtension()
        md = Markdown(
            extensions=[
                "tables",
                "sane_lists",
                "smarty",
                FencedCodeExtension(self.highlight),
                BareLinkExtension(),
                HeadingAnchorExtension(),
                token_extension,
            ]
        )
        lines = text.split("\n")
        for preprocessor in md.preprocessors:
            lines = preprocessor.run(lines)
        root = md.parser.parseDocument(lines).getroot()
        for treeprocessor in md.treeprocessors:
            new_root = treeprocessor.run(root)
            if new_root is not None:
                root = new_root
        return ParsedDocument(tokens=token_extension.tokens, state=(md, root))

    def render(self, document: ParsedDocument) -> str:
        """Serialize a document produced by :meth:`parse` into HTML."""
        if document.state is None:
            return ""
        md, root = document.state
        output = self._strip_document_tag(md.serializer(root), md.doc_tag)
        for postprocessor in md.postprocessors:
            output = postprocessor.run(output)
        return output.strip()

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML with an optional language tag.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Pygments lexer name; defaults to ``"text"`` when not provided or
            when the lexer lookup fails.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata applied.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        return self._attach_language_attribute(html, lang)

    @staticmethod
    def _strip_document_tag(output: str, doc_tag: str) -> str:
        """Remove the wrapping element Python-Markdown serializes around the body."""
        if output.strip().endswith(f"<{doc_tag} />"):
            return ""
        start = output.index(f"<{doc_tag}>") + len(doc_tag) + 2
        end = output.rindex(f"</{doc_tag}>")
        return output[start:end].strip()

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


class TokenStreamExtension(Extension):
    """Record the document's block structure as a list of tokens."""

    def __init__(self) -> None:
        super().__init__()
        self._processor: TokenStreamTreeprocessor | None = None

    @property
    def tokens(self) -> list[Token]:
        """Tokens captured during the last conversion."""
        if self._processor is None:
            return []
        return list(self._processor.tokens)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the collector before inline parsing rewrites heading text."""
        self._processor = TokenStreamTreeprocessor(md)
        md.treeprocessors.register(self._processor, "tinqer_token_stream", 25)


class TokenStreamTreeprocessor(Treeprocessor):
    """Walk the block tree in document order, emitting heading and block tokens."""

    def __init__(self, md: Markdown) -> None:
        super().__init__(md)
        self.tokens: list[Token] = []

    def run(self, root: Element) -> None:
        """Populate :attr:`tokens` from ``root`` without modifying it."""
        top_level = {id(child) for child in root}
        tokens: list[Token] = []
        for element in root.iter():
            if element is root or not isinstance(element.tag, str):
                continue
            if heading_level(element.tag) is not None:
                text = "".join(element.itertext()).strip()
                tokens.extend(
                    (
                        Token("heading_open", element.tag),
                        Token("inline", "", text),
                        Token("heading_close", element.tag),
                    )
                )
            elif id(element) in top_level:
                tokens.append(Token("block", element.tag))
        self.tokens = tokens


__all__ = [
    "HighlightCallback",
    "HtmlContentRenderer",
    "MarkdownRenderer",
    "TokenStreamExtension",
]
