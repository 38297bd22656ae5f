r"""Derive heading anchors and table-of-contents entries from markdown tokens.

This module holds the pieces of the page pipeline that must agree with each
other byte for byte: :func:`slugify` computes the anchor identifier for a
heading, and :func:`extract_headings` walks the renderer's token stream to
collect the headings shown in the "On This Page" box. The anchor extension in
:mod:`tinqer_pages.generator.anchors` calls the same :func:`slugify`, so every
table-of-contents link resolves to the heading it names.

Example
-------
>>> from tinqer_pages.markdown_parser import Token, extract_headings, slugify
>>> slugify("  Query Builder v2.0 ")
'query-builder-v20'
>>> tokens = [
...     Token("heading_open", "h2"),
...     Token("inline", "", "Installation"),
...     Token("heading_close", "h2"),
... ]
>>> extract_headings(tokens)[0].anchor_id
'installation'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
from urllib.parse import quote

HEADING_TAG_PATTERN = re.compile(r"^h([1-6])$")
PERCENT_ESCAPE_PATTERN = re.compile(r"(%[0-9A-Fa-f]{2})")
WHITESPACE_PATTERN = re.compile(r"\s+")

# Characters left unescaped by JavaScript's encodeURIComponent beyond the
# letters, digits and ``_.-~`` that ``quote`` never escapes.
URI_COMPONENT_SAFE = "!*'()"

TOC_LEVELS = (2, 3)


@dc.dataclass(slots=True, frozen=True)
class Token:
    """Structural unit emitted by a markdown renderer's ``parse`` step.

    Attributes
    ----------
    type : str
        Token kind such as ``"heading_open"``, ``"inline"``,
        ``"heading_close"`` or ``"block"``.
    tag : str
        HTML tag associated with the token (``"h2"`` for a level-two heading).
    content : str
        Literal source text carried by ``inline`` tokens; empty otherwise.
    """

    type: str
    tag: str
    content: str = ""


@dc.dataclass(slots=True, frozen=True)
class Heading:
    """Heading collected for the table of contents.

    Attributes
    ----------
    level : int
        Heading level (``2`` or ``3`` for table-of-contents entries).
    text : str
        Literal heading text as written in the markdown source.
    anchor_id : str
        Identifier produced by :func:`slugify` for ``text``.
    """

    level: int
    text: str
    anchor_id: str


def slugify(text: str) -> str:
    """Return the URL-safe anchor identifier for ``text``.

    The text is trimmed, lowercased, stripped of every period, has whitespace
    runs collapsed into single hyphens and is finally percent-encoded the way
    ``encodeURIComponent`` would encode it. Percent escapes already present in
    the input are preserved verbatim so the function is idempotent on its own
    output. This is where it departs from ``encodeURIComponent``: a heading
    containing a literal ``%20`` keeps ``%20`` rather than becoming ``%2520``.

    Parameters
    ----------
    text : str
        Heading text taken from the markdown source.

    Returns
    -------
    str
        Identifier usable both as an ``id`` attribute and a URL fragment.
        Distinct headings may map to the same identifier; no suffix is added.
    """
    parts = PERCENT_ESCAPE_PATTERN.split(text.strip())
    encoded: list[str] = []
    for idx, part in enumerate(parts):
        if idx % 2:
            encoded.append(part)
            continue
        normalized = WHITESPACE_PATTERN.sub("-", part.lower().replace(".", ""))
        encoded.append(quote(normalized, safe=URI_COMPONENT_SAFE))
    return "".join(encoded)


def heading_level(tag: str) -> int | None:
    """Return the level encoded in a heading tag such as ``"h3"``."""
    match = HEADING_TAG_PATTERN.match(tag)
    return int(match.group(1)) if match else None


def extract_headings(
    tokens: cabc.Sequence[Token], levels: cabc.Container[int] = TOC_LEVELS
) -> list[Heading]:
    """Collect headings from ``tokens`` in document order.

    Parameters
    ----------
    tokens : Sequence[Token]
        Token stream produced by a renderer's ``parse`` method.
    levels : Container[int], optional
        Heading levels to keep. Defaults to levels two and three, which is
        what the table of contents shows.

    Returns
    -------
    list[Heading]
        One entry per retained heading. The text comes from the token that
        immediately follows each ``heading_open`` token.
    """
    headings: list[Heading] = []
    for idx, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        level = heading_level(token.tag)
        if level is None or level not in levels or idx + 1 >= len(tokens):
            continue
        text = tokens[idx + 1].content
        headings.append(Heading(level=level, text=text, anchor_id=slugify(text)))
    return headings


def find_anchor_collisions(tokens: cabc.Sequence[Token]) -> list[str]:
    """Return anchor identifiers shared by more than one heading, in first-seen order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for heading in extract_headings(tokens, levels=range(1, 7)):
        if heading.anchor_id in seen and heading.anchor_id not in duplicates:
            duplicates.append(heading.anchor_id)
        seen.add(heading.anchor_id)
    return duplicates


__all__ = [
    "TOC_LEVELS",
    "Heading",
    "Token",
    "extract_headings",
    "find_anchor_collisions",
    "heading_level",
    "slugify",
]
