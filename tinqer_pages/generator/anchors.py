"""Attach permalink anchors to rendered headings."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from xml.etree.ElementTree import Element

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from tinqer_pages.markdown_parser import heading_level, slugify

if typ.TYPE_CHECKING:
    from markdown import Markdown


class HeadingAnchorExtension(Extension):
    """Give every heading a stable ``id`` and a visible permalink marker.

    Identifiers are computed from the heading's source text before inline
    markup is parsed, using the same slug function as the table of contents,
    so ``#<id>`` links in the TOC always land on their heading. The permalink
    is rendered before the heading text as
    ``<a class="anchor" href="#<id>" aria-hidden="true">#</a>`` and the heading
    itself is removed from the tab order with ``tabindex="-1"``.
    """

    def __init__(
        self,
        slug_func: cabc.Callable[[str], str] = slugify,
        symbol: str = "#",
        css_class: str = "anchor",
    ) -> None:
        super().__init__()
        self.slug_func = slug_func
        self.symbol = symbol
        self.css_class = css_class

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the id and permalink treeprocessors around inline parsing."""
        md.treeprocessors.register(
            HeadingIdTreeprocessor(md, self.slug_func), "tinqer_heading_ids", 30
        )
        md.treeprocessors.register(
            PermalinkTreeprocessor(md, self.symbol, self.css_class),
            "tinqer_permalinks",
            4,
        )


class HeadingIdTreeprocessor(Treeprocessor):
    """Assign slug identifiers to headings while their text is still raw."""

    def __init__(self, md: Markdown, slug_func: cabc.Callable[[str], str]) -> None:
        super().__init__(md)
        self.slug_func = slug_func

    def run(self, root: Element) -> Element:
        """Set ``id`` and ``tabindex`` on every heading element."""
        for element in root.iter():
            if not isinstance(element.tag, str) or heading_level(element.tag) is None:
                continue
            text = "".join(element.itertext()).strip()
            element.set("id", self.slug_func(text))
            element.set("tabindex", "-1")
        return root


class PermalinkTreeprocessor(Treeprocessor):
    """Insert the permalink marker in front of each identified heading."""

    def __init__(self, md: Markdown, symbol: str, css_class: str) -> None:
        super().__init__(md)
        self.symbol = symbol
        self.css_class = css_class

    def run(self, root: Element) -> Element:
        """Prepend an ``aria-hidden`` anchor to headings that carry an ``id``."""
        headings = [
            element
            for element in root.iter()
            if isinstance(element.tag, str)
            and heading_level(element.tag) is not None
            and element.get("id") is not None
        ]
        for heading in headings:
            anchor = Element("a")
            anchor.set("class", self.css_class)
            anchor.set("href", f"#{heading.get('id')}")
            anchor.set("aria-hidden", "true")
            anchor.text = self.symbol
            anchor.tail = f" {heading.text or ''}"
            heading.text = None
            heading.insert(0, anchor)
        return root


__all__ = [
    "HeadingAnchorExtension",
    "HeadingIdTreeprocessor",
    "PermalinkTreeprocessor",
]
