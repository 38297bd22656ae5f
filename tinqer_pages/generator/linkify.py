"""Turn bare URLs in markdown prose into links."""

from __future__ import annotations

import re
import typing as typ
from xml.etree.ElementTree import Element

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.util import AtomicString

if typ.TYPE_CHECKING:
    from markdown import Markdown

BARE_URL_PATTERN = (
    r"(?<![\w/@:.\"'=<>])"
    r"((?:https?://|www\.)[^\s<>\"'`]*[^\s<>\"'`.,;:!?)\]])"
)


class BareLinkExtension(Extension):
    """Link ``http(s)://`` and ``www.`` addresses written without markup."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the bare URL pattern after the angle-bracket autolinks."""
        md.inlinePatterns.register(
            BareLinkInlineProcessor(BARE_URL_PATTERN, md), "tinqer_bare_links", 105
        )


class BareLinkInlineProcessor(InlineProcessor):
    """Wrap a matched URL in an ``<a>`` element."""

    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element, int, int]:
        """Return a link element whose text is the URL as written."""
        url = m.group(1)
        href = url if "://" in url else f"http://{url}"
        element = Element("a")
        element.set("href", href)
        element.text = AtomicString(url)
        return element, m.start(0), m.end(0)


__all__ = ["BARE_URL_PATTERN", "BareLinkExtension", "BareLinkInlineProcessor"]
