"""Render the page furniture that surrounds each document body.

Every function here is a pure function of the page manifest and the current
page's position in it (or, for the table of contents, of the page's
headings), so the same inputs always yield the same HTML.

Example
-------
>>> from pathlib import Path
>>> from tinqer_pages.config import PageEntry
>>> pages = (
...     PageEntry(Path("README.md"), "index.html", "Getting Started", "Getting Started"),
...     PageEntry(Path("docs/guide.md"), "guide.html", "Guide", "Guide"),
... )
>>> render_breadcrumb(pages, 1)
'<div class="breadcrumb"><a href="index.html">Home</a> / <span>Guide</span></div>'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    from tinqer_pages.config import PageEntry
    from tinqer_pages.markdown_parser import Heading


def render_nav(pages: cabc.Sequence[PageEntry], current_index: int) -> str:
    """Return the navigation list with the current page marked ``active``."""
    lines = ['<ul class="nav-list">']
    for idx, page in enumerate(pages):
        active = ' class="active"' if idx == current_index else ""
        lines.append(
            f'  <li{active}><a href="{escape(page.destination)}">'
            f"{escape(page.nav_label)}</a></li>"
        )
    lines.append("</ul>")
    return "\n".join(lines)


def render_breadcrumb(pages: cabc.Sequence[PageEntry], current_index: int) -> str:
    """Return the breadcrumb trail.

    The first manifest entry is the home page and shows a bare ``Home``
    marker; every other page renders ``Home / <title>`` with ``Home`` linking
    back to the first entry.
    """
    if current_index == 0:
        return '<div class="breadcrumb"><span>Home</span></div>'
    home = pages[0]
    title = escape(pages[current_index].title)
    return (
        f'<div class="breadcrumb"><a href="{escape(home.destination)}">Home</a>'
        f" / <span>{title}</span></div>"
    )


def render_pager(pages: cabc.Sequence[PageEntry], current_index: int) -> str:
    """Return the previous/next footer for ``pages[current_index]``.

    Parameters
    ----------
    pages : Sequence[PageEntry]
        Ordered page manifest.
    current_index : int
        Position of the page being rendered.

    Returns
    -------
    str
        A ``<footer class="page-nav">`` block. A missing neighbour is rendered
        as an empty ``<span></span>`` so the footer keeps two slots.
    """
    lines = ['<footer class="page-nav">']
    if current_index > 0:
        prev = pages[current_index - 1]
        lines.append(
            f'  <a href="{escape(prev.destination)}" class="prev">'
            f"← {escape(prev.nav_label)}</a>"
        )
    else:
        lines.append("  <span></span>")
    if current_index < len(pages) - 1:
        nxt = pages[current_index + 1]
        lines.append(
            f'  <a href="{escape(nxt.destination)}" class="next">'
            f"{escape(nxt.nav_label)} →</a>"
        )
    else:
        lines.append("  <span></span>")
    lines.append("</footer>")
    return "\n".join(lines)


def render_toc(headings: cabc.Sequence[Heading]) -> str:
    """Return the "On This Page" box, or an empty string when there are no headings.

    Entries form a flat list; level-three headings carry ``class="toc-sub"`` so
    the stylesheet can indent them. Nesting is not validated.
    """
    if not headings:
        return ""
    lines = ['<nav class="toc">', "<h2>On This Page</h2>", "<ul>"]
    for heading in headings:
        sub = ' class="toc-sub"' if heading.level == 3 else ""
        lines.append(
            f'  <li{sub}><a href="#{heading.anchor_id}">'
            f"{escape(heading.text)}</a></li>"
        )
    lines.extend(("</ul>", "</nav>"))
    return "\n".join(lines)


__all__ = ["render_breadcrumb", "render_nav", "render_pager", "render_toc"]
