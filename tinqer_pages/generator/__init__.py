"""Utilities for parsing, rendering, and generating Tinqer documentation pages."""

from .anchors import HeadingAnchorExtension
from .fences import FencedCodeExtension
from .furniture import render_breadcrumb, render_nav, render_pager, render_toc
from .linkify import BareLinkExtension
from .models import ParsedDocument
from .page_generator import PageBuilder, SiteBuilder
from .renderer import HtmlContentRenderer, MarkdownRenderer
from .template import PageTemplate

__all__ = [
    "BareLinkExtension",
    "FencedCodeExtension",
    "HeadingAnchorExtension",
    "HtmlContentRenderer",
    "MarkdownRenderer",
    "PageBuilder",
    "PageTemplate",
    "ParsedDocument",
    "SiteBuilder",
    "render_breadcrumb",
    "render_nav",
    "render_pager",
    "render_toc",
]
