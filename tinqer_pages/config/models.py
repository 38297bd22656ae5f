"""Typed dataclasses describing the documentation site manifest."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class PageEntry:
    """One page of the site, in navigation order.

    Attributes
    ----------
    source_path : Path
        Markdown file rendered into the page.
    destination : str
        Output filename relative to the build directory (for example
        ``"guide.html"``); also used as the link target in navigation.
    title : str
        Page title used for ``<title>`` and the breadcrumb.
    nav_label : str
        Label shown in the navigation list and the prev/next pager.
    """

    source_path: Path
    destination: str
    title: str
    nav_label: str


@dc.dataclass(slots=True)
class SiteConfig:
    """Everything a build needs: the manifest plus input and output locations."""

    pages: tuple[PageEntry, ...]
    output_dir: Path
    template_path: Path
    assets: tuple[Path, ...] = ()
    pygments_style: str = "monokai"
    site_name: str = "Tinqer"

    def __post_init__(self) -> None:
        """Normalise the manifest and enforce its invariants."""
        self.pages = tuple(self.pages)
        self.assets = tuple(self.assets)
        if not self.pages:
            msg = "No pages defined in site configuration."
            raise SiteConfigError(msg)
        seen: set[str] = set()
        for page in self.pages:
            if page.destination in seen:
                msg = f"Duplicate page destination '{page.destination}'."
                raise SiteConfigError(msg)
            seen.add(page.destination)


__all__ = ["PageEntry", "SiteConfig", "SiteConfigError"]
