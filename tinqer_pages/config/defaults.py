"""Built-in site definition used when no configuration file is supplied."""

from __future__ import annotations

from pathlib import Path

from .._constants import LOGO_FILENAME, STYLESHEET_FILENAME, TEMPLATE_FILENAME
from .models import PageEntry, SiteConfig

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
DEFAULT_SOURCE_ROOT = Path("../tinqer")
DEFAULT_OUTPUT_DIR = Path("build")

# (source relative to the Tinqer checkout, destination, title, nav label)
DEFAULT_PAGES: tuple[tuple[str, str, str, str], ...] = (
    ("README.md", "index.html", "Getting Started", "Getting Started"),
    ("docs/guide.md", "guide.html", "Guide", "Guide"),
    ("docs/api-reference.md", "api-reference.html", "API Reference", "API Reference"),
    ("docs/adapters.md", "adapters.html", "Adapters", "Adapters"),
    ("docs/development.md", "development.html", "Development", "Development"),
    ("ARCHITECTURE.md", "architecture.html", "Architecture", "Architecture"),
)


def default_site_config(
    *,
    source_root: Path = DEFAULT_SOURCE_ROOT,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
) -> SiteConfig:
    """Return the Tinqer documentation site with the bundled template and assets.

    Parameters
    ----------
    source_root : Path, optional
        Checkout of the Tinqer repository holding the markdown sources.
    output_dir : Path, optional
        Directory receiving the generated HTML and copied assets.

    Returns
    -------
    SiteConfig
        Configuration describing the six standard documentation pages.
    """
    pages = tuple(
        PageEntry(
            source_path=source_root / source,
            destination=destination,
            title=title,
            nav_label=nav_label,
        )
        for source, destination, title, nav_label in DEFAULT_PAGES
    )
    return SiteConfig(
        pages=pages,
        output_dir=output_dir,
        template_path=TEMPLATES_DIR / TEMPLATE_FILENAME,
        assets=(TEMPLATES_DIR / STYLESHEET_FILENAME, TEMPLATES_DIR / LOGO_FILENAME),
    )


__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_PAGES",
    "DEFAULT_SOURCE_ROOT",
    "TEMPLATES_DIR",
    "default_site_config",
]
