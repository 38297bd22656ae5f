"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import LOGO_FILENAME, STYLESHEET_FILENAME, TEMPLATE_FILENAME
from .defaults import DEFAULT_OUTPUT_DIR, DEFAULT_SOURCE_ROOT, TEMPLATES_DIR
from .models import PageEntry, SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML file (for example ``docs-site.yaml``).
        Relative paths inside the file resolve against its directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with the ordered page manifest, output
        directory, template path and static assets.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the page list is missing, an entry lacks a required field, or two
        entries share a destination.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tinqer_pages.config import load_site_config
    >>> config = load_site_config(Path("docs-site.yaml"))  # doctest: +SKIP
    >>> config.pages[0].destination  # doctest: +SKIP
    'index.html'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    base_dir = path.parent

    source_root = _resolve(base_dir, defaults.get("source_root"), DEFAULT_SOURCE_ROOT)
    output_dir = _resolve(base_dir, defaults.get("output_dir"), DEFAULT_OUTPUT_DIR)
    template_path = _resolve(
        base_dir, defaults.get("template"), TEMPLATES_DIR / TEMPLATE_FILENAME
    )
    stylesheet = _resolve(
        base_dir, defaults.get("stylesheet"), TEMPLATES_DIR / STYLESHEET_FILENAME
    )
    logo = _resolve(base_dir, defaults.get("logo"), TEMPLATES_DIR / LOGO_FILENAME)

    pages_raw = raw.get("pages") or []
    if not isinstance(pages_raw, list) or not pages_raw:
        msg = "No pages defined in site configuration."
        raise SiteConfigError(msg)
    pages = tuple(
        _build_page_entry(idx, payload, source_root)
        for idx, payload in enumerate(pages_raw, start=1)
    )

    return SiteConfig(
        pages=pages,
        output_dir=output_dir,
        template_path=template_path,
        assets=(stylesheet, logo),
        pygments_style=defaults.get("pygments_style", "monokai"),
        site_name=defaults.get("site_name", "Tinqer"),
    )


def _resolve(base_dir: Path, value: object | None, default: Path) -> Path:
    """Return ``value`` as a path anchored at ``base_dir``, or ``default``."""
    if value is None or not str(value).strip():
        return default
    candidate = Path(str(value).strip()).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _build_page_entry(
    position: int, payload: object, source_root: Path
) -> PageEntry:
    """Build a PageEntry from one ``pages`` list item."""
    if not isinstance(payload, dict):
        msg = f"Page entry #{position} must be a mapping."
        raise SiteConfigError(msg)
    missing = [key for key in ("source", "output", "title") if not payload.get(key)]
    if missing:
        fields = ", ".join(missing)
        msg = f"Page entry #{position} is missing {fields}."
        raise SiteConfigError(msg)
    title = str(payload["title"])
    return PageEntry(
        source_path=source_root / str(payload["source"]),
        destination=str(payload["output"]),
        title=title,
        nav_label=str(payload.get("nav") or title),
    )


__all__ = ["load_site_config"]
