"""Load and validate the documentation site configuration.

This subpackage describes the ordered page manifest and the build locations as
dataclasses (:class:`SiteConfig`, :class:`PageEntry`). The built-in Tinqer
site comes from :func:`default_site_config`; :func:`load_site_config` reads an
equivalent definition from YAML so the same generator can publish another
checkout or page list.

Examples
--------
>>> from pathlib import Path
>>> from tinqer_pages.config import default_site_config
>>> site = default_site_config(source_root=Path("../tinqer"))
>>> [page.destination for page in site.pages][:2]
['index.html', 'guide.html']
"""

from .defaults import DEFAULT_PAGES, TEMPLATES_DIR, default_site_config
from .loader import load_site_config
from .models import PageEntry, SiteConfig, SiteConfigError

__all__ = [
    "DEFAULT_PAGES",
    "TEMPLATES_DIR",
    "PageEntry",
    "SiteConfig",
    "SiteConfigError",
    "default_site_config",
    "load_site_config",
]
