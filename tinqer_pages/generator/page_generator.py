"""High-level orchestration for documentation site generation.

This module turns a :class:`~tinqer_pages.config.SiteConfig` into a static
site. :class:`SiteBuilder` prepares the output directory, copies the static
assets and asks :class:`PageBuilder` to render every manifest entry in order.
Each page goes through the same pipeline: read the markdown, parse it, render
the body, collect level-two and level-three headings for the table of
contents, build the navigation furniture and substitute everything into the
shared template.

Builds are sequential and fail fast: the first unreadable source or failed
write propagates out of :meth:`SiteBuilder.run`, leaving pages written so far
on disk.

Example
-------
>>> from pathlib import Path
>>> from tinqer_pages.config import default_site_config
>>> from tinqer_pages.generator import SiteBuilder
>>> config = default_site_config(source_root=Path("../tinqer"))
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('build/index.html'), ...]
"""

from __future__ import annotations

import shutil
import typing as typ
from html import escape

from tinqer_pages._constants import (
    BREADCRUMB_PLACEHOLDER,
    CONTENT_PLACEHOLDER,
    NAV_PLACEHOLDER,
    PAGE_NAV_PLACEHOLDER,
    TITLE_PLACEHOLDER,
    TOC_PLACEHOLDER,
)
from tinqer_pages.generator.furniture import (
    render_breadcrumb,
    render_nav,
    render_pager,
    render_toc,
)
from tinqer_pages.generator.renderer import HtmlContentRenderer, MarkdownRenderer
from tinqer_pages.generator.template import PageTemplate
from tinqer_pages.markdown_parser import extract_headings, find_anchor_collisions
from tinqer_pages.reporting import ConsoleReporter, Reporter

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tinqer_pages.config import PageEntry, SiteConfig


class PageBuilder:
    """Render one manifest entry into a complete HTML page."""

    def __init__(
        self,
        config: SiteConfig,
        template: PageTemplate,
        renderer: MarkdownRenderer,
        reporter: Reporter,
    ) -> None:
        self.config = config
        self.template = template
        self.renderer = renderer
        self.reporter = reporter

    def build(self, page: PageEntry, index: int) -> Path:
        """Render ``page`` (at manifest position ``index``) and write it to disk.

        Parameters
        ----------
        page : PageEntry
            Manifest entry to render.
        index : int
            Position of ``page`` in ``config.pages``; drives the active nav
            entry, the breadcrumb and the pager.

        Returns
        -------
        Path
            Path of the written HTML file.

        Raises
        ------
        OSError
            If the markdown source cannot be read or the page cannot be
            written.
        """
        self.reporter.info(f"Building {page.destination}...")
        markdown_source = page.source_path.read_text(encoding="utf-8")
        html = self.compose(page, index, markdown_source)
        output_path = self.config.output_dir / page.destination
        output_path.write_text(html, encoding="utf-8")
        self.reporter.info(f"  ✓ Created {page.destination}")
        return output_path

    def compose(self, page: PageEntry, index: int, markdown_source: str) -> str:
        """Return the finished page HTML for ``markdown_source`` without touching disk."""
        document = self.renderer.parse(markdown_source)
        content = self.renderer.render(document)
        for anchor_id in find_anchor_collisions(document.tokens):
            self.reporter.warning(
                f"{page.destination}: several headings share the anchor '#{anchor_id}'"
            )
        toc = render_toc(extract_headings(document.tokens))
        pages = self.config.pages
        return self.template.render(
            {
                TITLE_PLACEHOLDER: escape(page.title, quote=False),
                NAV_PLACEHOLDER: render_nav(pages, index),
                BREADCRUMB_PLACEHOLDER: render_breadcrumb(pages, index),
                TOC_PLACEHOLDER: toc,
                CONTENT_PLACEHOLDER: content,
                PAGE_NAV_PLACEHOLDER: render_pager(pages, index),
            }
        )


class SiteBuilder:
    """Build every page of a site, in manifest order, into the output directory."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        renderer: MarkdownRenderer | None = None,
        reporter: Reporter | None = None,
        template: PageTemplate | None = None,
    ) -> None:
        """Initialize the builder with configuration and injectable collaborators.

        Parameters
        ----------
        config : SiteConfig
            Page manifest plus template, asset and output locations.
        renderer : MarkdownRenderer, optional
            Markdown engine; defaults to :class:`HtmlContentRenderer` using the
            configured Pygments style.
        reporter : Reporter, optional
            Receiver for progress messages; defaults to the console.
        template : PageTemplate, optional
            Template to use instead of reading ``config.template_path``.
        """
        self.config = config
        self.renderer = renderer or HtmlContentRenderer(config.pygments_style)
        self.reporter = reporter or ConsoleReporter()
        self._template = template

    def run(self) -> list[Path]:
        """Write the whole site and return the generated page paths in order.

        Raises
        ------
        OSError
            Raised unchanged for a missing template, source or asset, an output
            directory that cannot be created, or a failed write. The build
            stops at the first failure.
        """
        self.reporter.info(f"Building {self.config.site_name} documentation...\n")
        out_dir = self.config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)
        self._copy_assets()

        template = self._template or PageTemplate.from_path(self.config.template_path)
        for token in template.missing_placeholders:
            self.reporter.warning(f"template has no {token} placeholder")
        builder = PageBuilder(self.config, template, self.renderer, self.reporter)
        written = [
            builder.build(page, idx) for idx, page in enumerate(self.config.pages)
        ]
        self.reporter.info(f"\n✓ Build complete! Output in {out_dir.as_posix()}/")
        return written

    def _copy_assets(self) -> None:
        """Copy each static asset into the output directory byte for byte."""
        for asset in self.config.assets:
            self.reporter.info(f"Copying {asset.name}...")
            shutil.copyfile(asset, self.config.output_dir / asset.name)
            self.reporter.info(f"  ✓ Copied {asset.name}")
        self.reporter.info("")


__all__ = ["PageBuilder", "SiteBuilder"]
