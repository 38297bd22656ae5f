"""End-to-end tests for building a documentation site.

These tests drive :class:`tinqer_pages.generator.SiteBuilder` against a small
site written to ``tmp_path``: two markdown sources, a template carrying all six
placeholders, a stylesheet and a logo. They verify that:

* Assets are copied byte for byte into a freshly created output directory.
* Every page is written in manifest order with the expected navigation,
  breadcrumb, pager and table of contents.
* The body equals what the renderer produces for the page's source.
* A fake renderer can be injected in place of Python-Markdown.
* Failures abort the build without cleaning up pages already written.
* Console progress and warnings go through the reporter.

Usage
-----
Run ``pytest tests/test_site_build.py -v``.
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from tinqer_pages.config import PageEntry, SiteConfig
from tinqer_pages.generator import (
    HtmlContentRenderer,
    PageTemplate,
    ParsedDocument,
    SiteBuilder,
)
from tinqer_pages.markdown_parser import Token
from tinqer_pages.reporting import ConsoleReporter, NullReporter

TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>{{TITLE}} - Tinqer</title></head>
<body>
<aside>{{NAV}}</aside>
<main>
{{BREADCRUMB}}
{{TOC}}
<article>{{CONTENT}}</article>
{{PAGE_NAV}}
</main>
</body>
</html>
"""

README = """# Tinqer

Type-safe queries.

## Installation

Run `npm install`.

### Requirements

Node 20.

## Quick Start

```typescript
const rows = from(users).where((u) => u.age > 18);
```
"""

GUIDE = """# Guide

## Filtering

Use `where`.
"""

LOGO_BYTES = b'<svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>\n\x00\xff'


@dc.dataclass
class RecordingReporter:
    """Reporter capturing messages for assertions."""

    infos: list[str] = dc.field(default_factory=list)
    warnings: list[str] = dc.field(default_factory=list)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)


class FakeRenderer:
    """Renderer stub treating every ``## `` line as a level-two heading."""

    def parse(self, text: str) -> ParsedDocument:
        tokens: list[Token] = []
        for line in text.splitlines():
            if line.startswith("## "):
                tokens.extend(
                    (
                        Token("heading_open", "h2"),
                        Token("inline", "", line[3:].strip()),
                        Token("heading_close", "h2"),
                    )
                )
        return ParsedDocument(tokens=tokens, state=text)

    def render(self, document: ParsedDocument) -> str:
        return f"<p>fake:{document.state.strip()}</p>"


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Write sources, template and assets for a two-page site."""
    docs = tmp_path / "tinqer"
    (docs / "docs").mkdir(parents=True)
    (docs / "README.md").write_text(README, encoding="utf-8")
    (docs / "docs" / "guide.md").write_text(GUIDE, encoding="utf-8")
    site = tmp_path / "site"
    site.mkdir()
    (site / "template.html").write_text(TEMPLATE, encoding="utf-8")
    (site / "styles.css").write_text("body { color: #123; }\n", encoding="utf-8")
    (site / "logo.svg").write_bytes(LOGO_BYTES)
    return tmp_path


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    """Return a two-page configuration writing into a nested build directory."""
    docs = site_root / "tinqer"
    site = site_root / "site"
    return SiteConfig(
        pages=(
            PageEntry(docs / "README.md", "index.html", "Getting Started", "Getting Started"),
            PageEntry(docs / "docs" / "guide.md", "guide.html", "Guide", "Guide"),
        ),
        output_dir=site_root / "out" / "build",
        template_path=site / "template.html",
        assets=(site / "styles.css", site / "logo.svg"),
    )


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_run_writes_pages_in_manifest_order(site_config: SiteConfig) -> None:
    """The builder returns the written pages in manifest order."""
    written = SiteBuilder(site_config, reporter=NullReporter()).run()
    out = site_config.output_dir
    assert written == [out / "index.html", out / "guide.html"]
    assert all(path.exists() for path in written)


def test_assets_are_copied_byte_for_byte(site_config: SiteConfig) -> None:
    """The stylesheet and logo land unchanged in the output directory."""
    SiteBuilder(site_config, reporter=NullReporter()).run()
    for asset in site_config.assets:
        copied = site_config.output_dir / asset.name
        assert copied.read_bytes() == asset.read_bytes(), f"{asset.name} differs"


def test_first_page_furniture(site_config: SiteConfig) -> None:
    """Page 0 has the active nav entry, no prev link and a next link to page 1."""
    SiteBuilder(site_config, reporter=NullReporter()).run()
    soup = _soup(site_config.output_dir / "index.html")

    assert soup.title.get_text() == "Getting Started - Tinqer"
    active = soup.select("ul.nav-list li.active a")
    assert [a["href"] for a in active] == ["index.html"]
    assert soup.select_one("footer.page-nav a.prev") is None
    assert soup.select_one("footer.page-nav a.next")["href"] == "guide.html"
    assert soup.select_one("div.breadcrumb").get_text() == "Home"


def test_first_page_body_matches_renderer_output(site_config: SiteConfig) -> None:
    """The article body is exactly what the renderer produces for the source."""
    SiteBuilder(site_config, reporter=NullReporter()).run()
    html = (site_config.output_dir / "index.html").read_text(encoding="utf-8")
    expected = HtmlContentRenderer().markdown(README)
    assert f"<article>{expected}</article>" in html


def test_first_page_toc_targets_heading_ids(site_config: SiteConfig) -> None:
    """TOC entries cover h2/h3 headings and point at their rendered ids."""
    SiteBuilder(site_config, reporter=NullReporter()).run()
    soup = _soup(site_config.output_dir / "index.html")

    toc_links = soup.select("nav.toc li a")
    assert [a.get_text() for a in toc_links] == [
        "Installation",
        "Requirements",
        "Quick Start",
    ]
    ids = {h["id"] for h in soup.select("article h2, article h3")}
    for link in toc_links:
        assert link["href"].removeprefix("#") in ids
    sub = soup.select("nav.toc li.toc-sub a")
    assert [a.get_text() for a in sub] == ["Requirements"]
    assert soup.select_one("article div.codehilite")["data-language"] == "typescript"


def test_second_page_furniture(site_config: SiteConfig) -> None:
    """The last page links back, has no next link and a Home breadcrumb."""
    SiteBuilder(site_config, reporter=NullReporter()).run()
    soup = _soup(site_config.output_dir / "guide.html")

    assert [a["href"] for a in soup.select("li.active a")] == ["guide.html"]
    assert soup.select_one("a.prev")["href"] == "index.html"
    assert soup.select_one("a.next") is None
    assert soup.select_one("div.breadcrumb").get_text() == "Home / Guide"


def test_injected_renderer_and_template(site_config: SiteConfig) -> None:
    """A fake renderer and in-memory template replace the real collaborators."""
    template = PageTemplate("{{TOC}}\n{{CONTENT}}")
    written = SiteBuilder(
        site_config,
        renderer=FakeRenderer(),
        reporter=NullReporter(),
        template=template,
    ).run()
    html = written[1].read_text(encoding="utf-8")
    assert '<a href="#filtering">Filtering</a>' in html
    assert "<p>fake:# Guide" in html


def test_page_without_headings_has_no_toc(site_config: SiteConfig, site_root: Path) -> None:
    """A source with no h2/h3 headings collapses the TOC region."""
    (site_root / "tinqer" / "docs" / "guide.md").write_text(
        "Just a paragraph.\n", encoding="utf-8"
    )
    SiteBuilder(site_config, reporter=NullReporter()).run()
    soup = _soup(site_config.output_dir / "guide.html")
    assert soup.select_one("nav.toc") is None


def test_template_without_toc_placeholder_still_builds(
    site_config: SiteConfig, site_root: Path
) -> None:
    """Dropping {{TOC}} from the template omits the TOC and only warns."""
    template_path = site_root / "site" / "template.html"
    template_path.write_text(TEMPLATE.replace("{{TOC}}\n", ""), encoding="utf-8")
    reporter = RecordingReporter()

    written = SiteBuilder(site_config, reporter=reporter).run()

    soup = _soup(written[0])
    assert soup.select_one("nav.toc") is None
    assert soup.select_one("article h2") is not None
    assert reporter.warnings == ["template has no {{TOC}} placeholder"]


def test_missing_source_aborts_and_keeps_earlier_pages(
    site_config: SiteConfig, site_root: Path
) -> None:
    """A missing source stops the build; pages already written remain."""
    docs = site_root / "tinqer"
    site_config.pages = (
        *site_config.pages[:1],
        PageEntry(docs / "missing.md", "missing.html", "Missing", "Missing"),
        *site_config.pages[1:],
    )

    with pytest.raises(FileNotFoundError):
        SiteBuilder(site_config, reporter=NullReporter()).run()

    assert (site_config.output_dir / "index.html").exists()
    assert not (site_config.output_dir / "missing.html").exists()
    assert not (site_config.output_dir / "guide.html").exists()


def test_missing_template_aborts(site_config: SiteConfig, site_root: Path) -> None:
    """An unreadable template propagates its OSError."""
    (site_root / "site" / "template.html").unlink()
    with pytest.raises(FileNotFoundError):
        SiteBuilder(site_config, reporter=NullReporter()).run()


def test_anchor_collisions_are_reported(site_config: SiteConfig, site_root: Path) -> None:
    """Headings sharing a slug still build but produce a warning."""
    (site_root / "tinqer" / "docs" / "guide.md").write_text(
        "## Setup\n\nOne.\n\n## Set.up\n\nTwo.\n", encoding="utf-8"
    )
    reporter = RecordingReporter()
    SiteBuilder(site_config, reporter=reporter).run()

    soup = _soup(site_config.output_dir / "guide.html")
    assert [h["id"] for h in soup.select("article h2")] == ["setup", "setup"]
    assert reporter.warnings == [
        "guide.html: several headings share the anchor '#setup'"
    ]


def test_console_reporter_prints_progress(
    site_config: SiteConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Progress lines go to stdout in build order."""
    SiteBuilder(site_config, reporter=ConsoleReporter()).run()
    out = capsys.readouterr().out
    expected_order = [
        "Building Tinqer documentation...",
        "Copying styles.css...",
        "  ✓ Copied styles.css",
        "Copying logo.svg...",
        "  ✓ Copied logo.svg",
        "Building index.html...",
        "  ✓ Created index.html",
        "Building guide.html...",
        "  ✓ Created guide.html",
        "✓ Build complete! Output in",
    ]
    positions = [out.index(line) for line in expected_order]
    assert positions == sorted(positions), out


def test_console_reporter_sends_warnings_to_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Warnings are prefixed and written to stderr."""
    ConsoleReporter().warning("template has no {{TOC}} placeholder")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "warning: template has no {{TOC}} placeholder\n"


def test_asset_copies_are_followed_by_a_blank_line(site_config: SiteConfig) -> None:
    """Copy progress comes in pairs and ends with one empty line."""
    reporter = RecordingReporter()
    SiteBuilder(site_config, reporter=reporter).run()
    assert reporter.infos[1:6] == [
        "Copying styles.css...",
        "  ✓ Copied styles.css",
        "Copying logo.svg...",
        "  ✓ Copied logo.svg",
        "",
    ]
    assert reporter.infos[6] == "Building index.html..."
