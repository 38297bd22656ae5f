"""Cyclopts CLI entrypoint for building the Tinqer documentation site.

The ``tinqer-pages`` console script defined here renders the Tinqer markdown
guides into static HTML. Run without arguments it builds the built-in page
list from ``../tinqer`` into ``build/``; ``--config`` points it at a YAML site
definition instead and ``--output-dir`` redirects the output.

Examples
--------
Build the default site:

>>> from tinqer_pages.cli import main
>>> main()  # doctest: +SKIP

Build from a site config into a custom directory:

>>> from tinqer_pages.cli import app
>>> app(["--config", "docs-site.yaml", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, default_site_config, load_site_config
from .generator import SiteBuilder
from .reporting import ConsoleReporter

app = App(name="tinqer-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _resolve_config(config: Path | None, output_dir: Path | None) -> SiteConfig:
    """Load the requested site config, applying the output directory override."""
    if config is None:
        if output_dir is None:
            return default_site_config()
        return default_site_config(output_dir=output_dir)
    site_config = load_site_config(config)
    if output_dir is not None:
        site_config.output_dir = output_dir
    return site_config


@app.default
def build(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to a YAML site config", env_var="INPUT_CONFIG"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Build every documentation page, copying the stylesheet and logo alongside.

    Parameters
    ----------
    config : Path or None, optional
        YAML site configuration; when ``None`` (default) the built-in Tinqer
        page list is used.
    output_dir : Path or None, optional
        Output directory overriding the configured one.

    Returns
    -------
    None
        Writes the site and prints progress lines.

    Raises
    ------
    SiteConfigError
        If the configuration file describes an invalid manifest.
    OSError
        If a source, template or asset is missing or an output cannot be
        written; the build aborts on the first failure.
    """
    site_config = _resolve_config(config, output_dir)
    SiteBuilder(site_config, reporter=ConsoleReporter()).run()


def main() -> None:
    """Invoke the Cyclopts application that powers the ``tinqer-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
