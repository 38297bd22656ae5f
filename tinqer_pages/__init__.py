"""Static documentation site generator for the Tinqer project.

This package renders Tinqer's markdown guides into a small static site: each
page gets the shared template, navigation, breadcrumb, an "On This Page"
table of contents and prev/next links. It exposes the CLI entry points used by
the ``tinqer-pages`` console script.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from tinqer_pages import main
>>> main()  # doctest: +SKIP
>>> from tinqer_pages import app
>>> app(["--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
