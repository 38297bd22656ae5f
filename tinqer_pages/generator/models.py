"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from tinqer_pages.markdown_parser import Token


@dc.dataclass(slots=True)
class ParsedDocument:
    """Markdown parsed by a renderer but not yet serialized to HTML.

    Attributes
    ----------
    tokens : list[Token]
        Block-level token stream in document order; headings appear as
        ``heading_open`` / ``inline`` / ``heading_close`` triples.
    state : Any
        Renderer-specific data needed by ``render``. ``None`` for empty
        documents.
    """

    tokens: list[Token]
    state: typ.Any = None


__all__ = ["ParsedDocument", "Token"]
