"""Substitute rendered fragments into the shared page template."""

from __future__ import annotations

import collections.abc as cabc
import re
from pathlib import Path

from tinqer_pages._constants import PLACEHOLDERS

PLACEHOLDER_PATTERN = re.compile("|".join(re.escape(token) for token in PLACEHOLDERS))


class PageTemplate:
    """HTML template containing the six ``{{NAME}}`` placeholders.

    Substitution is literal: the first occurrence of each placeholder is
    replaced with its fragment in a single pass over the template text, so a
    fragment that happens to contain placeholder text is emitted unchanged.
    Later duplicates of a placeholder are left as-is, and a fragment whose
    placeholder does not appear in the template is dropped without error.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    @classmethod
    def from_path(cls, path: Path) -> PageTemplate:
        """Read a UTF-8 template from ``path``."""
        return cls(path.read_text(encoding="utf-8"))

    @property
    def missing_placeholders(self) -> list[str]:
        """Placeholders that do not appear in the template text."""
        return [token for token in PLACEHOLDERS if token not in self.text]

    def render(self, fragments: cabc.Mapping[str, str]) -> str:
        """Return the template with each placeholder replaced by its fragment.

        Parameters
        ----------
        fragments : Mapping[str, str]
            Rendered HTML keyed by placeholder token (for example
            ``{"{{TITLE}}": "Guide"}``). Placeholders without a fragment are
            replaced with an empty string.

        Returns
        -------
        str
            The composed page.
        """
        used: set[str] = set()

        def _repl(match: re.Match[str]) -> str:
            token = match.group(0)
            if token in used:
                return token
            used.add(token)
            return fragments.get(token, "")

        return PLACEHOLDER_PATTERN.sub(_repl, self.text)


__all__ = ["PLACEHOLDER_PATTERN", "PageTemplate"]
