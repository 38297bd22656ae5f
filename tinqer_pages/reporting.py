"""Progress reporting for site builds.

Builders never print directly; they call a :class:`Reporter`. The console
reporter writes progress to stdout and warnings to stderr, while
:class:`NullReporter` keeps tests quiet.
"""

from __future__ import annotations

import sys
import typing as typ


class Reporter(typ.Protocol):
    """Minimal sink for build progress messages."""

    def info(self, message: str) -> None:
        """Record a progress line."""
        ...

    def warning(self, message: str) -> None:
        """Record a non-fatal problem."""
        ...


class ConsoleReporter:
    """Print progress lines to stdout and warnings to stderr."""

    def info(self, message: str) -> None:
        """Print ``message`` to stdout."""
        print(message)

    def warning(self, message: str) -> None:
        """Print ``message`` to stderr with a ``warning:`` prefix."""
        print(f"warning: {message}", file=sys.stderr)


class NullReporter:
    """Discard every message."""

    def info(self, message: str) -> None:
        """Ignore ``message``."""

    def warning(self, message: str) -> None:
        """Ignore ``message``."""


__all__ = ["ConsoleReporter", "NullReporter", "Reporter"]
