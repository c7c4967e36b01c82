"""Protocols (interfaces) consumed by the core layer.

The prompter depends ONLY on these contracts, never on a concrete
terminal, so it can be driven by scripted fakes in tests and by the
Rich-backed adapters in :mod:`ttyask.infra` at runtime.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class LineReader(Protocol):
    """Blocking source of raw answer lines."""

    def read_line(self) -> str:
        """Block until one line is available and return it.

        The returned text excludes the line terminator and is otherwise
        untouched.

        Raises
        ------
        InputClosedError
            When the input stream is exhausted.
        """
        ...  # pragma: no cover


class TextRenderer(Protocol):
    """Writes styled text to the terminal."""

    def write(
        self,
        text: str,
        *,
        color: str | None = None,
        bold: bool = False,
        newline: bool = True,
    ) -> None:
        """Write *text*, optionally coloured/bold, ending the line if *newline*."""
        ...  # pragma: no cover


class TableRenderer(Protocol):
    """Writes an aligned table of plain cells to the terminal."""

    def render(self, rows: Sequence[Sequence[str]], *, separator: str = " ") -> None:
        """Render *rows* in order, cells joined by *separator*."""
        ...  # pragma: no cover


class Translator(Protocol):
    """Maps a message template to its display string."""

    def __call__(self, message: str) -> str:
        ...  # pragma: no cover
