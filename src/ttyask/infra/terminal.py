"""Terminal-backed implementations of the core I/O protocols.

* :class:`StdinLineReader` — blocking line reads from a text stream.
* :class:`RichTextRenderer` — styled text via a Rich console.
* :class:`RichTableRenderer` — borderless aligned tables via Rich.

``rich`` is imported lazily so that importing this module never fails
when the optional UI dependency is missing; the error surfaces as
:class:`~ttyask.exceptions.EnvironmentError` only when a renderer is
actually built.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any, TextIO

from ttyask.exceptions import EnvironmentError, InputClosedError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class StdinLineReader:
    """Read answer lines from *stream* (``sys.stdin`` by default).

    Each call blocks until a full line is available.  The trailing
    ``\\n`` / ``\\r\\n`` is removed; nothing else is altered.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    def read_line(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if line == "":
            raise InputClosedError(
                "Input stream closed before an answer was given.",
                hint="Run interactively, or pipe one answer per prompt.",
            )
        return line.rstrip("\r\n")


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _style(color: str | None, bold: bool) -> str:
    parts: list[str] = []
    if bold:
        parts.append("bold")
    if color:
        parts.append(color)
    return " ".join(parts)


class RichTextRenderer:
    """Write styled text to a Rich console.

    Text is wrapped in :class:`rich.text.Text` so that user-provided
    strings containing ``[...]`` are never parsed as markup.
    """

    def __init__(self, console: Any | None = None) -> None:
        self._console: Any = console if console is not None else get_rich_console()

    def write(
        self,
        text: str,
        *,
        color: str | None = None,
        bold: bool = False,
        newline: bool = True,
    ) -> None:
        from rich.text import Text

        self._console.print(
            Text(text, style=_style(color, bold)),
            end="\n" if newline else "",
            soft_wrap=True,
        )


class RichTableRenderer:
    """Render rows as a borderless, left-aligned Rich grid.

    The separator is drawn as its own column between every pair of
    cells, so labels stay aligned whatever its width.
    """

    def __init__(self, console: Any | None = None) -> None:
        self._console: Any = console if console is not None else get_rich_console()

    def render(self, rows: Sequence[Sequence[str]], *, separator: str = " ") -> None:
        from rich.table import Table
        from rich.text import Text

        table = Table.grid()
        width = max((len(row) for row in rows), default=0)
        for column in range(width):
            if column:
                table.add_column(no_wrap=True)
            table.add_column(justify="left", no_wrap=True)
        for row in rows:
            cells: list[Text] = []
            for column in range(width):
                if column:
                    cells.append(Text(separator))
                cells.append(Text(row[column] if column < len(row) else ""))
            table.add_row(*cells)
        self._console.print(table)
