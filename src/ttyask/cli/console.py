"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) keep working even when Rich
is not installed.
"""

from __future__ import annotations

import logging
import sys

from ttyask.exceptions import EnvironmentError
from ttyask.infra.terminal import get_rich_console


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(verbose: bool) -> None:
    """Route ``ttyask`` log records to stderr.

    Uses :class:`rich.logging.RichHandler` when Rich is importable and a
    plain :class:`logging.StreamHandler` otherwise.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=get_rich_console(), show_path=False)

    root = logging.getLogger("ttyask")
    root.handlers[:] = [handler]
    root.setLevel(level)
