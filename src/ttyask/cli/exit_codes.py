"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""A known TtyaskError was caught, or ``confirm --exit-status`` got "no"."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

INPUT_CLOSED: int = 3
"""Standard input reached end-of-file before a valid answer was given."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
