"""Custom exception hierarchy for ttyask.

Every error that crosses a layer boundary inherits from
:class:`TtyaskError` so that the CLI error boundary can render it
without a stack trace.

Hierarchy
---------
TtyaskError
├── InvalidInputError
├── InputClosedError
├── InvalidOptionSetError
│   └── EmptyOptionSetError
├── SelectionCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class TtyaskError(Exception):
    """Base exception for all ttyask errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Answers ---------------------------------------------------------------

class InvalidInputError(TtyaskError):
    """Raised when an answer does not satisfy the prompt.

    The :class:`~ttyask.core.prompter.Prompter` always recovers from
    this locally by showing a corrective message and asking again; it
    never reaches callers of the public prompt functions.
    """


class InputClosedError(TtyaskError):
    """Raised when the input stream reaches end-of-file mid-prompt."""


class SelectionCancelledError(TtyaskError):
    """Raised when an arrow-key selector is dismissed without an answer."""


# --- Option sets -----------------------------------------------------------

class InvalidOptionSetError(TtyaskError):
    """Raised when an option set is malformed (e.g. duplicate keys)."""


class EmptyOptionSetError(InvalidOptionSetError):
    """Raised when a choice is requested from an empty option set."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TtyaskError):
    """Raised when a required runtime dependency is not available."""
