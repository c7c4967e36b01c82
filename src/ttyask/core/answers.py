"""Pure answer resolution for the three prompt kinds.

Every function here is deterministic and side-effect free: it takes
the raw line the user typed plus the prompt's parameters and either
returns the typed value or raises
:class:`~ttyask.exceptions.InvalidInputError`.  The retry loop that
reacts to that error lives in :mod:`ttyask.core.prompter`.
"""

from __future__ import annotations

from typing import TypeVar

from ttyask.core.models import OptionSet
from ttyask.exceptions import InvalidInputError

K = TypeVar("K")

_YES: frozenset[str] = frozenset({"y", "yes"})
_NO: frozenset[str] = frozenset({"n", "no"})

CHOICE_PROMPT: str = "Enter a number: "


# ---------------------------------------------------------------------------
# Confirm
# ---------------------------------------------------------------------------

def confirm_suffix(default: bool) -> str:
    """Return the hint appended to a yes/no question."""
    return " (Y/n): " if default else " (y/N): "


def resolve_confirm(raw: str, default: bool) -> bool:
    """Map a yes/no answer to a boolean.

    ``y``/``yes`` → ``True``, ``n``/``no`` → ``False`` (case-insensitive),
    empty → *default*.
    """
    answer = raw.strip().lower()
    if answer in _YES:
        return True
    if answer in _NO:
        return False
    if answer == "":
        return default
    raise InvalidInputError(f"Not a yes/no answer: {raw!r}")


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------

def index_marker(index: int, is_default: bool) -> str:
    """Render a display index, bracketed when it marks the default."""
    if is_default:
        return f"[{index}]"
    return f" {index} "


def option_rows(options: OptionSet[K], default_key: object) -> list[list[str]]:
    """Build the two-column ``[marker, label]`` rows for a menu."""
    return [
        [index_marker(index, option.key == default_key), option.label]
        for index, option in enumerate(options)
    ]


def resolve_choice(raw: str, options: OptionSet[K], default_key: K | None) -> K | None:
    """Map a menu answer to an option key.

    A string of ASCII digits selects the option at that zero-based
    position; an empty answer returns *default_key* unchanged, even
    when it is not one of the set's keys.
    """
    answer = raw.strip()
    if answer == "":
        return default_key
    if answer.isascii() and answer.isdigit():
        # Compare lengths first: int() rejects very long digit strings.
        digits = answer.lstrip("0") or "0"
        if len(digits) <= len(str(len(options))) and int(digits) < len(options):
            return options.key_at(int(digits))
        raise InvalidInputError(f"Choice out of range: {answer}")
    raise InvalidInputError(f"Not a number: {raw!r}")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def compose_input_message(message: str, default: str) -> str:
    """Append the bracketed default (if any) and the ``": "`` terminator."""
    if default:
        message = f"{message} [{default}]"
    return f"{message}: "


def resolve_input(raw: str, default: str, required: bool) -> str:
    """Return the trimmed answer, falling back to *default* when empty."""
    answer = raw.strip()
    if answer:
        return answer
    if default or not required:
        return default
    raise InvalidInputError("An answer is required.")
