"""Domain models for ttyask.

All models are **frozen** dataclasses: immutable value objects that
live for one prompt call (including its retries) or, for
:class:`PromptSettings`, for the whole process.  They perform no I/O.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from ttyask.exceptions import EmptyOptionSetError, InvalidOptionSetError

K = TypeVar("K", bound=Hashable)

_TRUTHY_ENV_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})

ASSUME_YES_ENV_VAR: str = "TTYASK_ASSUME_YES"
"""Environment variable that enables auto-yes mode at startup."""


# ---------------------------------------------------------------------------
# Process-wide settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PromptSettings:
    """Settings established once at startup and read by every prompt."""

    auto_yes: bool = False
    """When true, confirmations resolve affirmatively without reading input."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> PromptSettings:
        """Build settings from environment variables.

        ``TTYASK_ASSUME_YES`` enables auto-yes mode when set to one of
        ``1``, ``true``, ``yes`` or ``on`` (case-insensitive).
        """
        raw = environ.get(ASSUME_YES_ENV_VAR, "")
        return cls(auto_yes=raw.strip().lower() in _TRUTHY_ENV_VALUES)


# ---------------------------------------------------------------------------
# Per-call prompt values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConfirmPrompt:
    """A yes/no question."""

    question: str
    default: bool = False


@dataclass(frozen=True, slots=True)
class InputPrompt:
    """A free-text question with an optional default."""

    message: str
    default: str = ""
    required: bool = False


# ---------------------------------------------------------------------------
# Option set
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Option(Generic[K]):
    """One selectable entry of an :class:`OptionSet`."""

    key: K
    """Opaque identifier returned when this option is chosen."""

    label: str
    """Text shown to the user."""


@dataclass(frozen=True)
class OptionSet(Generic[K]):
    """Ordered, uniquely-keyed collection of :class:`Option` entries.

    Order is significant: an option's position is its zero-based display
    index.  Construction rejects duplicate keys and empty sets.
    """

    options: tuple[Option[K], ...]

    def __post_init__(self) -> None:
        if not self.options:
            raise EmptyOptionSetError(
                "Cannot ask for a choice from an empty option set.",
                hint="Provide at least one KEY=LABEL option.",
            )
        seen: set[K] = set()
        for option in self.options:
            if option.key in seen:
                raise InvalidOptionSetError(
                    f"Duplicate option key: {option.key!r}",
                )
            seen.add(option.key)

    @classmethod
    def from_mapping(cls, mapping: Mapping[K, str]) -> OptionSet[K]:
        """Build from an insertion-ordered ``{key: label}`` mapping."""
        return cls(tuple(Option(key, label) for key, label in mapping.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[K, str]]) -> OptionSet[K]:
        """Build from ``(key, label)`` pairs, keeping their order."""
        return cls(tuple(Option(key, label) for key, label in pairs))

    def __len__(self) -> int:
        return len(self.options)

    def __iter__(self) -> Iterator[Option[K]]:
        return iter(self.options)

    def key_at(self, index: int) -> K | None:
        """Return the key at display position *index*, or ``None``."""
        if 0 <= index < len(self.options):
            return self.options[index].key
        return None

    def index_of(self, key: object) -> int | None:
        """Return the display position of *key*, or ``None`` if absent."""
        for index, option in enumerate(self.options):
            if option.key == key:
                return index
        return None


@dataclass(frozen=True)
class ChoicePrompt(Generic[K]):
    """A numbered single-choice menu.

    *default_key* is honoured only when it is one of the set's keys for
    marking purposes; an empty answer still returns it as-is.
    """

    options: OptionSet[K]
    message: str
    default_key: K | None = None
