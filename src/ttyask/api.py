"""Module-level convenience prompts bound to the real terminal.

The shared :class:`~ttyask.core.prompter.Prompter` is built on first
use.  Its settings are read from the environment at that moment and
never change afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import cache
from typing import TypeVar

from ttyask.core.models import OptionSet, PromptSettings
from ttyask.core.prompter import Prompter

K = TypeVar("K")


@cache
def default_prompter() -> Prompter:
    """Return the process-wide terminal prompter."""
    from ttyask.infra.terminal import (
        RichTableRenderer,
        RichTextRenderer,
        StdinLineReader,
        get_rich_console,
    )
    from ttyask.infra.translation import GettextTranslator

    console = get_rich_console()
    return Prompter(
        StdinLineReader(),
        RichTextRenderer(console),
        RichTableRenderer(console),
        GettextTranslator(),
        PromptSettings.from_env(os.environ),
    )


def confirm(question: str, default: bool = False) -> bool:
    """Ask a yes/no question on the terminal."""
    return default_prompter().confirm(question, default)


def choice(
    options: OptionSet[K] | Mapping[K, str],
    message: str,
    default_key: K | None = None,
) -> K | None:
    """Show a numbered menu on the terminal and return the chosen key."""
    return default_prompter().choice(options, message, default_key)


def ask(message: str, default: str = "", required: bool = False) -> str:
    """Ask for free text on the terminal."""
    return default_prompter().input(message, default, required)
