"""Arrow-key prompts for the CLI layer (``--select`` mode).

An alternative front-end to the numbered menu and y/N prompt of
:class:`~ttyask.core.prompter.Prompter`, built on questionary.  It
keeps the same contract: the chosen option key (or boolean) is
returned, the default is preselected, and auto-yes mode confirms
without any interaction.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from ttyask.core.answers import confirm_suffix
from ttyask.core.models import OptionSet, PromptSettings
from ttyask.core.prompter import PROMPT_COLOR
from ttyask.core.protocols import TextRenderer
from ttyask.exceptions import EnvironmentError, SelectionCancelledError

logger = logging.getLogger(__name__)

K = TypeVar("K")


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def select_option(
    options: OptionSet[K],
    message: str,
    default_key: K | None = None,
) -> K:
    """Let the user pick an option with the arrow keys.

    Raises
    ------
    SelectionCancelledError
        If the user dismisses the selector (Esc / Ctrl+C).
    """
    questionary = _import_questionary()

    # Values are display indices so that keys of any type round-trip.
    choices = [
        questionary.Choice(title=option.label, value=index)
        for index, option in enumerate(options)
    ]
    default_index = options.index_of(default_key)
    default = choices[default_index] if default_index is not None else None

    selected: int | None = questionary.select(
        message,
        choices=choices,
        default=default,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # None on Ctrl+C / Esc

    if selected is None:
        raise SelectionCancelledError(
            "No option selected.",
            hint="Use arrow keys to pick an option, then press Enter.",
        )
    return options.options[selected].key


def confirm_select(
    question: str,
    default: bool,
    settings: PromptSettings,
    renderer: TextRenderer | None = None,
) -> bool:
    """Ask a yes/no question with questionary, honouring auto-yes mode.

    In auto-yes mode the question is written to *renderer* (the stderr
    console by default) followed by a ``y`` echo, as the numbered prompt
    does, and questionary is never imported.
    """
    if settings.auto_yes:
        if renderer is None:
            from ttyask.infra.terminal import RichTextRenderer

            renderer = RichTextRenderer()
        logger.debug("Auto-yes: confirming %r", question)
        renderer.write(
            question + confirm_suffix(default),
            color=PROMPT_COLOR,
            bold=True,
            newline=False,
        )
        renderer.write("y")
        return True

    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(question, default=default).ask()
    if answer is None:
        raise SelectionCancelledError("No answer given.")
    return answer
