"""The prompt service: render, read, validate, retry.

:class:`Prompter` owns the retry state machine shared by the three
prompt kinds.  It depends on a :class:`~ttyask.core.protocols.LineReader`,
two renderers, a translator and the startup
:class:`~ttyask.core.models.PromptSettings`, all injected at
construction time.

Guarantees
----------
* :class:`~ttyask.exceptions.InvalidInputError` never escapes; an
  invalid answer shows a translated error and the prompt is asked
  again, with no attempt limit.
* The only error a caller can observe is
  :class:`~ttyask.exceptions.InputClosedError` (end of input), raised
  by the reader.
* No state is carried between two top-level calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TypeVar

from ttyask.core.answers import (
    CHOICE_PROMPT,
    compose_input_message,
    confirm_suffix,
    option_rows,
    resolve_choice,
    resolve_confirm,
    resolve_input,
)
from ttyask.core.models import (
    ChoicePrompt,
    ConfirmPrompt,
    InputPrompt,
    OptionSet,
    PromptSettings,
)
from ttyask.core.protocols import LineReader, TableRenderer, TextRenderer, Translator
from ttyask.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

K = TypeVar("K")

PROMPT_COLOR: str = "cyan"
ERROR_COLOR: str = "red"

CONFIRM_ERROR: str = "Please answer 'y' or 'n'."
CHOICE_ERROR: str = "Invalid choice. Enter one of the numbers listed above."
INPUT_ERROR: str = "A value is required."


def _identity(message: str) -> str:
    return message


class Prompter:
    """Interactive yes/no, menu and free-text prompts.

    Parameters
    ----------
    reader:
        Source of answer lines.
    renderer:
        Styled text output.
    table_renderer:
        Table output used for choice menus.
    translator:
        Applied to every error message shown to the user.  Defaults to
        the identity function.
    settings:
        Startup settings; ``settings.auto_yes`` short-circuits
        :meth:`confirm`.
    """

    def __init__(
        self,
        reader: LineReader,
        renderer: TextRenderer,
        table_renderer: TableRenderer,
        translator: Translator | None = None,
        settings: PromptSettings | None = None,
    ) -> None:
        self._reader: LineReader = reader
        self._renderer: TextRenderer = renderer
        self._table: TableRenderer = table_renderer
        self._translate: Translator = translator or _identity
        self._settings: PromptSettings = settings or PromptSettings()

    @property
    def settings(self) -> PromptSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def confirm(self, question: str, default: bool = False) -> bool:
        """Ask a yes/no *question* and return the answer.

        In auto-yes mode the question is shown, ``y`` is echoed and
        ``True`` is returned without reading input.
        """
        return self.run_confirm(ConfirmPrompt(question, default))

    def choice(
        self,
        options: OptionSet[K] | Mapping[K, str],
        message: str,
        default_key: K | None = None,
    ) -> K | None:
        """Show a numbered menu and return the key of the chosen option.

        An empty answer returns *default_key* as given.

        Raises
        ------
        EmptyOptionSetError
            If *options* is empty; nothing is rendered.
        """
        if not isinstance(options, OptionSet):
            options = OptionSet.from_mapping(options)
        return self.run_choice(ChoicePrompt(options, message, default_key))

    def input(self, message: str, default: str = "", required: bool = False) -> str:
        """Ask for free text and return the trimmed answer or *default*."""
        return self.run_input(InputPrompt(message, default, required))

    # ------------------------------------------------------------------
    # Prompt loops
    # ------------------------------------------------------------------

    def run_confirm(self, prompt: ConfirmPrompt) -> bool:
        while True:
            self._renderer.write(
                prompt.question + confirm_suffix(prompt.default),
                color=PROMPT_COLOR,
                bold=True,
                newline=False,
            )
            if self._settings.auto_yes:
                logger.debug("Auto-yes: confirming %r", prompt.question)
                self._renderer.write("y")
                return True

            raw = self._reader.read_line()
            try:
                return resolve_confirm(raw, prompt.default)
            except InvalidInputError as exc:
                logger.debug("Rejected confirm answer: %s", exc)
                self._error(CONFIRM_ERROR)

    def run_choice(self, prompt: ChoicePrompt[K]) -> K | None:
        is_repeat = False
        while True:
            if not is_repeat:
                self._renderer.write(prompt.message, color=PROMPT_COLOR, bold=True)
                self._renderer.write("")
                self._table.render(option_rows(prompt.options, prompt.default_key))
            self._renderer.write(CHOICE_PROMPT, color=PROMPT_COLOR, bold=True, newline=False)

            raw = self._reader.read_line()
            try:
                return resolve_choice(raw, prompt.options, prompt.default_key)
            except InvalidInputError as exc:
                logger.debug("Rejected choice answer: %s", exc)
                self._error(CHOICE_ERROR)
                is_repeat = True

    def run_input(self, prompt: InputPrompt) -> str:
        message = compose_input_message(prompt.message, prompt.default)
        required = prompt.required
        while True:
            self._renderer.write(message, color=PROMPT_COLOR, bold=True, newline=False)

            raw = self._reader.read_line()
            try:
                return resolve_input(raw, prompt.default, required)
            except InvalidInputError as exc:
                logger.debug("Rejected input answer: %s", exc)
                self._error(INPUT_ERROR)
                required = True

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _error(self, message: str) -> None:
        self._renderer.write(self._translate(message), color=ERROR_COLOR)
