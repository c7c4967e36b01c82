"""Core / service layer — prompt models, answer rules and the retry loop.

Rules
-----
* No ``print()`` calls and no direct terminal access.
* No imports from ``cli`` or ``infra``.
* Collaborators are injected through :mod:`ttyask.core.protocols`.
"""

from ttyask.core.models import (
    ChoicePrompt,
    ConfirmPrompt,
    InputPrompt,
    Option,
    OptionSet,
    PromptSettings,
)
from ttyask.core.prompter import Prompter
from ttyask.core.protocols import LineReader, TableRenderer, TextRenderer, Translator

__all__: list[str] = [
    "ChoicePrompt",
    "ConfirmPrompt",
    "InputPrompt",
    "LineReader",
    "Option",
    "OptionSet",
    "PromptSettings",
    "Prompter",
    "TableRenderer",
    "TextRenderer",
    "Translator",
]
