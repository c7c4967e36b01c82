"""ttyask — interactive terminal prompts.

Yes/no confirmation, numbered single-choice menus and free-text input,
each with defaults, validation and automatic re-prompting.
"""

from ttyask.api import ask, choice, confirm
from ttyask.core.models import OptionSet, PromptSettings
from ttyask.core.prompter import Prompter
from ttyask.version import __version__

__all__: list[str] = [
    "OptionSet",
    "PromptSettings",
    "Prompter",
    "__version__",
    "ask",
    "choice",
    "confirm",
]
