"""gettext-backed :class:`~ttyask.core.protocols.Translator`.

Catalogues are looked up under the ``ttyask`` domain.  When no
catalogue matches the active locale, messages pass through unchanged.
"""

from __future__ import annotations

import gettext
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DOMAIN: str = "ttyask"


class GettextTranslator:
    """Callable translator over a gettext catalogue.

    Parameters
    ----------
    localedir:
        Directory holding ``<lang>/LC_MESSAGES/ttyask.mo`` files, or
        ``None`` for the system default.
    languages:
        Explicit language list.  ``None`` defers to the ``LANGUAGE``,
        ``LC_ALL``, ``LC_MESSAGES`` and ``LANG`` environment variables.
    """

    def __init__(
        self,
        localedir: Path | str | None = None,
        languages: list[str] | None = None,
    ) -> None:
        self._translations: gettext.NullTranslations = gettext.translation(
            DOMAIN,
            localedir=localedir,
            languages=languages,
            fallback=True,
        )
        if type(self._translations) is gettext.NullTranslations:
            logger.debug("No %r catalogue found; messages are untranslated", DOMAIN)

    def __call__(self, message: str) -> str:
        return self._translations.gettext(message)
