from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Optional, Union

from .core.locale import Locale, LocaleLike, to_directory_name
from .core.pointer import MISSING
from .infra.resources import LANGUAGES_DIRECTORY, Owner, import_from_owner
from .infra.store import TranslationStore
from .lang import LingonLang

log = logging.getLogger(__name__)


def _parse_optional(locale: Optional[LocaleLike]) -> Optional[Locale]:
    # A None default leaves lookups without a fallback
    return Locale.parse(locale) if locale is not None else None


class Lingon:
    """Locale-keyed JSON translations with fallback to a default locale.

    Files live under ``<path>/languages/<xx_YY>/**/*.json``; each file is one
    document named by its relative path (``command/help.json`` is
    ``command.help``).
    """

    def __init__(
        self,
        owner: Optional[Owner],
        path: Union[str, Path],
        default_locale: Optional[LocaleLike],
    ) -> None:
        self.languages_path = Path(path) / LANGUAGES_DIRECTORY
        if not self.languages_path.exists():
            self.languages_path.mkdir(parents=True)
            log.info("Created %s", self.languages_path)

        self._default_locale = _parse_optional(default_locale)
        if owner is not None:
            import_from_owner(owner, self.languages_path)

        self._store = TranslationStore(self.languages_path)
        self._store.reload()
        log.info("Lingon initialized default locale: %s", self._default_locale)

    @property
    def default_locale(self) -> Optional[Locale]:
        return self._default_locale

    def set_default_locale(self, locale: Optional[LocaleLike]) -> None:
        self._default_locale = _parse_optional(locale)

    def get(self, locale: Optional[LocaleLike], path: str) -> LingonLang:
        primary_key = to_directory_name(locale)
        fallback_key = to_directory_name(self._default_locale)

        primary = self._store.get(primary_key).get(path, MISSING)
        fallback = self._store.get(fallback_key).get(path, MISSING)

        if primary is MISSING and fallback is MISSING:
            log.warning(
                "Missing file '%s' for locales primary=%s fallback=%s",
                path, primary_key, fallback_key,
            )

        return LingonLang(primary_key, primary, fallback_key, fallback)

    def reload(self) -> None:
        log.info("Reloading language data from %s", self.languages_path)
        self._store.reload()
        log.info("Language data reloaded successfully for %d locales", len(self._store))

    def reload_locale(self, locale: Optional[LocaleLike]) -> bool:
        if locale is None:
            log.warning("Cannot reload null locale")
            return False

        locale_name = to_directory_name(locale)
        if locale_name is None:
            log.warning("Cannot convert locale %r to directory name", locale)
            return False

        log.debug("Reloading locale data for %s", locale_name)
        if not self._store.reload_locale(locale_name):
            log.warning("No data found for locale %s", locale_name)
            return False

        log.info("Successfully reloaded locale %s", locale_name)
        return True

    def loaded_locales(self) -> FrozenSet[str]:
        return self._store.loaded_locales()
