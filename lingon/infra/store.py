"""File-backed store of translation documents, one table per locale directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping

from ..core.errors import TranslationLoadError
from ..core.locale import LOCALE_DIRECTORY_PATTERN

log = logging.getLogger(__name__)

LocaleTable = Mapping[str, Any]

_EMPTY_TABLE: LocaleTable = MappingProxyType({})


def to_dotted_name(relative_path: Path) -> str:
    """``command/help.json`` -> ``command.help``"""
    name = relative_path.as_posix()
    if name.lower().endswith(".json"):
        name = name[:-5]
    return name.replace("/", ".")


def _is_json_file(path: Path) -> bool:
    return path.is_file() and path.name.lower().endswith(".json")


class TranslationStore:
    """Holds the parsed documents of every ``xx_YY`` directory under one root.

    Tables are read-only and replaced wholesale on reload, so callers holding
    an older table keep a consistent snapshot.
    """

    def __init__(self, languages_path: Path) -> None:
        self.languages_path = Path(languages_path)
        self._tables: Dict[str, LocaleTable] = {}

    def locale_names(self) -> list[str]:
        if not self.languages_path.is_dir():
            return []
        try:
            entries = sorted(self.languages_path.iterdir())
        except OSError as e:
            raise TranslationLoadError(
                f"Failed to list locales in {self.languages_path}", self.languages_path
            ) from e
        return [p.name for p in entries if p.is_dir() and LOCALE_DIRECTORY_PATTERN.match(p.name)]

    def load_locale(self, locale_name: str) -> LocaleTable:
        locale_path = self.languages_path / locale_name
        if not locale_path.is_dir():
            return _EMPTY_TABLE

        documents: Dict[str, Any] = {}
        try:
            files = sorted(p for p in locale_path.rglob("*") if _is_json_file(p))
        except OSError as e:
            raise TranslationLoadError(f"Failed to walk {locale_path}", locale_path) from e

        for file_path in files:
            dotted_name = to_dotted_name(file_path.relative_to(locale_path))
            try:
                with file_path.open("r", encoding="utf-8") as fh:
                    documents[dotted_name] = json.load(fh)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                raise TranslationLoadError(f"Failed to read {file_path}: {e}", file_path) from e

        log.debug("Loaded %d document(s) for %s", len(documents), locale_name)
        return MappingProxyType(documents)

    def load(self) -> Dict[str, LocaleTable]:
        return {name: self.load_locale(name) for name in self.locale_names()}

    def reload(self) -> None:
        # Build the new set first; a failed load leaves the old tables in place
        self._tables = self.load()

    def reload_locale(self, locale_name: str) -> bool:
        table = self.load_locale(locale_name)
        tables = dict(self._tables)
        if not table:
            tables.pop(locale_name, None)
            self._tables = tables
            return False
        tables[locale_name] = table
        self._tables = tables
        return True

    def get(self, locale_name: str | None) -> LocaleTable:
        if locale_name is None:
            return _EMPTY_TABLE
        return self._tables.get(locale_name, _EMPTY_TABLE)

    def loaded_locales(self) -> FrozenSet[str]:
        return frozenset(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, locale_name: object) -> bool:
        return locale_name in self._tables
