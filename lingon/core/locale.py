from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

# Only region-qualified directories are persisted on disk
LOCALE_DIRECTORY_PATTERN = re.compile(r"^[a-z]{2}_[A-Z]{2}$")

_SEPARATOR_RE = re.compile(r"[-_]")


@dataclass(frozen=True, eq=False)
class Locale:
    """A language plus optional region, e.g. ``Locale("zh", "TW")``."""

    language: str
    region: str = ""

    @classmethod
    def parse(cls, value: Union["Locale", str]) -> "Locale":
        """Accept ``zh_TW``, ``zh-tw`` or ``zh``; ``Locale`` values pass through."""
        if isinstance(value, Locale):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Expected a Locale or str, got {type(value).__name__}")
        parts = _SEPARATOR_RE.split(value.strip(), maxsplit=1)
        language = parts[0]
        region = parts[1] if len(parts) > 1 else ""
        return cls(language, region)

    @property
    def directory_name(self) -> Optional[str]:
        return to_directory_name(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return self.directory_name == other.directory_name

    def __hash__(self) -> int:
        return hash(self.directory_name)

    def __str__(self) -> str:
        return self.directory_name or ""


LocaleLike = Union[Locale, str]


def to_directory_name(locale: Optional[LocaleLike]) -> Optional[str]:
    """Map a locale to its canonical directory name (``zh_TW`` or ``zh``).

    Returns None when the locale is None or carries no language.
    """
    if locale is None:
        return None
    if isinstance(locale, str):
        locale = Locale.parse(locale)

    language = (locale.language or "").strip().lower()
    if not language:
        return None
    region = (locale.region or "").strip().upper()
    return f"{language}_{region}" if region else language
