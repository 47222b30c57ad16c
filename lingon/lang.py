from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .core.localized import LocalizedString
from .core.pointer import MISSING, is_missing_or_null, node_text, resolve


@dataclass(frozen=True)
class LingonLang:
    """Primary and fallback documents captured by one ``Lingon.get`` call."""

    primary_locale: Optional[str]
    primary_data: Any = MISSING
    fallback_locale: Optional[str] = None
    fallback_data: Any = MISSING

    def node(self, key: str) -> Any:
        node = resolve(self.primary_data, key)
        if is_missing_or_null(node):
            node = resolve(self.fallback_data, key)
        return node

    def get(self, key: str) -> LocalizedString:
        """Localized value at ``key``; the key itself when no locale has it."""
        node = self.node(key)
        if is_missing_or_null(node):
            return LocalizedString(key or "")
        return LocalizedString(node_text(node))

    def text(self, key: str) -> str:
        return self.get(key).raw()

    @property
    def is_missing(self) -> bool:
        return self.primary_data is MISSING and self.fallback_data is MISSING
