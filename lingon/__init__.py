"""Locale-keyed JSON translations with default-locale fallback."""

from .core.config import Settings, get_settings
from .core.errors import LingonError, MessageFormatError, ResourceImportError, TranslationLoadError
from .core.locale import Locale, to_directory_name
from .core.localized import LocalizedString
from .core.pointer import MISSING
from .infra.resources import import_from_owner
from .lang import LingonLang
from .lingon import Lingon
from .main import make_lingon

__all__ = [
    "Lingon",
    "LingonLang",
    "LocalizedString",
    "Locale",
    "MISSING",
    "to_directory_name",
    "import_from_owner",
    "make_lingon",
    "Settings",
    "get_settings",
    "LingonError",
    "TranslationLoadError",
    "ResourceImportError",
    "MessageFormatError",
]
