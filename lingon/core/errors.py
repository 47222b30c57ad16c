"""Exception types raised by lingon."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LingonError(Exception):
    """Base exception for lingon"""


class TranslationLoadError(LingonError):
    """A language directory or file could not be read or parsed"""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ResourceImportError(LingonError):
    """Bundled language files could not be imported"""

    def __init__(self, message: str, owner: object = None):
        super().__init__(message)
        self.owner = owner


class MessageFormatError(LingonError, ValueError):
    """A positional format pattern is malformed or references missing arguments"""

    def __init__(self, message: str, template: str):
        super().__init__(message)
        self.template = template
