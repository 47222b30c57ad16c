from __future__ import annotations

from typing import Any, Mapping, Optional

from .errors import MessageFormatError


class LocalizedString:
    """A resolved translation template.

    ``substitute`` fills ``{name}`` placeholders from a mapping, ``format``
    fills positional ``{0}``, ``{1}`` placeholders with format specs such as
    ``{0:,.2f}`` or ``{1:%Y-%m-%d}``.
    """

    __slots__ = ("_template",)

    def __init__(self, template: str) -> None:
        self._template = template

    def raw(self) -> str:
        return self._template

    def substitute(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> str:
        """Replace each ``{key}`` literally, one pass per entry.

        Placeholders without a value are left untouched.
        """
        merged = dict(values or {})
        merged.update(kwargs)
        result = self._template
        for key, value in merged.items():
            result = result.replace("{" + str(key) + "}", str(value))
        return result

    def format(self, *args: Any) -> str:
        try:
            return self._template.format(*args)
        except (ValueError, IndexError, KeyError, TypeError, AttributeError) as e:
            raise MessageFormatError(
                f"Cannot format {self._template!r}: {e}", self._template
            ) from e

    def __str__(self) -> str:
        return self._template

    def __repr__(self) -> str:
        return f"LocalizedString({self._template!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalizedString):
            return NotImplemented
        return self._template == other._template

    def __hash__(self) -> int:
        return hash(self._template)
