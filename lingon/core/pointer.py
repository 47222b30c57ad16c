"""Dotted path addressing into parsed JSON documents.

``items[0].name`` walks key ``items``, index ``0`` and key ``name``. A step
that finds nothing yields ``MISSING`` instead of raising, so lookups can fall
through to another document.
"""

from __future__ import annotations

import json
import re
from typing import Any, List, Optional, Union

_COMPONENT_RE = re.compile(r"^(?P<key>.*?)(?P<indices>(?:\[\d+\])*)$", re.DOTALL)
_INDEX_RE = re.compile(r"\[(\d+)\]")


class _Missing:
    """Marks an absent node; distinct from a JSON null (``None``)."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

Step = Union[str, int]


def split_path(path: str) -> List[Step]:
    steps: List[Step] = []
    for component in path.split("."):
        m = _COMPONENT_RE.match(component)
        key, indices = m.group("key"), m.group("indices")
        # "[0]" on its own addresses an array root
        if key or not indices:
            steps.append(key)
        steps.extend(int(i) if _is_index(i) else i for i in _INDEX_RE.findall(indices))
    return steps


def _is_index(text: str) -> bool:
    # Array indices have no leading zeros, "01" is an object key
    return text.isdecimal() and (text == "0" or not text.startswith("0"))


def _child(node: Any, step: Step) -> Any:
    if isinstance(node, dict):
        return node.get(str(step), MISSING)
    if isinstance(node, list):
        if isinstance(step, str):
            if not _is_index(step):
                return MISSING
            step = int(step)
        if 0 <= step < len(node):
            return node[step]
    return MISSING


def resolve(document: Any, path: Optional[str]) -> Any:
    """Return the node at ``path`` inside ``document``, or ``MISSING``."""
    if document is None or document is MISSING:
        return MISSING
    if not path:
        return document

    node = document
    for step in split_path(path):
        node = _child(node, step)
        if node is MISSING:
            return MISSING
    return node


def is_missing_or_null(node: Any) -> bool:
    return node is MISSING or node is None


def node_text(node: Any) -> str:
    """Text of a string node, compact JSON for every other kind."""
    if isinstance(node, str):
        return node
    return json.dumps(node, separators=(",", ":"), ensure_ascii=False)
