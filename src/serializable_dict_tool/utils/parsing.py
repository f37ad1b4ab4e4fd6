"""Helpers for turning command line tokens and YAML values into dictionary keys."""

from __future__ import annotations

import re
from typing import Any, Final

TRUE_BOOLEAN_TOKENS: Final[frozenset[str]] = frozenset({"true", "yes", "on"})
FALSE_BOOLEAN_TOKENS: Final[frozenset[str]] = frozenset({"false", "no", "off"})
NULL_TOKENS: Final[frozenset[str]] = frozenset({"", "~", "null", "none"})

_INT_PATTERN = re.compile(r"^[-+]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")


def parse_scalar(text: str | None) -> Any:
    """Interpret a command line token the way a YAML scalar would be read.

    Quoted tokens (``"1"`` or ``'true'``) always stay strings, with the quotes
    stripped. Otherwise null, boolean, int and float forms are recognised and
    anything else is returned unchanged.
    """

    if text is None:
        return None

    stripped = text.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in "'\"":
        return stripped[1:-1]

    lowered = stripped.lower()
    if lowered in NULL_TOKENS:
        return None
    if lowered in TRUE_BOOLEAN_TOKENS:
        return True
    if lowered in FALSE_BOOLEAN_TOKENS:
        return False
    if _INT_PATTERN.match(stripped):
        return int(stripped)
    if _FLOAT_PATTERN.match(stripped):
        return float(stripped)
    return stripped


class FrozenMapping(tuple):
    """Hashable stand-in for a YAML mapping, stored as ordered (key, value) pairs."""

    __slots__ = ()

    def __new__(cls, items=()):
        return super().__new__(cls, tuple(items))

    def __eq__(self, other: object) -> bool:
        # A mapping never equals the list of its own pairs
        if not isinstance(other, FrozenMapping):
            return False
        return tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((FrozenMapping, tuple(self)))

    def to_dict(self) -> dict:
        return dict(self)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}: {v!r}" for k, v in self)
        return "{" + inner + "}"


def freeze_value(value: Any) -> Any:
    """Convert mappings and lists (recursively) into hashable equivalents.

    Unity object references are serialized as mappings such as
    ``{fileID: 11400000, guid: ..., type: 2}`` and are valid dictionary keys.
    """
    if isinstance(value, dict):
        return FrozenMapping((k, freeze_value(v)) for k, v in value.items())
    if isinstance(value, list):
        return tuple(freeze_value(v) for v in value)
    return value


def thaw_value(value: Any) -> Any:
    """Inverse of freeze_value()."""
    if isinstance(value, FrozenMapping):
        return {k: thaw_value(v) for k, v in value}
    if isinstance(value, tuple):
        return [thaw_value(v) for v in value]
    return value


__all__ = [
    "FALSE_BOOLEAN_TOKENS",
    "NULL_TOKENS",
    "TRUE_BOOLEAN_TOKENS",
    "FrozenMapping",
    "freeze_value",
    "parse_scalar",
    "thaw_value",
]
