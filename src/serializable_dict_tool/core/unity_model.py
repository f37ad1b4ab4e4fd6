"""
Data models for serialized dictionaries found in Unity files.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from serializable_dict_tool.core.serializable_dict import SerializableDictionary
from serializable_dict_tool.utils.naming import (
    format_property_path,
    nicify_property_path,
    parse_property_path,
)

PathPart = Union[str, int]


class SnapshotIssue(Enum):
    """Problems found in a persisted keys/values pair."""
    DUPLICATE_KEY = "duplicate_key"
    LENGTH_MISMATCH = "length_mismatch"
    MISSING_KEYS = "missing_keys"
    MISSING_VALUES = "missing_values"


INCOMPLETE_ISSUES = frozenset({SnapshotIssue.MISSING_KEYS, SnapshotIssue.MISSING_VALUES})


class FieldNotFoundError(LookupError):
    """Raised when a field selector matches no dictionary field."""


class AmbiguousFieldError(LookupError):
    """Raised when a field selector matches more than one dictionary field."""


class IncompleteFieldError(ValueError):
    """Raised when writing a field whose keys or values list was missing."""


@dataclass
class DictionaryField:
    """A serialized dictionary inside one Unity object."""
    file_id: str
    class_name: str  # "MonoBehaviour", "ScriptableObject", ...
    path: tuple[PathPart, ...]  # Segments from the object root, ints are array indices
    dictionary: SerializableDictionary = field(default_factory=SerializableDictionary)
    issues: list[SnapshotIssue] = field(default_factory=list)
    script_guid: Optional[str] = None

    @property
    def property_path(self) -> str:
        """Unity property path like "m_Tables.Array.data[0].lookup"."""
        return format_property_path(self.path)

    @property
    def display_name(self) -> str:
        return nicify_property_path(self.property_path)

    @property
    def selector(self) -> str:
        return f"{self.file_id}:{self.property_path}"

    @property
    def entry_count(self) -> int:
        return len(self.dictionary)

    @property
    def is_clean(self) -> bool:
        return not self.issues

    @property
    def is_complete(self) -> bool:
        """Both lists were present, so a snapshot can replace them."""
        return not any(issue in INCOMPLETE_ISSUES for issue in self.issues)

    def __repr__(self) -> str:
        return f"DictionaryField({self.selector}, entries={self.entry_count})"


@dataclass
class DictionaryDocument:
    """All serialized dictionaries in a Unity file (prefab, scene, asset)."""
    file_path: str
    fields: list[DictionaryField] = field(default_factory=list)
    unity_version: Optional[str] = None

    # Raw unityflow document the fields were read from
    source: Any = field(default=None, repr=False, compare=False)

    def get_field(self, file_id: str, property_path: str) -> Optional[DictionaryField]:
        """Get field by object fileID and property path."""
        path = parse_property_path(property_path)
        for f in self.fields:
            if f.file_id == file_id and f.path == path:
                return f
        return None

    def find_field(self, selector: str) -> DictionaryField:
        """
        Resolve a "FILE_ID:PROPERTY_PATH" or bare "PROPERTY_PATH" selector.

        Raises:
            FieldNotFoundError: No field matches
            AmbiguousFieldError: A bare path matches fields on several objects
        """
        if ":" in selector:
            file_id, _, property_path = selector.partition(":")
            found = self.get_field(file_id, property_path)
            if found is None:
                raise FieldNotFoundError(f"No dictionary field '{selector}' in {self.file_path}")
            return found

        path = parse_property_path(selector)
        matches = [f for f in self.fields if f.path == path]
        if not matches:
            raise FieldNotFoundError(f"No dictionary field '{selector}' in {self.file_path}")
        if len(matches) > 1:
            ids = ", ".join(f.file_id for f in matches)
            raise AmbiguousFieldError(
                f"Field '{selector}' exists on several objects ({ids}); use FILE_ID:{selector}"
            )
        return matches[0]

    @property
    def field_count(self) -> int:
        return len(self.fields)

    @property
    def issue_count(self) -> int:
        return sum(len(f.issues) for f in self.fields)

    def __repr__(self) -> str:
        return f"DictionaryDocument({self.file_path!r}, fields={self.field_count})"
