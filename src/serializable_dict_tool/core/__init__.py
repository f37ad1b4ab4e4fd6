"""Serializable dictionary and its Unity YAML persistence."""

from serializable_dict_tool.core.serializable_dict import (
    KeyNotFoundError,
    SerializableDictionary,
)
from serializable_dict_tool.core.unity_model import (
    AmbiguousFieldError,
    DictionaryDocument,
    DictionaryField,
    FieldNotFoundError,
    IncompleteFieldError,
    SnapshotIssue,
)
from serializable_dict_tool.core.loader import (
    SerializedDictionaryLoader,
    diagnose_snapshot,
    load_dictionaries,
)
from serializable_dict_tool.core.writer import (
    DictionaryFieldWriter,
    write_dictionaries,
)

__all__ = [
    "KeyNotFoundError",
    "SerializableDictionary",
    "AmbiguousFieldError",
    "DictionaryDocument",
    "DictionaryField",
    "FieldNotFoundError",
    "IncompleteFieldError",
    "SnapshotIssue",
    "SerializedDictionaryLoader",
    "diagnose_snapshot",
    "load_dictionaries",
    "DictionaryFieldWriter",
    "write_dictionaries",
]
