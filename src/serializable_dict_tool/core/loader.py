"""
Unity file loader using unityflow.

Finds serialized dictionaries (mappings holding parallel ``keys`` and
``values`` lists) in Unity YAML files and restores them.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Optional, Union

from unityflow import UnityYAMLDocument

from serializable_dict_tool.core.serializable_dict import SerializableDictionary
from serializable_dict_tool.core.unity_model import (
    DictionaryDocument,
    DictionaryField,
    PathPart,
    SnapshotIssue,
)
from serializable_dict_tool.utils.parsing import freeze_value

logger = logging.getLogger(__name__)

DEFAULT_KEYS_FIELD = "keys"
DEFAULT_VALUES_FIELD = "values"


def get_entry_data(entry: Any) -> dict:
    """Get the content dictionary of a unityflow object."""
    if hasattr(entry, "get_content"):
        return entry.get_content() or {}
    if hasattr(entry, "data"):
        # data is like {"MonoBehaviour": {...}} - get the inner dict
        data = entry.data or {}
        if data and len(data) == 1:
            return next(iter(data.values()), {})
        return data
    return {}


def diagnose_snapshot(keys: Optional[list], values: Optional[list]) -> list[SnapshotIssue]:
    """
    Report what a restore would silently repair in a keys/values pair.

    ``None`` means the list is missing from the serialized data.
    """
    issues = []
    if keys is None:
        issues.append(SnapshotIssue.MISSING_KEYS)
    if values is None:
        issues.append(SnapshotIssue.MISSING_VALUES)

    key_list = keys or []
    value_list = values or []
    if keys is not None and values is not None and len(key_list) != len(value_list):
        issues.append(SnapshotIssue.LENGTH_MISMATCH)

    seen = set()
    for key in key_list[:len(value_list)]:
        frozen = freeze_value(key)
        if frozen in seen:
            issues.append(SnapshotIssue.DUPLICATE_KEY)
            break
        seen.add(frozen)

    return issues


class SerializedDictionaryLoader:
    """Loads Unity YAML files and restores their serialized dictionaries."""

    def __init__(
        self,
        keys_field: str = DEFAULT_KEYS_FIELD,
        values_field: str = DEFAULT_VALUES_FIELD,
    ):
        self.keys_field = keys_field
        self.values_field = values_field
        self._raw_doc: Optional[UnityYAMLDocument] = None

    def load(self, file_path: Union[Path, str]) -> DictionaryDocument:
        """
        Load a Unity YAML file.

        Args:
            file_path: Path to the Unity file (.prefab, .unity, .asset, etc.)

        Returns:
            DictionaryDocument with every serialized dictionary restored
        """
        self._raw_doc = UnityYAMLDocument.load(str(file_path))
        doc = DictionaryDocument(
            file_path=str(file_path),
            unity_version=getattr(self._raw_doc, "unity_version", None),
            source=self._raw_doc,
        )

        for entry in self._raw_doc.objects:
            file_id = str(getattr(entry, "file_id", ""))
            class_name = getattr(entry, "class_name", "Unknown")
            data = get_entry_data(entry)

            script_guid = None
            script_ref = data.get("m_Script") if isinstance(data, dict) else None
            if isinstance(script_ref, dict):
                script_guid = script_ref.get("guid")

            for path, container in self.iter_dictionary_containers(data):
                field = self._build_field(container, file_id, class_name, path)
                field.script_guid = script_guid
                doc.fields.append(field)

        logger.debug("Loaded %d dictionary fields from %s", doc.field_count, file_path)
        return doc

    def iter_dictionary_containers(
        self, data: Any, path: tuple[PathPart, ...] = ()
    ) -> Iterator[tuple[tuple[PathPart, ...], dict]]:
        """
        Yield (path, mapping) for every mapping holding a keys or values list.

        Matching mappings are not searched further.
        """
        if isinstance(data, dict):
            if self.keys_field in data or self.values_field in data:
                yield path, data
                return
            for key, value in data.items():
                yield from self.iter_dictionary_containers(value, path + (key,))
        elif isinstance(data, list):
            for index, item in enumerate(data):
                yield from self.iter_dictionary_containers(item, path + (index,))

    def _build_field(
        self,
        container: dict,
        file_id: str,
        class_name: str,
        path: tuple[PathPart, ...],
    ) -> DictionaryField:
        """Restore one serialized dictionary and record its issues."""
        keys = self._as_list(container.get(self.keys_field))
        values = self._as_list(container.get(self.values_field))

        field = DictionaryField(file_id=file_id, class_name=class_name, path=path)
        field.issues = diagnose_snapshot(keys, values)
        field.dictionary = SerializableDictionary.from_snapshot(
            [freeze_value(k) for k in keys or []],
            values,
        )

        for issue in field.issues:
            logger.warning("%s: %s", field.selector, issue.value.replace("_", " "))

        return field

    @staticmethod
    def _as_list(value: Any) -> Optional[list]:
        if isinstance(value, list):
            return value
        if value is not None:
            logger.debug("Ignoring non-sequence snapshot value %r", value)
        return None


def load_dictionaries(
    file_path: Union[Path, str],
    keys_field: str = DEFAULT_KEYS_FIELD,
    values_field: str = DEFAULT_VALUES_FIELD,
) -> DictionaryDocument:
    """
    Convenience function to load the dictionaries of a Unity file.

    Args:
        file_path: Path to the Unity file
        keys_field: Serialized name of the keys list
        values_field: Serialized name of the values list

    Returns:
        DictionaryDocument with restored dictionaries
    """
    loader = SerializedDictionaryLoader(keys_field=keys_field, values_field=values_field)
    return loader.load(file_path)
