"""
Unity YAML file writer for serialized dictionaries.

Takes a snapshot of each dictionary, puts the keys/values lists back into the
unityflow document and saves it.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from serializable_dict_tool.core.loader import (
    DEFAULT_KEYS_FIELD,
    DEFAULT_VALUES_FIELD,
    get_entry_data,
)
from serializable_dict_tool.core.unity_model import (
    DictionaryDocument,
    DictionaryField,
    FieldNotFoundError,
    IncompleteFieldError,
)
from serializable_dict_tool.utils.parsing import thaw_value

logger = logging.getLogger(__name__)


class DictionaryFieldWriter:
    """Writes dictionary snapshots back into Unity YAML files."""

    def __init__(
        self,
        keys_field: str = DEFAULT_KEYS_FIELD,
        values_field: str = DEFAULT_VALUES_FIELD,
    ):
        self.keys_field = keys_field
        self.values_field = values_field

    def apply_field(self, document: DictionaryDocument, field: DictionaryField) -> None:
        """
        Replace the serialized keys/values of ``field`` with a fresh snapshot.

        Raises:
            FieldNotFoundError: The field's object or path is gone from the document
            IncompleteFieldError: The keys or values list was missing on load
        """
        if not field.is_complete:
            raise IncompleteFieldError(
                f"{field.selector} needs both {self.keys_field} and {self.values_field} lists"
            )
        container = self._resolve_container(document, field)
        keys, values = field.dictionary.snapshot()
        container[self.keys_field] = [thaw_value(k) for k in keys]
        container[self.values_field] = values
        field.issues = []

    def write(
        self,
        document: DictionaryDocument,
        output_path: Optional[Union[Path, str]] = None,
        fields: Optional[Iterable[DictionaryField]] = None,
    ) -> int:
        """
        Apply dictionary snapshots and save the document.

        Args:
            document: Document returned by the loader
            output_path: Where to save; defaults to the source file
            fields: Fields to write; defaults to every complete field

        Returns:
            Number of fields written
        """
        if document.source is None:
            raise ValueError(f"{document.file_path} has no source document to write into")

        if fields is None:
            targets = []
            for field in document.fields:
                if field.is_complete:
                    targets.append(field)
                else:
                    logger.warning("Skipping %s: keys or values list missing", field.selector)
        else:
            targets = list(fields)

        for field in targets:
            self.apply_field(document, field)

        destination = Path(output_path) if output_path else Path(document.file_path)
        document.source.save(str(destination))
        logger.info("Wrote %d dictionary fields to %s", len(targets), destination)
        return len(targets)

    def _resolve_container(self, document: DictionaryDocument, field: DictionaryField) -> dict:
        """Walk from the object's content down to the mapping at field.path."""
        entry = None
        for candidate in document.source.objects:
            if str(getattr(candidate, "file_id", "")) == field.file_id:
                entry = candidate
                break
        if entry is None:
            raise FieldNotFoundError(f"Object {field.file_id} not found in {document.file_path}")

        current: Any = get_entry_data(entry)
        for part in field.path:
            try:
                current = current[part]
            except (KeyError, IndexError, TypeError):
                raise FieldNotFoundError(
                    f"Path {field.property_path} not found on object {field.file_id}"
                ) from None

        if not isinstance(current, dict):
            raise FieldNotFoundError(f"{field.selector} is not a mapping")
        return current


def write_dictionaries(
    document: DictionaryDocument,
    output_path: Optional[Union[Path, str]] = None,
    keys_field: str = DEFAULT_KEYS_FIELD,
    values_field: str = DEFAULT_VALUES_FIELD,
) -> int:
    """
    Convenience function to write every dictionary of a document.

    Returns:
        Number of fields written
    """
    writer = DictionaryFieldWriter(keys_field=keys_field, values_field=values_field)
    return writer.write(document, output_path)
