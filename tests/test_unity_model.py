"""
Tests for the dictionary field models.
"""

import pytest

from serializable_dict_tool.core.serializable_dict import SerializableDictionary
from serializable_dict_tool.core.unity_model import (
    AmbiguousFieldError,
    DictionaryDocument,
    DictionaryField,
    FieldNotFoundError,
    SnapshotIssue,
)


class TestSnapshotIssue:
    def test_values(self):
        assert SnapshotIssue.DUPLICATE_KEY.value == "duplicate_key"
        assert SnapshotIssue.LENGTH_MISMATCH.value == "length_mismatch"
        assert SnapshotIssue.MISSING_KEYS.value == "missing_keys"
        assert SnapshotIssue.MISSING_VALUES.value == "missing_values"


class TestDictionaryField:
    def test_creation(self):
        field = DictionaryField(file_id="1", class_name="MonoBehaviour", path=("m_Prices",))
        assert field.entry_count == 0
        assert field.issues == []
        assert field.is_clean
        assert field.script_guid is None

    def test_is_complete(self):
        field = DictionaryField(
            file_id="1",
            class_name="MonoBehaviour",
            path=("m_Prices",),
            issues=[SnapshotIssue.DUPLICATE_KEY],
        )
        assert field.is_complete
        field.issues.append(SnapshotIssue.MISSING_VALUES)
        assert not field.is_complete

    def test_paths(self):
        field = DictionaryField(
            file_id="1",
            class_name="MonoBehaviour",
            path=("m_Tables", 2, "lookup"),
            dictionary=SerializableDictionary(["a"], [1]),
        )
        assert field.property_path == "m_Tables.Array.data[2].lookup"
        assert field.display_name == "Tables > [2] > Lookup"
        assert field.selector == "1:m_Tables.Array.data[2].lookup"
        assert field.entry_count == 1
        assert repr(field) == "DictionaryField(1:m_Tables.Array.data[2].lookup, entries=1)"


class TestDictionaryDocument:
    @pytest.fixture
    def document(self):
        return DictionaryDocument(
            file_path="test.prefab",
            fields=[
                DictionaryField(file_id="1", class_name="MonoBehaviour", path=("m_Prices",)),
                DictionaryField(file_id="2", class_name="MonoBehaviour", path=("m_Prices",)),
                DictionaryField(
                    file_id="2",
                    class_name="MonoBehaviour",
                    path=("m_Weights",),
                    issues=[SnapshotIssue.LENGTH_MISMATCH],
                ),
            ],
        )

    def test_creation(self):
        doc = DictionaryDocument(file_path="test.prefab")
        assert doc.fields == []
        assert doc.field_count == 0
        assert doc.issue_count == 0
        assert doc.source is None
        assert doc.unity_version is None

    def test_get_field(self, document):
        assert document.get_field("2", "m_Weights") is document.fields[2]
        assert document.get_field("3", "m_Weights") is None

    def test_find_by_qualified_selector(self, document):
        assert document.find_field("1:m_Prices") is document.fields[0]

    def test_find_by_unique_path(self, document):
        assert document.find_field("m_Weights") is document.fields[2]

    def test_find_ambiguous_path(self, document):
        with pytest.raises(AmbiguousFieldError):
            document.find_field("m_Prices")

    def test_find_missing(self, document):
        with pytest.raises(FieldNotFoundError):
            document.find_field("m_Nothing")
        with pytest.raises(FieldNotFoundError):
            document.find_field("9:m_Prices")

    def test_counts(self, document):
        assert document.field_count == 3
        assert document.issue_count == 1
        assert repr(document) == "DictionaryDocument('test.prefab', fields=3)"
