"""Tests for the serializable-dict command line entry point."""

from unittest.mock import patch

import pytest

from conftest import FakeDocument, FakeEntry
from serializable_dict_tool.__main__ import main


@pytest.fixture
def prefab(tmp_path, inventory_document):
    path = tmp_path / "inventory.prefab"
    path.write_text("%YAML 1.1\n")
    with patch("serializable_dict_tool.core.loader.UnityYAMLDocument") as mock_doc_class:
        mock_doc_class.load.return_value = inventory_document
        yield path


def prices(document) -> dict:
    return document.objects[1].get_content()["m_Prices"]


class TestShow:
    def test_lists_fields(self, prefab, capsys):
        assert main(["show", str(prefab)]) == 0

        out = capsys.readouterr().out
        assert "11400000:m_Prices  (Prices, 2 entries)" in out
        assert "    sword: 100" in out
        assert "! duplicate key" in out
        assert '{"fileID": 1, "guid": "g1", "type": 2}: first' in out


class TestCheck:
    def test_reports_issues(self, prefab, capsys):
        assert main(["check", str(prefab)]) == 1

        out = capsys.readouterr().out
        assert "1 issues in 3 fields" in out
        assert "duplicate key" in out

    def test_clean_file(self, prefab, inventory_document, capsys):
        inventory_document.objects[1].get_content()["m_Tables"] = []

        assert main(["check", str(prefab)]) == 0
        assert "OK (1 fields)" in capsys.readouterr().out


class TestGet:
    def test_existing_key(self, prefab, capsys):
        assert main(["get", str(prefab), "m_Prices", "sword"]) == 0
        assert capsys.readouterr().out.strip() == "100"

    def test_missing_key(self, prefab, capsys):
        assert main(["get", str(prefab), "m_Prices", "axe"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_missing_field(self, prefab, capsys):
        assert main(["get", str(prefab), "m_Nothing", "axe"]) == 1
        assert "No dictionary field 'm_Nothing'" in capsys.readouterr().err


class TestEdit:
    def test_set_overwrites(self, prefab, inventory_document):
        assert main(["set", str(prefab), "m_Prices", "sword", "150"]) == 0

        assert prices(inventory_document) == {"keys": ["sword", "shield"], "values": [150, 50]}
        assert inventory_document.saved_to == [str(prefab)]

    def test_add_new_key_to_output(self, prefab, inventory_document, tmp_path):
        output = tmp_path / "out.prefab"

        assert main(["add", str(prefab), "11400000:m_Prices", "bow", "80", "-o", str(output)]) == 0

        assert prices(inventory_document)["keys"] == ["sword", "shield", "bow"]
        assert inventory_document.saved_to == [str(output)]

    def test_add_existing_key_is_noop(self, prefab, inventory_document, capsys):
        assert main(["add", str(prefab), "m_Prices", "sword", "1"]) == 0

        assert "left unchanged" in capsys.readouterr().out
        assert prices(inventory_document)["values"] == [100, 50]
        assert inventory_document.saved_to == []

    def test_remove(self, prefab, inventory_document):
        assert main(["remove", str(prefab), "m_Prices", "shield"]) == 0
        assert prices(inventory_document) == {"keys": ["sword"], "values": [100]}

    def test_remove_missing_key(self, prefab, inventory_document, capsys):
        assert main(["remove", str(prefab), "m_Prices", "axe"]) == 1
        assert inventory_document.saved_to == []

    def test_clean(self, prefab, inventory_document, capsys):
        assert main(["clean", str(prefab)]) == 0

        lookup = inventory_document.objects[1].get_content()["m_Tables"][0]["lookup"]
        assert lookup == {"keys": ["a", "b"], "values": [1, 3]}
        assert "Cleaned 3 fields" in capsys.readouterr().out


class TestValidation:
    def test_missing_file(self, tmp_path, capsys):
        assert main(["show", str(tmp_path / "nope.prefab")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_unknown_extension_warns(self, tmp_path, inventory_document, capsys):
        path = tmp_path / "data.yaml"
        path.write_text("")
        with patch("serializable_dict_tool.core.loader.UnityYAMLDocument") as mock_doc_class:
            mock_doc_class.load.return_value = inventory_document
            assert main(["show", str(path)]) == 0
        assert "Unknown file type: .yaml" in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])


class TestIncompleteFieldsAreKept:
    @pytest.fixture
    def partial(self, tmp_path):
        path = tmp_path / "partial.asset"
        path.write_text("%YAML 1.1\n")
        document = FakeDocument([
            FakeEntry(
                "MonoBehaviour",
                "1",
                {
                    "m_Weights": {"values": [1, 2, 3], "label": "w"},
                    "m_Config": {"keys": ["a"], "values": "oops"},
                },
            )
        ])
        with patch("serializable_dict_tool.core.loader.UnityYAMLDocument") as mock_doc_class:
            mock_doc_class.load.return_value = document
            yield path, document

    def test_clean_leaves_plain_values_list(self, partial, capsys):
        path, document = partial

        assert main(["clean", str(path)]) == 0

        content = document.objects[0].get_content()
        assert content["m_Weights"] == {"values": [1, 2, 3], "label": "w"}
        assert content["m_Config"] == {"keys": ["a"], "values": "oops"}
        assert "Cleaned 0 fields" in capsys.readouterr().out

    def test_edit_incomplete_field_fails(self, partial, capsys):
        path, document = partial

        assert main(["set", str(path), "m_Config", "b", "2"]) == 1

        assert "m_Config" in capsys.readouterr().err
        assert document.objects[0].get_content()["m_Config"] == {"keys": ["a"], "values": "oops"}
        assert document.saved_to == []
