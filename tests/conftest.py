"""Shared fixtures: a stand-in for unityflow documents."""

import pytest


class FakeEntry:
    """Mock unityflow object."""

    def __init__(self, class_name: str, file_id: str, content: dict):
        self.class_name = class_name
        self.file_id = file_id
        self._content = content

    def get_content(self) -> dict:
        return self._content


class FakeDocument:
    """Mock unityflow UnityYAMLDocument that records saves."""

    def __init__(self, objects: list):
        self.objects = objects
        self.saved_to: list[str] = []

    def save(self, path: str) -> None:
        self.saved_to.append(path)


@pytest.fixture
def inventory_document() -> FakeDocument:
    """A MonoBehaviour with a flat dictionary and a list of nested ones."""
    behaviour = FakeEntry(
        "MonoBehaviour",
        "11400000",
        {
            "m_Script": {"fileID": 11500000, "guid": "abc123", "type": 3},
            "m_Name": "Inventory",
            "m_Prices": {
                "keys": ["sword", "shield"],
                "values": [100, 50],
            },
            "m_Tables": [
                {
                    "name": "loot",
                    "lookup": {"keys": ["a", "a", "b"], "values": [1, 2, 3]},
                },
                {
                    "name": "refs",
                    "lookup": {
                        "keys": [{"fileID": 1, "guid": "g1", "type": 2}],
                        "values": ["first"],
                    },
                },
            ],
        },
    )
    transform = FakeEntry(
        "Transform",
        "400000",
        {"m_LocalPosition": {"x": 0, "y": 0, "z": 0}, "m_Children": []},
    )
    return FakeDocument([transform, behaviour])
