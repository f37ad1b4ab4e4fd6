"""
serializable-dict-tool: Inspect and edit Unity serialized dictionaries.
"""

__version__ = "0.1.0"

from serializable_dict_tool.core.serializable_dict import (
    KeyNotFoundError,
    SerializableDictionary,
)

__all__ = [
    "KeyNotFoundError",
    "SerializableDictionary",
]
