"""Utility functions and constants."""

from serializable_dict_tool.utils.naming import (
    format_property_path,
    nicify_property_path,
    nicify_variable_name,
    parse_property_path,
)
from serializable_dict_tool.utils.parsing import (
    FrozenMapping,
    freeze_value,
    parse_scalar,
    thaw_value,
)

__all__ = [
    "format_property_path",
    "nicify_property_path",
    "nicify_variable_name",
    "parse_property_path",
    "FrozenMapping",
    "freeze_value",
    "parse_scalar",
    "thaw_value",
]
