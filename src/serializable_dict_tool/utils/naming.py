"""
Unity-style naming utilities.

Turns serialized field names and property paths into the labels the Unity
inspector shows, similar to ObjectNames.NicifyVariableName().
"""

import re
from functools import lru_cache

# Matches Unity array element segments: "Array.data[3]"
ARRAY_ELEMENT_PATTERN = re.compile(r"^data\[(\d+)\]$")


@lru_cache(maxsize=1024)
def nicify_variable_name(name: str) -> str:
    """
    Convert a serialized field name to an inspector label.

    - Strips the m_, k_, s_ and _ prefixes
    - Splits camelCase and PascalCase into words
    - Keeps acronyms together ("UIPrices" -> "UI Prices")

    Examples:
        m_ItemPrices -> Item Prices
        spawnWeights -> Spawn Weights
        _lookup -> Lookup
        ID -> ID

    Args:
        name: The serialized field name

    Returns:
        The display label
    """
    if not name:
        return ""

    original = name
    for prefix in ("m_", "k_", "s_", "_"):
        if name.startswith(prefix):
            name = name[len(prefix):]
            break

    if not name:
        return original

    # Short all-caps names are acronyms
    if name.isupper() and len(name) <= 4:
        return name

    words = []
    for i, char in enumerate(name):
        if i > 0 and char.isupper():
            prev = name[i - 1]
            starts_word = prev.islower() or (
                prev.isupper() and i + 1 < len(name) and name[i + 1].islower()
            )
            if starts_word:
                words.append(" ")
        words.append(char.upper() if i == 0 else char)

    return "".join(words)


def format_property_path(parts: tuple) -> str:
    """
    Build a Unity property path from path segments.

    String segments are field names, int segments are array indices.

    Examples:
        ("m_Prices",) -> "m_Prices"
        ("m_Tables", 2, "lookup") -> "m_Tables.Array.data[2].lookup"
    """
    pieces = []
    for part in parts:
        if isinstance(part, int):
            pieces.append(f"Array.data[{part}]")
        else:
            pieces.append(str(part))
    return ".".join(pieces)


def parse_property_path(path: str) -> tuple:
    """
    Split a Unity property path back into segments.

    Inverse of format_property_path().
    """
    if not path:
        return ()

    parts = []
    raw = path.split(".")
    i = 0
    while i < len(raw):
        segment = raw[i]
        if segment == "Array" and i + 1 < len(raw):
            match = ARRAY_ELEMENT_PATTERN.match(raw[i + 1])
            if match:
                parts.append(int(match.group(1)))
                i += 2
                continue
        parts.append(segment)
        i += 1
    return tuple(parts)


def nicify_property_path(path: str) -> str:
    """
    Convert a property path to a display string.

    Examples:
        "m_Prices" -> "Prices"
        "m_Tables.Array.data[2].lookup" -> "Tables > [2] > Lookup"
    """
    labels = []
    for part in parse_property_path(path):
        if isinstance(part, int):
            labels.append(f"[{part}]")
        else:
            labels.append(nicify_variable_name(part))
    return " > ".join(labels)
