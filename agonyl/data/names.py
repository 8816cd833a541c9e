"""
Display names for character class and nation IDs.

Unknown IDs fall back to the default entry rather than raising; the client
behaves the same way.
"""

from __future__ import annotations

_CLASS_NAMES: dict[int, str] = {
    1: "Holy Knight",
    2: "Mage",
    3: "Archer",
}
DEFAULT_CLASS_NAME = "Warrior"

_NATION_NAMES: dict[int, str] = {
    1: "Quanato",
}
DEFAULT_NATION_NAME = "Temoz"


def class_name(class_id: int) -> str:
    """Get the display name for a character class ID (0 and unknown IDs are Warrior)."""
    return _CLASS_NAMES.get(class_id, DEFAULT_CLASS_NAME)


def nation_name(nation_id: int) -> str:
    """Get the display name for a nation ID (anything but 1 is Temoz)."""
    return _NATION_NAMES.get(nation_id, DEFAULT_NATION_NAME)


def all_classes() -> dict[int, str]:
    """Get a copy of the named classes, including the Warrior default at 0."""
    return {0: DEFAULT_CLASS_NAME, **_CLASS_NAMES}
