"""
Relationship weights.

Relationship scale used by the affinity matrix:
    significant other: +10
    close friend: +4
    family: +3
    friend: +2
    acquaintance: +1
    none: 0
    cannot sit: -1000 (hard exclusion)

Preference modes scale a single category by ``PREFERENCE_MULTIPLIER``:
family under FAMILY_FIRST, close friend under RELATIONSHIPS_FIRST.
"""
from __future__ import annotations

from enum import Enum
from typing import Union


CANNOT_SIT_WEIGHT = -1000.0
PREFERENCE_MULTIPLIER = 1.5


class RelationshipCategory(str, Enum):
    NONE = "none"
    SIGNIFICANT_OTHER = "significant_other"
    CLOSE_FRIEND = "close_friend"
    FAMILY = "family"
    FRIEND = "friend"
    ACQUAINTANCE = "acquaintance"
    CANNOT_SIT = "cannot_sit"


class PreferenceMode(str, Enum):
    BALANCED = "BALANCED"
    FAMILY_FIRST = "FAMILY_FIRST"
    RELATIONSHIPS_FIRST = "RELATIONSHIPS_FIRST"


_BASE_WEIGHT = {
    RelationshipCategory.NONE: 0.0,
    RelationshipCategory.SIGNIFICANT_OTHER: 10.0,
    RelationshipCategory.CLOSE_FRIEND: 4.0,
    RelationshipCategory.FAMILY: 3.0,
    RelationshipCategory.FRIEND: 2.0,
    RelationshipCategory.ACQUAINTANCE: 1.0,
    RelationshipCategory.CANNOT_SIT: CANNOT_SIT_WEIGHT,
}

_BOOSTED = {
    PreferenceMode.FAMILY_FIRST: RelationshipCategory.FAMILY,
    PreferenceMode.RELATIONSHIPS_FIRST: RelationshipCategory.CLOSE_FRIEND,
}


def parse_category(value: Union[str, RelationshipCategory, None]) -> RelationshipCategory:
    """Parse a category name such as ``"close friend"`` or ``"Family"``.

    Spaces and dashes are accepted in place of underscores. Empty values map
    to ``NONE``.
    """
    if isinstance(value, RelationshipCategory):
        return value
    if value is None:
        return RelationshipCategory.NONE
    text = str(value).strip().lower().replace(" ", "_").replace("-", "_")
    if not text or text == "nan":
        return RelationshipCategory.NONE
    try:
        return RelationshipCategory(text)
    except ValueError:
        raise ValueError(f"Unknown relationship category: {value!r}") from None


def parse_preference(value: Union[str, PreferenceMode, None]) -> PreferenceMode:
    """Parse a preference mode name, defaulting to ``BALANCED``."""
    if isinstance(value, PreferenceMode):
        return value
    if value is None:
        return PreferenceMode.BALANCED
    text = str(value).strip().upper().replace(" ", "_").replace("-", "_")
    if not text:
        return PreferenceMode.BALANCED
    try:
        return PreferenceMode(text)
    except ValueError:
        raise ValueError(f"Unknown preference mode: {value!r}") from None


def weight_of(
    category: Union[str, RelationshipCategory],
    preference: Union[str, PreferenceMode, None] = PreferenceMode.BALANCED,
) -> float:
    """Signed weight of a relationship category under a preference mode."""
    category = parse_category(category)
    preference = parse_preference(preference)
    weight = _BASE_WEIGHT[category]
    if _BOOSTED.get(preference) is category:
        weight *= PREFERENCE_MULTIPLIER
    return weight
