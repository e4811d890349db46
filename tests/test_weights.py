import pytest

from seating_planner.weights import (
    CANNOT_SIT_WEIGHT,
    PREFERENCE_MULTIPLIER,
    PreferenceMode,
    RelationshipCategory,
    parse_category,
    parse_preference,
    weight_of,
)


def test_base_weights_under_balanced():
    assert weight_of(RelationshipCategory.NONE) == 0
    assert weight_of(RelationshipCategory.SIGNIFICANT_OTHER) == 10
    assert weight_of(RelationshipCategory.CLOSE_FRIEND) == 4
    assert weight_of(RelationshipCategory.FAMILY) == 3
    assert weight_of(RelationshipCategory.FRIEND) == 2
    assert weight_of(RelationshipCategory.ACQUAINTANCE) == 1


def test_cannot_sit_returns_sentinel_in_every_mode():
    for mode in PreferenceMode:
        assert weight_of(RelationshipCategory.CANNOT_SIT, mode) == CANNOT_SIT_WEIGHT
    assert CANNOT_SIT_WEIGHT < 0


def test_family_first_scales_family_only():
    assert weight_of("family", "FAMILY_FIRST") == 3 * PREFERENCE_MULTIPLIER
    assert weight_of("close_friend", "FAMILY_FIRST") == 4
    assert weight_of("significant_other", "FAMILY_FIRST") == 10


def test_relationships_first_scales_close_friend_only():
    assert weight_of("close_friend", PreferenceMode.RELATIONSHIPS_FIRST) == 4 * PREFERENCE_MULTIPLIER
    assert weight_of("family", PreferenceMode.RELATIONSHIPS_FIRST) == 3
    assert weight_of("friend", PreferenceMode.RELATIONSHIPS_FIRST) == 2


def test_none_is_zero_in_every_mode():
    for mode in PreferenceMode:
        assert weight_of("none", mode) == 0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("close friend", RelationshipCategory.CLOSE_FRIEND),
        ("Significant-Other", RelationshipCategory.SIGNIFICANT_OTHER),
        (" FAMILY ", RelationshipCategory.FAMILY),
        ("", RelationshipCategory.NONE),
        (None, RelationshipCategory.NONE),
        (RelationshipCategory.FRIEND, RelationshipCategory.FRIEND),
    ],
)
def test_parse_category(raw, expected):
    assert parse_category(raw) is expected


def test_parse_category_rejects_unknown():
    with pytest.raises(ValueError):
        parse_category("frenemy")


def test_parse_preference():
    assert parse_preference(None) is PreferenceMode.BALANCED
    assert parse_preference("family first") is PreferenceMode.FAMILY_FIRST
    assert parse_preference("relationships-first") is PreferenceMode.RELATIONSHIPS_FIRST
    with pytest.raises(ValueError):
        parse_preference("chaos")
