import pytest

from seating_planner.models import BlacklistEdge, Guest, RelationshipEdge, Table
from seating_planner.weights import CANNOT_SIT_WEIGHT, RelationshipCategory


def test_guest_instantiation():
    guest = Guest(id="g1", name="Alex", dietary="vegan", note="arrives late")
    assert guest.id == "g1"
    assert guest.name == "Alex"


def test_table_defaults_to_empty_guest_list():
    a = Table(id="T1", capacity=8)
    b = Table(id="T2", capacity=8)
    a.guests.append("g1")
    assert b.guests == []


def test_table_rejects_negative_capacity():
    with pytest.raises(ValueError):
        Table(id="T1", capacity=-1)


@pytest.mark.parametrize("capacity", [4.5, "4.5", "four", float("nan"), None])
def test_table_rejects_capacity_that_is_not_a_whole_number(capacity):
    with pytest.raises(ValueError):
        Table(id="T1", capacity=capacity)


@pytest.mark.parametrize("capacity", [4, 4.0, "4", " 4 "])
def test_table_accepts_whole_number_capacity(capacity):
    assert Table(id="T1", capacity=capacity).capacity == 4


def test_relationship_edge_parses_category_and_defaults_to_close_friend():
    assert RelationshipEdge("a", "b").category is RelationshipCategory.CLOSE_FRIEND
    assert RelationshipEdge("a", "b", "family").category is RelationshipCategory.FAMILY
    assert RelationshipEdge("a", "b").pair == ("a", "b")


def test_blacklist_edge_carries_sentinel():
    assert BlacklistEdge("a", "b").weight == CANNOT_SIT_WEIGHT
