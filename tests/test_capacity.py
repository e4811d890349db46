import pytest

from helpers import make_tables
from seating_planner.capacity import additional_tables_needed, expand_tables, total_capacity
from seating_planner.models import Table


def test_no_tables_needed_when_capacity_suffices():
    assert additional_tables_needed(10, 10, 8) == 0
    assert additional_tables_needed(3, 16, 8) == 0
    assert additional_tables_needed(0, 0, 8) == 0


def test_ceiling_division_of_missing_seats():
    assert additional_tables_needed(10, 8, 8) == 1
    assert additional_tables_needed(17, 0, 8) == 3
    assert additional_tables_needed(16, 0, 8) == 2
    assert additional_tables_needed(25, 4, 10) == 3


def test_invalid_inputs():
    with pytest.raises(ValueError):
        additional_tables_needed(10, 0, 0)
    with pytest.raises(ValueError):
        additional_tables_needed(-1, 0, 8)


def test_expand_tables_appends_generic_tables():
    tables = make_tables(4, 4)
    expanded = expand_tables(tables, 20, default_capacity=6)
    assert len(tables) == 2
    assert [t.id for t in expanded] == ["T1", "T2", "auto-table-1", "auto-table-2"]
    assert total_capacity(expanded) == 20
    assert expanded[2].guests == []


def test_expand_tables_skips_taken_ids():
    tables = [Table(id="auto-table-1", capacity=2)]
    expanded = expand_tables(tables, 6, default_capacity=2)
    assert [t.id for t in expanded] == ["auto-table-1", "auto-table-2", "auto-table-3"]


def test_expand_tables_returns_copy_when_enough_seats():
    tables = make_tables(8)
    expanded = expand_tables(tables, 5)
    assert expanded == tables
    assert expanded is not tables
