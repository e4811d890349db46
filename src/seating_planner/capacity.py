"""Capacity planning ahead of allocation."""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .models import Table

log = logging.getLogger(__name__)

DEFAULT_TABLE_CAPACITY = 8


def total_capacity(tables: Iterable[Table]) -> int:
    return sum(t.capacity for t in tables)


def additional_tables_needed(
    guest_count: int, existing_capacity: int, default_capacity: int = DEFAULT_TABLE_CAPACITY
) -> int:
    """Minimum number of ``default_capacity`` tables to add so every guest has a seat."""
    if default_capacity <= 0:
        raise ValueError(f"default_capacity must be positive, got {default_capacity}")
    if guest_count < 0:
        raise ValueError(f"guest_count must not be negative, got {guest_count}")
    missing = guest_count - existing_capacity
    if missing <= 0:
        return 0
    return -(-missing // default_capacity)


def expand_tables(
    tables: Sequence[Table], guest_count: int, default_capacity: int = DEFAULT_TABLE_CAPACITY
) -> List[Table]:
    """Return a new table list with generic tables appended when seats are short.

    Added tables are named ``auto-table-1``, ``auto-table-2`` and so on, skipping
    ids already in use. The input list is not modified.
    """
    needed = additional_tables_needed(guest_count, total_capacity(tables), default_capacity)
    expanded = list(tables)
    if not needed:
        return expanded

    taken = {str(t.id) for t in tables}
    counter = 0
    for _ in range(needed):
        counter += 1
        while f"auto-table-{counter}" in taken:
            counter += 1
        table_id = f"auto-table-{counter}"
        expanded.append(Table(id=table_id, capacity=default_capacity))
    log.info("Added %d table(s) of %d seats to seat %d guests", needed, default_capacity, guest_count)
    return expanded
