"""
Relationship aware seating solver.

Greedy capacitated assignment:
  1. Build the affinity matrix from relationship and blacklist edges.
  2. Rank guests by connection degree, most connected first.
  3. Seat each guest at the open table with the highest score. Ties go to the
     earliest table in input order.

The solver does not backtrack. A blacklisted pair can still end up together
when no other table has a free seat.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Sequence, Union

from .capacity import DEFAULT_TABLE_CAPACITY, expand_tables, total_capacity
from .errors import InsufficientCapacity
from .matrix import Matrix, build_affinity_matrix
from .models import BlacklistEdge, Guest, RelationshipEdge, Table
from .ranking import rank_guests
from .scoring import SHARED_CONNECTION_BONUS, table_score
from .weights import CANNOT_SIT_WEIGHT, PreferenceMode, parse_preference

log = logging.getLogger(__name__)


def allocate(
    matrix: Matrix,
    capacities: Sequence[int],
    shared_bonus: float = SHARED_CONNECTION_BONUS,
) -> List[List[int]]:
    """Assign every guest index to a table index.

    Returns one list of guest indices per table, in seating order. Raises
    ``InsufficientCapacity`` before placing anyone when seats are short.
    """
    guest_count = len(matrix)
    seats = sum(capacities)
    if guest_count > seats:
        raise InsufficientCapacity(guest_count, seats)

    assignments: List[List[int]] = [[] for _ in capacities]

    for guest in rank_guests(matrix):
        best_table = None
        best_score = float("-inf")
        clear_table_open = False
        for table_index, capacity in enumerate(capacities):
            if len(assignments[table_index]) >= capacity:
                continue
            seated = assignments[table_index]
            if not any(matrix[guest][other] == CANNOT_SIT_WEIGHT for other in seated):
                clear_table_open = True
            score = table_score(matrix, guest, seated, shared_bonus)
            if score > best_score:
                best_score = score
                best_table = table_index

        seated = assignments[best_table]
        if any(matrix[guest][other] == CANNOT_SIT_WEIGHT for other in seated):
            if clear_table_open:
                log.warning(
                    "Guest %d seated next to a blacklisted guest at table %d: positive ties outweigh the exclusion",
                    guest, best_table,
                )
            else:
                log.warning("Guest %d forced next to a blacklisted guest at table %d", guest, best_table)
        log.debug("Guest %d -> table %d (score %.2f)", guest, best_table, best_score)
        seated.append(guest)

    return assignments


def assignment_map(tables: Iterable[Table]) -> Dict[str, str]:
    """Flatten seated tables into ``{guest_id: table_id}``."""
    return {gid: t.id for t in tables for gid in t.guests}


# ----------------------------- model -----------------------------
class SeatingModel:
    """Run options for the greedy seating solver.

    The model holds configuration only. ``solve`` is a pure function of its
    arguments, so one instance can be reused across runs and threads.
    """

    def __init__(
        self,
        preference: Union[str, PreferenceMode] = PreferenceMode.BALANCED,
        shared_connection_bonus: float = SHARED_CONNECTION_BONUS,
        auto_tables: bool = False,
        default_table_capacity: int = DEFAULT_TABLE_CAPACITY,
    ) -> None:
        self.preference = parse_preference(preference)
        self.shared_connection_bonus = float(shared_connection_bonus)
        # Capacity planning
        self.auto_tables = auto_tables
        self.default_table_capacity = int(default_table_capacity)

    def build_matrix(
        self,
        guests: Sequence[Guest],
        relationships: Iterable[RelationshipEdge] = (),
        blacklist: Iterable[BlacklistEdge] = (),
    ) -> Matrix:
        return build_affinity_matrix(guests, relationships, blacklist, self.preference)

    def solve(
        self,
        guests: Sequence[Guest],
        tables: Sequence[Table],
        relationships: Iterable[RelationshipEdge] = (),
        blacklist: Iterable[BlacklistEdge] = (),
    ) -> List[Table]:
        """Return new tables with ``guests`` filled in. Inputs are left untouched."""
        if self.auto_tables:
            tables = expand_tables(tables, len(guests), self.default_table_capacity)

        matrix = self.build_matrix(guests, relationships, blacklist)
        assignments = allocate(matrix, [t.capacity for t in tables], self.shared_connection_bonus)

        result = [
            replace(table, guests=[str(guests[i].id) for i in members])
            for table, members in zip(tables, assignments)
        ]
        log.info(
            "Seated %d guests at %d tables (%d seats, preference %s)",
            len(guests), sum(1 for t in result if t.guests), total_capacity(result), self.preference.value,
        )
        return result


def optimize_seating(
    guests: Sequence[Guest],
    relationships: Iterable[RelationshipEdge],
    blacklist: Iterable[BlacklistEdge],
    tables: Sequence[Table],
    preference: Union[str, PreferenceMode] = PreferenceMode.BALANCED,
    auto_tables: bool = False,
    default_table_capacity: int = DEFAULT_TABLE_CAPACITY,
) -> List[Table]:
    """One call convenience wrapper around ``SeatingModel.solve``."""
    model = SeatingModel(
        preference=preference,
        auto_tables=auto_tables,
        default_table_capacity=default_table_capacity,
    )
    return model.solve(guests, tables, relationships, blacklist)
