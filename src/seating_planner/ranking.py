"""Guest ordering for the greedy allocator."""
from __future__ import annotations

from typing import List, Sequence


def connection_degree(row: Sequence[float]) -> int:
    """Number of strictly positive weights in a matrix row."""
    return sum(1 for w in row if w > 0)


def rank_guests(matrix: Sequence[Sequence[float]]) -> List[int]:
    """Guest indices, most connected first.

    ``sorted`` is stable, so guests with equal degree keep input order.
    """
    degrees = [connection_degree(row) for row in matrix]
    return sorted(range(len(matrix)), key=lambda i: -degrees[i])
