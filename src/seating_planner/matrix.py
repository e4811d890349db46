"""Affinity matrix construction.

The matrix is indexed by guest position in the input list. Edges are applied
in order, so a later edge for the same pair replaces an earlier one. Blacklist
edges are applied last and always override relationship weights. Edges that
reference unknown guests, or pair a guest with themselves, are dropped with a
warning.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .models import BlacklistEdge, Guest, RelationshipEdge
from .weights import PreferenceMode, parse_preference, weight_of

log = logging.getLogger(__name__)

Matrix = List[List[float]]


def _resolve(index: Dict[str, int], pair: Tuple[str, str], kind: str) -> Optional[Tuple[int, int]]:
    a, b = pair
    i = index.get(str(a))
    j = index.get(str(b))
    if i is None or j is None:
        log.warning("Dropping %s edge with unknown guest: %s, %s", kind, a, b)
        return None
    if i == j:
        log.warning("Dropping %s edge from guest %s to themselves", kind, a)
        return None
    return i, j


def build_affinity_matrix(
    guests: Sequence[Guest],
    relationships: Iterable[RelationshipEdge] = (),
    blacklist: Iterable[BlacklistEdge] = (),
    preference: Union[str, PreferenceMode] = PreferenceMode.BALANCED,
) -> Matrix:
    """Return the symmetric N x N weight matrix for ``guests``."""
    preference = parse_preference(preference)
    n = len(guests)
    index = {str(g.id): i for i, g in enumerate(guests)}
    matrix: Matrix = [[0.0] * n for _ in range(n)]

    for rel in relationships:
        pos = _resolve(index, rel.pair, "relationship")
        if pos is None:
            continue
        i, j = pos
        w = weight_of(rel.category, preference)
        matrix[i][j] = w
        matrix[j][i] = w

    for restriction in blacklist:
        pos = _resolve(index, restriction.pair, "blacklist")
        if pos is None:
            continue
        i, j = pos
        matrix[i][j] = restriction.weight
        matrix[j][i] = restriction.weight

    return matrix


def is_symmetric(matrix: Matrix) -> bool:
    n = len(matrix)
    return all(matrix[i][j] == matrix[j][i] for i in range(n) for j in range(i + 1, n))
