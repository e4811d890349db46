"""
Table scoring and reporting.

A candidate guest scores a table by summing, over everyone already seated:
    positive weight  -> the weight plus a bonus per shared positive connection
    cannot sit       -> the hard exclusion weight
    anything else    -> nothing

The shared connection bonus only applies when the candidate and the seated
guest are directly related. Friends of friends with no direct edge add nothing.

Table compatibility is graded A to F based on the average weight among all
pairs at the table.
"""
from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Sequence

from .models import Guest, Table
from .weights import CANNOT_SIT_WEIGHT

SHARED_CONNECTION_BONUS = 0.5

Row = Sequence[float]


# ----------------------------- placement scoring -----------------------------
def shared_connections(matrix: Sequence[Row], a: int, b: int) -> int:
    """Count guests positively connected to both ``a`` and ``b``."""
    row_a, row_b = matrix[a], matrix[b]
    return sum(1 for k in range(len(row_a)) if row_a[k] > 0 and row_b[k] > 0)


def table_score(
    matrix: Sequence[Row],
    candidate: int,
    seated: Sequence[int],
    shared_bonus: float = SHARED_CONNECTION_BONUS,
) -> float:
    """Desirability of seating ``candidate`` with the guests in ``seated``."""
    score = 0.0
    for other in seated:
        w = matrix[candidate][other]
        if w > 0:
            score += w
            score += shared_bonus * shared_connections(matrix, candidate, other)
        elif w == CANNOT_SIT_WEIGHT:
            score += w
    return score


# ----------------------------- reporting -----------------------------
def compute_table_stats(members: Sequence[int], matrix: Sequence[Row]) -> Dict[str, int | float]:
    """Compute total and mean pair weights plus sign breakdown for a set of members."""
    total = 0.0
    pos = neg = neu = 0
    pairs = 0
    for a, b in combinations(members, 2):
        v = matrix[a][b]
        total += v
        pairs += 1
        if v > 0:
            pos += 1
        elif v < 0:
            neg += 1
        else:
            neu += 1
    mean = total / pairs if pairs else 0.0
    return {
        "total_score": total,
        "mean_score": mean,
        "pair_count": pairs,
        "pos_pairs": pos,
        "neg_pairs": neg,
        "neu_pairs": neu,
    }


def grade_tables(stats: List[Dict[str, int | float]]) -> List[Dict[str, int | float | str]]:
    """Assign A to F based on mean score thresholds."""
    graded = []
    for s in stats:
        m = s["mean_score"]
        if m >= 4:
            g = "A"
        elif m >= 2.5:
            g = "B"
        elif m >= 1.5:
            g = "C"
        elif m >= 0.5:
            g = "D"
        else:
            g = "F"
        out = dict(s)
        out["grade"] = g
        graded.append(out)
    return graded


def build_report(
    tables: Sequence[Table], matrix: Sequence[Row], guests: Sequence[Guest]
) -> List[Dict[str, int | float | str]]:
    """One graded stats row per table, members listed by name."""
    index = {str(g.id): i for i, g in enumerate(guests)}
    stats = []
    for table in tables:
        members = [index[gid] for gid in table.guests if gid in index]
        s = compute_table_stats(members, matrix)
        s["table"] = table.id
        s["members"] = "|".join(guests[i].name or str(guests[i].id) for i in members)
        stats.append(s)
    return grade_tables(stats)
