"""CSV loading utilities."""
from __future__ import annotations

import math
from pathlib import Path
from typing import IO, Any, List, Optional, Set, Union

import pandas as pd

from .models import BlacklistEdge, Guest, RelationshipEdge, Table
from .weights import RelationshipCategory

CsvSource = Union[Path, str, IO[Any]]


def _text(value: object) -> str:
    """Cell value as stripped text. ``pandas`` gives ``nan`` for blanks."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    text = str(value).strip()
    return "" if text.lower() == "nan" else text


def _check_ids(a: str, b: str, guest_ids: Optional[Set[str]], source: str) -> None:
    if guest_ids is not None and (a not in guest_ids or b not in guest_ids):
        raise ValueError(f"{source} references unknown guest: {a}, {b}")


def load_guests(path: CsvSource) -> List[Guest]:
    """Load guests from ``guests.csv``. Ids must be unique."""
    df = pd.read_csv(path, dtype={"id": str})
    guests: List[Guest] = []
    for _, row in df.iterrows():
        guests.append(
            Guest(
                id=_text(row["id"]),
                name=_text(row.get("name", "")),
                dietary=_text(row.get("dietary", "")),
                note=_text(row.get("note", "")),
            )
        )

    seen: Set[str] = set()
    for g in guests:
        if g.id in seen:
            raise ValueError(f"Duplicate guest id: {g.id}")
        seen.add(g.id)
    return guests


def load_tables(path: CsvSource) -> List[Table]:
    """Load table definitions."""
    df = pd.read_csv(path, dtype={"id": str})
    tables: List[Table] = []
    for _, row in df.iterrows():
        tables.append(
            Table(
                id=_text(row["id"]),
                capacity=row["capacity"],
                name=_text(row.get("name", "")),
            )
        )
    return tables


def load_relationships(path: CsvSource, guest_ids: Optional[Set[str]] = None) -> List[RelationshipEdge]:
    """Load relationships between guests.

    A missing ``relationship`` column or cell means close friend. If
    ``guest_ids`` is provided it validates that both endpoints exist.
    """
    df = pd.read_csv(path, dtype={"guest1_id": str, "guest2_id": str})
    relationships: List[RelationshipEdge] = []
    for _, row in df.iterrows():
        a = _text(row["guest1_id"])
        b = _text(row["guest2_id"])
        _check_ids(a, b, guest_ids, "Relationship")
        category = _text(row.get("relationship", "")) or RelationshipCategory.CLOSE_FRIEND
        relationships.append(RelationshipEdge(a=a, b=b, category=category))
    return relationships


def load_blacklist(path: CsvSource, guest_ids: Optional[Set[str]] = None) -> List[BlacklistEdge]:
    """Load pairs of guests who should not sit together."""
    df = pd.read_csv(path, dtype={"guest1_id": str, "guest2_id": str})
    blacklist: List[BlacklistEdge] = []
    for _, row in df.iterrows():
        a = _text(row["guest1_id"])
        b = _text(row["guest2_id"])
        _check_ids(a, b, guest_ids, "Blacklist entry")
        blacklist.append(BlacklistEdge(a=a, b=b))
    return blacklist


def load_all(
    guests_path: CsvSource,
    relationships_path: CsvSource,
    tables_path: CsvSource,
    blacklist_path: Optional[CsvSource] = None,
):
    """Convenience wrapper returning guests, relationships, blacklist and tables."""
    guests = load_guests(guests_path)
    guest_ids = {g.id for g in guests}
    relationships = load_relationships(relationships_path, guest_ids)
    blacklist = load_blacklist(blacklist_path, guest_ids) if blacklist_path is not None else []
    tables = load_tables(tables_path)
    return guests, relationships, blacklist, tables
