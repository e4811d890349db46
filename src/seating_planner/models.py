"""Data models for SeatingPlanner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .weights import CANNOT_SIT_WEIGHT, RelationshipCategory, parse_category


@dataclass
class Guest:
    """Representation of a guest. Only ``id`` matters to the engine."""

    id: str
    name: str = ""
    dietary: str = ""
    note: str = ""


@dataclass
class Table:
    """A capacitated table and the guest ids seated at it."""

    id: str
    capacity: int
    name: str = ""
    guests: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        try:
            seats = float(self.capacity)
        except (TypeError, ValueError):
            raise ValueError(f"Table {self.id} has a non-numeric capacity: {self.capacity!r}") from None
        if not seats.is_integer():
            raise ValueError(f"Table {self.id} capacity must be a whole number: {self.capacity!r}")
        if seats < 0:
            raise ValueError(f"Table {self.id} has negative capacity: {self.capacity}")
        self.capacity = int(seats)


@dataclass
class RelationshipEdge:
    """Unordered relationship between two guests."""

    a: str
    b: str
    category: RelationshipCategory = RelationshipCategory.CLOSE_FRIEND

    def __post_init__(self) -> None:
        self.category = parse_category(self.category)

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.a, self.b)


@dataclass
class BlacklistEdge:
    """Pair of guests who should not share a table."""

    a: str
    b: str

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.a, self.b)

    @property
    def weight(self) -> float:
        return CANNOT_SIT_WEIGHT
