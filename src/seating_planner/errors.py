"""Errors raised by the seating engine."""
from __future__ import annotations


class SeatingError(ValueError):
    """Base class for seating failures."""


class InsufficientCapacity(SeatingError):
    """Total table capacity is smaller than the number of guests."""

    def __init__(self, guest_count: int, capacity: int) -> None:
        self.guest_count = guest_count
        self.capacity = capacity
        super().__init__(
            f"Not enough seats for all guests: {guest_count} guests, {capacity} seats"
        )
