"""Small builders shared by the test modules."""
from seating_planner.models import Guest, Table


def make_guests(*ids):
    return [Guest(id=gid, name=gid) for gid in ids]


def make_tables(*capacities):
    return [Table(id=f"T{i + 1}", capacity=c) for i, c in enumerate(capacities)]
