"""SeatingPlanner package."""
from .models import Guest, Table, RelationshipEdge, BlacklistEdge
from .weights import (
    CANNOT_SIT_WEIGHT,
    PreferenceMode,
    RelationshipCategory,
    weight_of,
)
from .errors import InsufficientCapacity, SeatingError
from .matrix import build_affinity_matrix
from .ranking import rank_guests
from .scoring import table_score
from .capacity import additional_tables_needed, expand_tables
from .solver import SeatingModel, allocate, assignment_map, optimize_seating
from .csv_loader import (
    load_guests,
    load_relationships,
    load_blacklist,
    load_tables,
    load_all,
)

__all__ = [
    "Guest",
    "Table",
    "RelationshipEdge",
    "BlacklistEdge",
    "CANNOT_SIT_WEIGHT",
    "PreferenceMode",
    "RelationshipCategory",
    "weight_of",
    "InsufficientCapacity",
    "SeatingError",
    "build_affinity_matrix",
    "rank_guests",
    "table_score",
    "additional_tables_needed",
    "expand_tables",
    "SeatingModel",
    "allocate",
    "assignment_map",
    "optimize_seating",
    "load_guests",
    "load_relationships",
    "load_blacklist",
    "load_tables",
    "load_all",
]
