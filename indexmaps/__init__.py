"""
indexmaps - Physical Index Maps

Parallel arrays of per-row/per-column metadata keyed by physical index,
kept coherent when rows or columns are inserted, removed or reset.
"""

# Default value policies
from .defaults import Constant, DefaultPolicy, Generator, as_default_policy

# Exceptions
from .exceptions import IndexMapError, InvalidSortOrderError, UnimplementedOperationError

# Maps and the collection broadcasting structural changes to them
from .maps import (
    IndexedMap,
    MapCollection,
    QueuedIndexedMap,
    Reorganizable,
    ValueMap,
    is_reorganizable,
)

# Sort-state consumer
from .sorting import (
    SORTING_STATES_MAP_NAME,
    ColumnStatesManager,
    IdentityTranslator,
    IndexTranslator,
    SortOrder,
)

# Pure reindexing algorithms
from .util.reindex import insert_defaulted, remove_at, shift_down, shift_up

__all__ = [
    # Maps
    "ValueMap",
    "IndexedMap",
    "QueuedIndexedMap",
    "Reorganizable",
    "is_reorganizable",
    "MapCollection",
    # Default policies
    "DefaultPolicy",
    "Constant",
    "Generator",
    "as_default_policy",
    # Reindexing
    "insert_defaulted",
    "remove_at",
    "shift_up",
    "shift_down",
    # Sorting
    "ColumnStatesManager",
    "IndexTranslator",
    "IdentityTranslator",
    "SortOrder",
    "SORTING_STATES_MAP_NAME",
    # Exceptions
    "IndexMapError",
    "UnimplementedOperationError",
    "InvalidSortOrderError",
]
