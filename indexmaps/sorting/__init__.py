"""Column sort-state storage built on the queued index map."""

from .column_states import (
    SORTING_STATES_MAP_NAME,
    ColumnStatesManager,
    IdentityTranslator,
    IndexTranslator,
    SortOrder,
)

__all__ = [
    "SORTING_STATES_MAP_NAME",
    "ColumnStatesManager",
    "IdentityTranslator",
    "IndexTranslator",
    "SortOrder",
]
