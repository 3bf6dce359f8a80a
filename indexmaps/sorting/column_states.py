"""
Column Sort States
==================

Stores which columns are sorted, in which order and with which priority.

Sort states live in a QueuedIndexedMap keyed by *physical* column, registered
in the grid's column MapCollection so they follow inserted and removed
columns. The public methods speak *visual* column indexes; conversion goes
through an IndexTranslator supplied by the grid.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol, runtime_checkable

from ..exceptions import InvalidSortOrderError
from ..maps.collection import MapCollection
from ..maps.queued import QueuedIndexedMap

SORTING_STATES_MAP_NAME = "ColumnStatesManager.sortingStates"

INHERITED_COLUMN_PROPERTIES = (
    "sort_empty_cells",
    "indicator",
    "header_action",
    "compare_function_factory",
)

SORT_EMPTY_CELLS_DEFAULT = False
SHOW_SORT_INDICATOR_DEFAULT = True
HEADER_ACTION_DEFAULT = True


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@runtime_checkable
class IndexTranslator(Protocol):
    """Physical <-> visual column conversion provided by the grid."""

    def to_physical(self, visual_index: int) -> Optional[int]: ...

    def to_visual(self, physical_index: int) -> Optional[int]: ...


class IdentityTranslator:
    """Translator for grids whose visual order equals the physical order."""

    def to_physical(self, visual_index: int) -> Optional[int]:
        return visual_index

    def to_visual(self, physical_index: int) -> Optional[int]:
        return physical_index


def _parse_sort_order(order: Any) -> SortOrder:
    try:
        return SortOrder(order)
    except ValueError:
        raise InvalidSortOrderError(
            f"Sort order must be 'asc' or 'desc', got {order!r}"
        ) from None


class ColumnStatesManager:
    """
    Sort state of every column plus the column properties affecting sorting.

    Usage:
        manager = ColumnStatesManager(column_maps, translator)
        manager.set_sort_states([
            {"column": 2, "sortOrder": "asc"},
            {"column": 0, "sortOrder": "desc"},
        ])
        manager.get_sort_order_of_column(2)            # "asc"
        manager.get_index_of_column_in_sort_queue(0)   # 1
    """

    def __init__(
        self,
        collection: MapCollection,
        translator: Optional[IndexTranslator] = None,
    ) -> None:
        self._collection = collection
        self._translator = translator or IdentityTranslator()

        self.sort_empty_cells = SORT_EMPTY_CELLS_DEFAULT
        self.indicator = SHOW_SORT_INDICATOR_DEFAULT
        self.header_action = HEADER_ACTION_DEFAULT
        self.compare_function_factory = None

        self.sorting_states: Optional[QueuedIndexedMap] = collection.register(
            SORTING_STATES_MAP_NAME, QueuedIndexedMap()
        )

    # Column properties

    def update_all_columns_properties(self, all_sort_settings: Any) -> None:
        """Copy the sorting-related properties found in ``all_sort_settings``."""
        if not isinstance(all_sort_settings, Mapping):
            return

        for property_name, new_value in all_sort_settings.items():
            if property_name in INHERITED_COLUMN_PROPERTIES:
                setattr(self, property_name, new_value)

    def get_all_columns_properties(self) -> Dict[str, Any]:
        column_properties = {
            "sort_empty_cells": self.sort_empty_cells,
            "indicator": self.indicator,
            "header_action": self.header_action,
        }

        if callable(self.compare_function_factory):
            column_properties["compare_function_factory"] = self.compare_function_factory

        return column_properties

    # Sort states

    def get_sort_order_of_column(self, column: int) -> Optional[str]:
        """``"asc"``, ``"desc"`` or None for the visual ``column``."""
        state = self._state_at(column)
        if isinstance(state, Mapping):
            return state.get("sortOrder")
        return None

    def get_index_of_column_in_sort_queue(self, column: int) -> int:
        """Priority of the visual ``column`` among sorted columns, -1 if unsorted."""
        for position, physical_column in enumerate(self._queue_order()):
            if self._translator.to_visual(physical_column) == column:
                return position
        return -1

    def get_number_of_sorted_columns(self) -> int:
        return len(self._queue_order())

    def is_list_of_sorted_columns_empty(self) -> bool:
        return self.get_number_of_sorted_columns() == 0

    def is_column_sorted(self, column: int) -> bool:
        return isinstance(self._state_at(column), Mapping)

    def get_sort_states(self) -> List[Dict[str, Any]]:
        """
        Sorted columns in priority order.

        Each state exposes the *visual* column under ``"column"``.
        """
        if self.sorting_states is None:
            return []

        sort_states = []
        for physical_column, value in self.sorting_states.get_entries():
            column = self._translator.to_visual(physical_column)
            if isinstance(value, Mapping):
                sort_states.append({"column": column, **value})
            else:
                sort_states.append({"column": column, "value": value})
        return sort_states

    def get_column_sort_state(self, column: int) -> Optional[Dict[str, Any]]:
        if not self.is_column_sorted(column):
            return None

        return {"column": column, "sortOrder": self._state_at(column).get("sortOrder")}

    def set_sort_states(self, sort_states: Iterable[Mapping]) -> None:
        """
        Replace every sort state.

        States are queued in the given order; a column listed twice keeps its
        first state. Orders are validated before anything is changed.
        """
        if self.sorting_states is None:
            return

        parsed = [
            (state["column"], _parse_sort_order(state["sortOrder"]))
            for state in sort_states
        ]

        with self._collection.batch():
            self.sorting_states.clear()

            for column, sort_order in parsed:
                physical_column = self._translator.to_physical(column)
                if physical_column is None or self.sorting_states.is_queued(
                    physical_column
                ):
                    continue
                self.sorting_states.enqueue(
                    physical_column, {"sortOrder": sort_order.value}
                )

    def destroy(self) -> None:
        """Unregister the sort states from the collection."""
        self._collection.unregister(SORTING_STATES_MAP_NAME)
        self.sorting_states = None

    def _state_at(self, column: int) -> Any:
        if self.sorting_states is None:
            return None

        physical_column = self._translator.to_physical(column)
        if physical_column is None:
            return None
        return self.sorting_states.get_at(physical_column)

    def _queue_order(self) -> List[int]:
        if self.sorting_states is None:
            return []
        return self.sorting_states.get_queue_order()
