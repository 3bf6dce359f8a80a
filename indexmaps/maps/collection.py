"""
Map Collection
==============

Named registry of maps sharing one physical-index space.

The owner of the index space (a grid, typically) reports every structural
change to the collection, which forwards it to all registered maps in
registration order. Each map emits its own "changed" signal while it is
being rebuilt; the collection swallows those during the fan-out and emits a
single collection-level "changed" once every map is done, so listeners never
observe a half-updated registry.

Example:
    collection = MapCollection()
    widths = collection.register("widths", IndexedMap(default=50))
    hidden = collection.register("hidden", IndexedMap(default=False))
    collection.reset_to_length(4)
    collection.apply_insertion(1, [1, 2])
    len(widths) == len(hidden) == 6
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import UnimplementedOperationError
from ..util.listeners import ListenerList
from .base import ValueMap, is_reorganizable


class MapCollection:
    """
    Registry of maps kept at one shared length.

    Any ValueMap may be registered and follows ``reset_to_length``. Insertions
    and removals are only broadcast when every registered map is
    Reorganizable; otherwise UnimplementedOperationError is raised before any
    map is touched, so the maps never end up at different lengths.
    """

    def __init__(self, entries: Iterable[Tuple[str, ValueMap]] = ()) -> None:
        self._mappings: Dict[str, ValueMap] = {}
        self._hooks: Dict[str, List[Tuple[ValueMap, Callable]]] = {}
        self._listeners = ListenerList()
        self._batch_depth = 0
        self._pending = False

        for name, index_map in entries:
            self.register(name, index_map)

    # Registry

    def register(self, name: str, index_map: ValueMap) -> ValueMap:
        """
        Store ``index_map`` under ``name`` unless the name is taken.

        The passed map is wired to the collection's "changed" signal in every
        case. Returns the map stored under ``name``, which is the pre-existing
        one when the name was already registered.
        """
        if name not in self._mappings:
            self._mappings[name] = index_map
            logging.debug(f"Registered map '{name}': {index_map!r}")
        else:
            logging.debug(f"Map name '{name}' already registered, keeping existing map")

        def hook(changed_map: ValueMap) -> None:
            self._on_map_changed(changed_map)

        index_map.subscribe(hook)
        self._hooks.setdefault(name, []).append((index_map, hook))

        return self._mappings[name]

    def unregister(self, name: str) -> Optional[ValueMap]:
        """Remove the map registered under ``name`` and detach its hooks."""
        for index_map, hook in self._hooks.pop(name, []):
            index_map.unsubscribe(hook)

        removed = self._mappings.pop(name, None)
        if removed is not None:
            logging.debug(f"Unregistered map '{name}'")
        return removed

    def get(self, name: Optional[str] = None) -> Any:
        """Map registered under ``name`` (None if unknown), or every map when no name is given."""
        if name is None:
            return list(self._mappings.values())
        return self._mappings.get(name)

    def names(self) -> List[str]:
        return list(self._mappings)

    # Structural broadcasts

    def apply_insertion(
        self, position: int, new_indexes: Iterable[int], silent: bool = False
    ) -> None:
        """Insert ``len(new_indexes)`` slots at ``position`` in every map."""
        new_indexes = list(new_indexes)
        self._require_reorganizable("insert_and_reorganize")
        logging.debug(
            f"Inserting {len(new_indexes)} slot(s) at {position} into {len(self)} map(s)"
        )

        with self._fan_out(silent):
            for index_map in self._unique_maps():
                index_map.insert_and_reorganize(position, new_indexes)

    def apply_removal(self, removed_indexes: Iterable[int], silent: bool = False) -> None:
        """Remove the slots at ``removed_indexes`` from every map."""
        removed_indexes = list(removed_indexes)
        self._require_reorganizable("remove_and_reorganize")
        logging.debug(f"Removing {len(removed_indexes)} slot(s) from {len(self)} map(s)")

        with self._fan_out(silent):
            for index_map in self._unique_maps():
                index_map.remove_and_reorganize(removed_indexes)

    def reset_to_length(self, length: int, silent: bool = False) -> None:
        """Re-initialize every map to ``length`` default values."""
        if length < 0:
            raise ValueError(f"Map length cannot be negative: {length}")
        logging.debug(f"Resetting {len(self)} map(s) to length {length}")

        with self._fan_out(silent):
            for index_map in self._unique_maps():
                index_map.initialize(length)

    @contextmanager
    def batch(self) -> Iterator["MapCollection"]:
        """
        Coalesce every change made inside the block into one notification.

        Nested batches notify once, when the outermost block exits.
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._pending:
                self._pending = False
                self._notify_changed()

    def _unique_maps(self) -> List[ValueMap]:
        # A map registered under two names must only be reorganized once.
        seen = set()
        unique = []
        for index_map in self._mappings.values():
            if id(index_map) not in seen:
                seen.add(id(index_map))
                unique.append(index_map)
        return unique

    def _require_reorganizable(self, operation: str) -> None:
        for name, index_map in self._mappings.items():
            if not is_reorganizable(index_map):
                raise UnimplementedOperationError(
                    f"Map '{name}' ({type(index_map).__name__}) does not implement "
                    f"{operation}()"
                )

    @contextmanager
    def _fan_out(self, silent: bool) -> Iterator[None]:
        outer_pending = self._pending
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            # Per-map signals raised during the fan-out are replaced by one
            # collection-level signal (or none, when silent).
            self._pending = outer_pending

        if silent:
            return
        if self._batch_depth:
            self._pending = True
        else:
            self._notify_changed()

    # Change notification

    def subscribe(self, listener: Callable[["MapCollection"], None]) -> "MapCollection":
        """Call ``listener(collection)`` whenever any registered map changes."""
        self._listeners.add(listener)
        return self

    def unsubscribe(self, listener: Callable[["MapCollection"], None]) -> None:
        self._listeners.remove(listener)

    def _on_map_changed(self, index_map: ValueMap) -> None:
        if self._batch_depth:
            self._pending = True
        else:
            self._notify_changed()

    def _notify_changed(self) -> None:
        self._listeners.notify_all(self)

    def __len__(self) -> int:
        return len(self._mappings)

    def __contains__(self, name: object) -> bool:
        return name in self._mappings

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._mappings))

    def __repr__(self) -> str:
        return f"MapCollection({self.names()!r})"
