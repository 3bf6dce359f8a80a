"""
Value Map
=========

Array-backed mapping from physical index to an arbitrary value.

ValueMap is the readable/writable tier every map shares: bulk and per-index
access, default-value initialization and a synchronous "changed" signal.
It does not know how to follow structural changes; that capability is the
``Reorganizable`` tier, implemented by IndexedMap and QueuedIndexedMap.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional

from ..defaults import DefaultPolicy, as_default_policy
from ..exceptions import UnimplementedOperationError
from ..util.listeners import ListenerList


class Reorganizable(ABC):
    """Maps that can rebuild themselves after rows/columns are inserted or removed."""

    @abstractmethod
    def insert_and_reorganize(self, position: int, new_indexes: Iterable[int]) -> None:
        """Splice ``len(new_indexes)`` defaulted slots in at ``position``."""
        pass

    @abstractmethod
    def remove_and_reorganize(self, removed_indexes: Iterable[int]) -> None:
        """Drop the slots at ``removed_indexes``, keeping survivors in order."""
        pass


def is_reorganizable(index_map: Any) -> bool:
    return isinstance(index_map, Reorganizable)


class ValueMap:
    """
    Physical index -> value storage with a default-value policy.

    ``default`` is either a constant (shared by every new slot) or a function
    called with the physical index of each new slot. A DefaultPolicy instance
    is also accepted.

    Usage:
        states = ValueMap(default=None).initialize(3)
        states.set_at(1, {"sortOrder": "asc"})
        states.get_at(1)   # {"sortOrder": "asc"}
        states.get_at(10)  # None, out of range
    """

    def __init__(self, default: Any = None) -> None:
        self._values: List[Any] = []
        self._default_policy: DefaultPolicy = as_default_policy(default)
        self._listeners = ListenerList()

    @property
    def default_policy(self) -> DefaultPolicy:
        return self._default_policy

    def initialize(self, length: int) -> "ValueMap":
        """Replace every value with ``length`` fresh defaults and notify listeners."""
        if length < 0:
            raise ValueError(f"Map length cannot be negative: {length}")

        self._values = self._default_policy.materialize(range(length))
        self._notify_changed()
        return self

    def get_all(self) -> List[Any]:
        return list(self._values)

    def set_all(self, values: Iterable[Any]) -> None:
        self._values = list(values)
        self._notify_changed()

    def get_at(self, index: int) -> Optional[Any]:
        """Value at ``index``, or None when the index is outside the map."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def set_at(self, index: int, value: Any) -> bool:
        """
        Write a single slot.

        Returns False (and stores nothing) when ``index`` is outside the map.
        Single-slot writes do not emit the "changed" signal.
        """
        if 0 <= index < len(self._values):
            self._values[index] = value
            return True
        return False

    def length(self) -> int:
        return len(self._values)

    def clear(self) -> None:
        self.initialize(self.length())

    def insert_and_reorganize(self, position: int, new_indexes: Iterable[int]) -> None:
        raise UnimplementedOperationError(
            f"{type(self).__name__}.insert_and_reorganize() is unimplemented"
        )

    def remove_and_reorganize(self, removed_indexes: Iterable[int]) -> None:
        raise UnimplementedOperationError(
            f"{type(self).__name__}.remove_and_reorganize() is unimplemented"
        )

    # Change notification

    def subscribe(self, listener: Callable[["ValueMap"], None]) -> "ValueMap":
        """Call ``listener(map)`` after every bulk change; returns self for chaining."""
        self._listeners.add(listener)
        return self

    def unsubscribe(self, listener: Callable[["ValueMap"], None]) -> None:
        self._listeners.remove(listener)

    def has_listener(self, listener: Callable[["ValueMap"], None]) -> bool:
        return listener in self._listeners

    def _notify_changed(self) -> None:
        self._listeners.notify_all(self)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={len(self._values)}, "
            f"default={self._default_policy!r})"
        )
