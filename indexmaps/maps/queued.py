"""
Queued Indexed Map
==================

IndexedMap plus an ordered queue of physical indexes. The queue records the
order in which slots were filled (e.g. the order columns were sorted in) and
is shifted together with the values on every structural change, so each
queued index keeps pointing at the same logical entry.

Example:
    states = QueuedIndexedMap().initialize(3)
    states.enqueue(1, {"sortOrder": "asc"})
    states.enqueue(0, {"sortOrder": "desc"})
    states.get_queue_order()       # [1, 0]
    states.insert_and_reorganize(0, [3])
    states.get_queue_order()       # [2, 1]
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from ..util.reindex import clamp_position, shift_down, shift_up
from .indexed import IndexedMap


class QueuedIndexedMap(IndexedMap):
    """
    Indexed map with a priority queue of physical indexes.

    ``enqueue`` does not deduplicate: enqueuing an index that is already
    queued adds a second queue entry. Callers that need uniqueness check
    ``is_queued`` first.
    """

    def __init__(self, default: Any = None) -> None:
        super().__init__(default)
        self._queue: List[int] = []

    def initialize(self, length: int) -> "QueuedIndexedMap":
        self._queue = []
        return super().initialize(length)

    def set_all(self, values: Iterable[Any]) -> None:
        values = list(values)
        self._queue = [index for index in self._queue if index < len(values)]
        super().set_all(values)

    def insert_and_reorganize(self, position: int, new_indexes: Iterable[int]) -> None:
        new_indexes = list(new_indexes)
        start = clamp_position(position, self.length())
        self._queue = shift_up(self._queue, [start] * len(new_indexes))

        super().insert_and_reorganize(position, new_indexes)

    def remove_and_reorganize(self, removed_indexes: Iterable[int]) -> None:
        length = self.length()
        removed = [index for index in set(removed_indexes) if 0 <= index < length]
        self._queue = shift_down(self._queue, removed)

        super().remove_and_reorganize(removed)

    # Queue operations

    def enqueue(self, index: int, value: Any) -> bool:
        """Store ``value`` at ``index`` and append ``index`` to the queue tail."""
        if not self.set_at(index, value):
            return False

        self._queue.append(index)
        return True

    def dequeue_all(self) -> None:
        """Reset every queued slot to its default value and empty the queue."""
        for index in self._queue:
            self.set_at(index, self._default_policy.value_for(index))

        self._queue = []
        self._notify_changed()

    def is_queued(self, index: int) -> bool:
        return index in self._queue

    def get_queued(self, with_index_key: Optional[str] = None) -> List[Any]:
        """
        Values of the queued slots, in queue order.

        With ``with_index_key``, mapping values come back as new dicts that
        also carry their physical index under that key. Other values cannot
        hold a key and are returned as they are.
        """
        if with_index_key is None:
            return [self.get_at(index) for index in self._queue]

        queued = []
        for index in self._queue:
            value = self.get_at(index)
            if isinstance(value, Mapping):
                value = {**value, with_index_key: index}
            queued.append(value)
        return queued

    def get_queue_order(self) -> List[int]:
        return list(self._queue)

    def get_entries(self) -> List[Tuple[int, Any]]:
        """``(physical_index, value)`` pairs in queue order."""
        return [(index, self.get_at(index)) for index in self._queue]
