"""
Indexed Map
===========

ValueMap that follows structural changes of the physical index space.
"""

from typing import Iterable

from ..util.reindex import insert_defaulted, remove_at
from .base import Reorganizable, ValueMap


class IndexedMap(ValueMap, Reorganizable):
    """
    Value map whose entries move with their rows/columns.

    Inserting shifts everything at or after the insertion point to the right
    and fills the gap with defaults; removing drops entries and closes the
    gap. Both always emit "changed", also when nothing was inserted or
    removed.
    """

    def insert_and_reorganize(self, position: int, new_indexes: Iterable[int]) -> None:
        new_indexes = list(new_indexes)
        self._values = insert_defaulted(
            self._values, position, len(new_indexes), self._default_policy
        )
        self._notify_changed()

    def remove_and_reorganize(self, removed_indexes: Iterable[int]) -> None:
        self._values = remove_at(self._values, removed_indexes)
        self._notify_changed()
