"""
Reindexing Algorithms
=====================

Pure functions that recompute per-index arrays and index sets after a
structural change. Nothing here mutates its arguments.

Two of them rebuild value lists:

- ``insert_defaulted``: splice ``count`` defaulted slots in at ``position``
- ``remove_at``: drop the slots at a set of positions

Two of them move sets of indexes that point *into* such a list, so that the
indexes keep pointing at the same entries:

- ``shift_up``: after an insertion
- ``shift_down``: after a removal

Malformed structural arguments are normalized rather than rejected: positions
are clamped, duplicate removal positions collapse, out-of-range removals are
ignored.

Example:
    >>> insert_defaulted(["a", "b", "c"], 1, 2)
    ['a', None, None, 'b', 'c']
    >>> remove_at(["a", "b", "c", "d", "e"], [3, 1])
    ['a', 'c', 'e']
    >>> shift_up([1, 0], [0])
    [2, 1]
    >>> shift_down([4, 1, 2], [1, 3])
    [2, 1]
"""

from typing import Any, Iterable, List, Sequence

import numpy as np

from ..defaults import DefaultPolicy, as_default_policy


def _as_index_array(indexes: Iterable[int]) -> np.ndarray:
    return np.asarray(list(indexes), dtype=np.int64)


def clamp_position(position: int, length: int) -> int:
    """Clamp an insertion point into ``[0, length]``."""
    return min(max(int(position), 0), length)


def insert_defaulted(
    values: Sequence[Any], position: int, count: int, policy: Any = None
) -> List[Any]:
    """
    Return a copy of ``values`` with ``count`` new slots starting at ``position``.

    New slots are filled from ``policy`` (a DefaultPolicy, or anything
    ``as_default_policy`` accepts) evaluated at their own physical indexes
    ``position, position + 1, ...``. A position past the end appends.
    """
    if count < 0:
        raise ValueError(f"Cannot insert a negative number of slots: {count}")

    values = list(values)
    position = clamp_position(position, len(values))
    default_policy: DefaultPolicy = as_default_policy(policy)
    inserted = default_policy.materialize(range(position, position + count))

    return values[:position] + inserted + values[position:]


def remove_at(values: Sequence[Any], removed_positions: Iterable[int]) -> List[Any]:
    """Return a copy of ``values`` without the entries at ``removed_positions``."""
    removed = set(removed_positions)
    if not removed:
        return list(values)

    return [value for position, value in enumerate(values) if position not in removed]


def shift_up(indexes: Iterable[int], inserted_positions: Iterable[int]) -> List[int]:
    """
    Move indexes so they keep addressing the same entries after an insertion.

    ``inserted_positions`` are insertion points in the list *before* the
    insertion, one per new slot: each index ``i`` becomes
    ``i + count(p in inserted_positions if p <= i)``. Repeated points count
    once per occurrence, so a block of ``k`` slots at ``p`` is ``[p] * k``.
    Negative indexes are left alone. Order of ``indexes`` is preserved.
    """
    index_array = _as_index_array(indexes)
    inserted = np.sort(_as_index_array(inserted_positions))

    if index_array.size == 0 or inserted.size == 0:
        return index_array.tolist()

    shifted = np.where(
        index_array >= 0,
        index_array + np.searchsorted(inserted, index_array, side="right"),
        index_array,
    )
    return shifted.tolist()


def shift_down(indexes: Iterable[int], removed_positions: Iterable[int]) -> List[int]:
    """
    Move indexes so they keep addressing the same entries after a removal.

    Indexes that were themselves removed are dropped; the rest decrease by the
    number of removed positions strictly below them. Order is preserved.
    """
    index_array = _as_index_array(indexes)
    removed = np.unique(_as_index_array(removed_positions))

    if index_array.size == 0 or removed.size == 0:
        return index_array.tolist()

    survivors = index_array[~np.isin(index_array, removed)]
    return (survivors - np.searchsorted(removed, survivors, side="left")).tolist()
