"""Internal helpers: listener storage and the reindexing algorithms."""

from .listeners import ListenerList
from .reindex import clamp_position, insert_defaulted, remove_at, shift_down, shift_up

__all__ = [
    "ListenerList",
    "clamp_position",
    "insert_defaulted",
    "remove_at",
    "shift_down",
    "shift_up",
]
