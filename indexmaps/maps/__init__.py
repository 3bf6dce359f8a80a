"""Value maps, their reorganizing variants and the collection that keeps them in step."""

from .base import Reorganizable, ValueMap, is_reorganizable
from .collection import MapCollection
from .indexed import IndexedMap
from .queued import QueuedIndexedMap

__all__ = [
    "IndexedMap",
    "MapCollection",
    "QueuedIndexedMap",
    "Reorganizable",
    "ValueMap",
    "is_reorganizable",
]
