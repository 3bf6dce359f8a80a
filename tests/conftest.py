"""
Shared pytest fixtures for indexmaps tests.
"""

from unittest.mock import Mock

import pytest

from indexmaps import IndexedMap, MapCollection, QueuedIndexedMap


@pytest.fixture
def collection():
    """Provide an empty MapCollection."""
    return MapCollection()


@pytest.fixture
def letters_map():
    """IndexedMap holding 'a'..'e' at physical indexes 0..4."""
    index_map = IndexedMap(default="?")
    index_map.set_all(["a", "b", "c", "d", "e"])
    return index_map


@pytest.fixture
def sort_states():
    """QueuedIndexedMap of length 3 with the default None."""
    return QueuedIndexedMap().initialize(3)


@pytest.fixture
def listener():
    """A Mock usable as a change listener."""
    return Mock()


class ReversedTranslator:
    """Visual order is the physical order reversed, for a fixed column count."""

    def __init__(self, count):
        self.count = count

    def to_physical(self, visual_index):
        if 0 <= visual_index < self.count:
            return self.count - 1 - visual_index
        return None

    def to_visual(self, physical_index):
        if 0 <= physical_index < self.count:
            return self.count - 1 - physical_index
        return None


@pytest.fixture
def reversed_translator():
    return ReversedTranslator(4)
