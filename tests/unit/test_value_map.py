"""Unit tests for ValueMap and IndexedMap."""

import pytest

from indexmaps import (
    Generator,
    IndexedMap,
    Reorganizable,
    UnimplementedOperationError,
    ValueMap,
    is_reorganizable,
)


@pytest.mark.unit
@pytest.mark.maps
class TestValueMap:
    """ValueMap storage, defaults and change notification."""

    def test_new_map_is_empty(self):
        assert ValueMap().length() == 0
        assert ValueMap().get_all() == []

    def test_initialize_fills_constant_default(self):
        index_map = ValueMap(default=False)

        assert index_map.initialize(3) is index_map
        assert index_map.get_all() == [False, False, False]

    def test_initialize_calls_generator_per_index(self):
        index_map = ValueMap(default=lambda index: f"row{index}").initialize(3)

        assert index_map.get_all() == ["row0", "row1", "row2"]

    def test_initialize_accepts_policy_instance(self):
        index_map = ValueMap(default=Generator(lambda index: -index)).initialize(2)

        assert index_map.get_all() == [0, -1]

    def test_initialize_rejects_negative_length(self):
        with pytest.raises(ValueError):
            ValueMap().initialize(-1)

    def test_get_at_out_of_range_returns_none(self):
        index_map = ValueMap(default=1).initialize(2)

        assert index_map.get_at(1) == 1
        assert index_map.get_at(2) is None
        assert index_map.get_at(-1) is None

    def test_set_at_writes_only_inside_the_map(self):
        index_map = ValueMap().initialize(2)

        assert index_map.set_at(1, "x") is True
        assert index_map.set_at(5, "y") is False
        assert index_map.get_all() == [None, "x"]
        assert len(index_map) == 2

    def test_set_all_replaces_values_and_notifies(self, listener):
        index_map = ValueMap().initialize(2)
        index_map.subscribe(listener)

        index_map.set_all(("a", "b", "c"))

        assert index_map.get_all() == ["a", "b", "c"]
        assert index_map.length() == 3
        listener.assert_called_once_with(index_map)

    def test_get_all_returns_a_copy(self):
        index_map = ValueMap(default=0).initialize(2)
        index_map.get_all().append(99)

        assert index_map.length() == 2

    def test_clear_restores_defaults_and_keeps_length(self):
        index_map = ValueMap(default=0).initialize(3)
        index_map.set_at(0, 5)

        index_map.clear()

        assert index_map.get_all() == [0, 0, 0]

    def test_clear_is_idempotent(self):
        index_map = ValueMap(default=lambda index: index).initialize(3)
        index_map.set_at(2, "x")

        index_map.clear()
        once = index_map.get_all()
        index_map.clear()

        assert index_map.get_all() == once == [0, 1, 2]

    def test_single_slot_write_does_not_notify(self, listener):
        index_map = ValueMap().initialize(2).subscribe(listener)

        index_map.set_at(0, "x")

        listener.assert_not_called()

    def test_unsubscribe_stops_notifications(self, listener):
        index_map = ValueMap().subscribe(listener)
        assert index_map.has_listener(listener)

        index_map.unsubscribe(listener)
        index_map.initialize(1)

        assert not index_map.has_listener(listener)
        listener.assert_not_called()

    def test_unsubscribe_unknown_listener_is_noop(self, listener):
        ValueMap().unsubscribe(listener)

    def test_reorganization_is_unimplemented(self):
        index_map = ValueMap().initialize(3)

        with pytest.raises(UnimplementedOperationError):
            index_map.insert_and_reorganize(0, [0])
        with pytest.raises(NotImplementedError):
            index_map.remove_and_reorganize([0])

        assert index_map.length() == 3
        assert not is_reorganizable(index_map)


@pytest.mark.unit
@pytest.mark.maps
class TestIndexedMap:
    """IndexedMap follows insertions and removals."""

    def test_is_reorganizable(self):
        assert isinstance(IndexedMap(), Reorganizable)
        assert is_reorganizable(IndexedMap())

    def test_insert_shifts_following_values(self, letters_map):
        letters_map.insert_and_reorganize(2, [2, 3])

        assert letters_map.get_all() == ["a", "b", "?", "?", "c", "d", "e"]

    def test_insert_generator_sees_new_indexes(self):
        index_map = IndexedMap(default=lambda index: index * 100).initialize(2)
        index_map.set_all(["a", "b"])

        index_map.insert_and_reorganize(1, [7, 8])

        assert index_map.get_all() == ["a", 100, 200, "b"]

    def test_insert_past_end_appends(self, letters_map):
        letters_map.insert_and_reorganize(50, [5])

        assert letters_map.get_all() == ["a", "b", "c", "d", "e", "?"]

    def test_remove_keeps_survivor_order(self):
        index_map = IndexedMap().initialize(5)
        index_map.set_all([0, 1, 2, 3, 4])

        index_map.remove_and_reorganize([1, 3])

        assert index_map.length() == 3
        assert index_map.get_all() == [0, 2, 4]

    def test_remove_out_of_range_is_ignored(self, letters_map):
        letters_map.remove_and_reorganize([9, 10])

        assert letters_map.get_all() == ["a", "b", "c", "d", "e"]

    def test_empty_operations_still_notify(self, letters_map, listener):
        letters_map.subscribe(listener)

        letters_map.insert_and_reorganize(0, [])
        letters_map.remove_and_reorganize([])

        assert letters_map.get_all() == ["a", "b", "c", "d", "e"]
        assert listener.call_count == 2

    def test_listener_sees_updated_values(self, letters_map):
        seen = []
        letters_map.subscribe(lambda changed: seen.append(changed.get_all()))

        letters_map.remove_and_reorganize([0])

        assert seen == [["b", "c", "d", "e"]]
