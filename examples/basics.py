from indexmaps import ColumnStatesManager, IndexedMap, MapCollection, QueuedIndexedMap

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Registering maps in a collection")
print("-" * 100)
print()

# Every map in one collection shares the same physical column space.
columns = MapCollection()
widths = columns.register("widths", IndexedMap(default=80))
labels = columns.register("labels", IndexedMap(default=lambda index: f"Column {index}"))

log_on_change = lambda collection: print(f"Columns changed: {collection.names()}")

# The collection notifies once per structural change, after every map is updated.
columns.subscribe(log_on_change)
columns.reset_to_length(4)

print(f"Widths: {widths.get_all()}")
print(f"Labels: {labels.get_all()}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Inserting and removing columns")
print("-" * 100)
print()

widths.set_at(3, 200)

# Two new columns in front of the third one.
columns.apply_insertion(2, [2, 3])
print(f"Widths after insert: {widths.get_all()}")

# Silent broadcasts skip the notification.
columns.apply_removal([0, 1], silent=True)
print(f"Widths after remove: {widths.get_all()}")
print(f"Labels after remove: {labels.get_all()}")

columns.unsubscribe(log_on_change)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Queued values")
print("-" * 100)
print()

priorities = columns.register("priorities", QueuedIndexedMap())
priorities.initialize(widths.length())

# The queue remembers the order the values were added in.
priorities.enqueue(3, {"sortOrder": "asc"})
priorities.enqueue(0, {"sortOrder": "desc"})
print(f"Queue: {priorities.get_queue_order()}")
print(f"Queued: {priorities.get_queued('column')}")

# The queue follows its columns through structural changes.
columns.apply_insertion(0, [0])
print(f"Queue after insert: {priorities.get_queue_order()}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Column sort states")
print("-" * 100)
print()

sorting = ColumnStatesManager(columns)
sorting.sorting_states.initialize(widths.length())
sorting.set_sort_states(
    [
        {"column": 1, "sortOrder": "desc"},
        {"column": 4, "sortOrder": "asc"},
    ]
)
print(f"Sort states: {sorting.get_sort_states()}")

columns.apply_removal([0])
print(f"Sort states after removing column 0: {sorting.get_sort_states()}")
print(f"Priority of column 3: {sorting.get_index_of_column_in_sort_queue(3)}")
