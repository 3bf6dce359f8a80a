"""
Exceptions raised by indexmaps.
"""


class IndexMapError(Exception):
    """Base class for every error raised by indexmaps."""

    pass


class UnimplementedOperationError(IndexMapError, NotImplementedError):
    """Raised when a map is asked to reorganize but has no reindexing logic."""

    pass


class InvalidSortOrderError(IndexMapError, ValueError):
    """Raised when a sort state carries an order other than asc/desc."""

    pass
