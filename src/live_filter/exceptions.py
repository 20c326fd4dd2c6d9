"""
Exception hierarchy for live-filter.

All exceptions inherit from ``LiveFilterError`` and provide
``to_dict()`` for API-friendly error responses.

Malformed filters and unknown operators are not errors: the compiler drops
them. Only structural edits addressing a position that does not exist fail.
"""

from __future__ import annotations

from typing import Any


class LiveFilterError(Exception):
    """Base exception for all live-filter errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class FilterIndexError(LiveFilterError, IndexError):
    """
    Positional edit of a filter group with an out-of-range index.

    Raised by ``remove_filter``, ``update_filter`` and ``remove_group``
    instead of silently leaving the group untouched.
    """

    def __init__(self, index: int, size: int, collection: str = "filters") -> None:
        self.index = index
        self.size = size
        self.collection = collection
        if size:
            bounds = f"valid indexes are 0..{size - 1}"
        else:
            bounds = f"the group has no {collection}"
        super().__init__(f"Index {index} out of range for {collection}: {bounds}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FILTER_INDEX_ERROR",
            "message": str(self),
            "index": self.index,
            "size": self.size,
            "collection": self.collection,
        }
