"""
Sort data model.

A sort list is applied left-to-right: the first :class:`Sort` is the primary
key, later ones break ties in order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    """A field plus an ordering direction."""

    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def new(cls, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> Sort:
        return cls.model_validate({**(attrs or {}), **kwargs})

    @property
    def is_asc(self) -> bool:
        return self.direction is SortDirection.ASC

    def toggle(self) -> Sort:
        """Return the same field sorted the other way."""
        direction = SortDirection.DESC if self.is_asc else SortDirection.ASC
        return self.model_copy(update={"direction": direction})


SortSpec = Sort | Iterable[Sort] | None


def normalize_sorts(sorts: SortSpec) -> list[Sort]:
    """Turn ``None`` / a single ``Sort`` / a sequence into a list of sorts."""
    if sorts is None:
        return []
    if isinstance(sorts, Sort):
        return [sorts]
    return list(sorts)


@dataclass(frozen=True)
class SortInfo:
    """
    Sort indicator state for one column.

    Attributes:
        is_active: The column takes part in the current sort.
        is_asc: Direction of the column's sort (``True`` when inactive).
        sort_index: 1-based position among several active sorts; ``None``
            when the column is inactive or is the only sort.
    """

    is_active: bool = False
    is_asc: bool = True
    sort_index: int | None = None


def sort_info(sorts: SortSpec, field: str) -> SortInfo:
    """Describe how ``field`` participates in ``sorts``."""
    current = normalize_sorts(sorts)
    for position, sort in enumerate(current):
        if sort.field == field:
            return SortInfo(
                is_active=True,
                is_asc=sort.is_asc,
                sort_index=position + 1 if len(current) > 1 else None,
            )
    return SortInfo()
