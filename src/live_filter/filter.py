"""
Filter data model.

A :class:`Filter` is one atomic ``field`` / ``operator`` / ``value`` /
``type`` condition. A :class:`FilterGroup` joins its direct filters and
nested groups with a single conjunction; nested groups keep their own logic,
which is what preserves precedence when the tree is compiled.

Both are immutable values. Every structural edit returns a new group, so
holders of the same group never observe each other's changes.

Example::

    group = (
        FilterGroup()
        .add_filter(Filter(field="status", operator="equals", value="active"))
        .add_group(
            FilterGroup(conjunction="or")
            .add_filter(Filter(field="priority", operator="greater_than", value=3))
            .add_filter(Filter(field="tags", operator="contains_any",
                               value=["urgent"], type="array"))
        )
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import FilterIndexError
from .operators import Conjunction, FieldType, FilterOperator


def _check_index(index: int, size: int, collection: str) -> None:
    if not 0 <= index < size:
        raise FilterIndexError(index, size, collection)


class Filter(BaseModel):
    """
    A single filtering condition.

    Attributes:
        field: Name of the record attribute to filter on.
        operator: A :class:`FilterOperator`. Unrecognised operator strings
            are kept as-is and compile to no condition.
        value: Scalar, ``(min, max)`` pair, sequence of candidates, or
            ``None`` when absent.
        type: Declared field type; selects the null/empty semantics of
            ``is_empty`` / ``is_not_empty``.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    operator: FilterOperator | str = Field(union_mode="left_to_right")
    value: Any = None
    type: FieldType | str | None = Field(default=None, union_mode="left_to_right")

    @classmethod
    def new(cls, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> Filter:
        """Build a filter from a mapping and/or keyword attributes."""
        return cls.model_validate({**(attrs or {}), **kwargs})


class FilterGroup(BaseModel):
    """
    Filters and nested groups joined by one conjunction.

    Attributes:
        filters: Direct filter leaves, in insertion order.
        groups: Nested groups, in insertion order, any depth.
        conjunction: ``and`` / ``or``, applied uniformly to all direct
            children (leaves and nested groups alike).
    """

    model_config = ConfigDict(frozen=True)

    filters: tuple[Filter, ...] = ()
    groups: tuple[FilterGroup, ...] = ()
    conjunction: Conjunction = Conjunction.AND

    @classmethod
    def new(
        cls, attrs: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> FilterGroup:
        """Build a group from a mapping and/or keyword attributes."""
        return cls.model_validate({**(attrs or {}), **kwargs})

    # -- Structural edits ---------------------------------------------------

    def add_filter(self, filter_: Filter | Mapping[str, Any]) -> FilterGroup:
        """
        Return a copy with ``filter_`` appended to ``filters``.

        A mapping is validated into a :class:`Filter`; anything else that is
        not a ``Filter`` raises ``pydantic.ValidationError``.
        """
        filter_ = Filter.model_validate(filter_)
        return self.model_copy(update={"filters": (*self.filters, filter_)})

    def remove_filter(self, index: int) -> FilterGroup:
        """
        Return a copy without the filter at ``index``.

        Raises:
            FilterIndexError: If ``index`` is outside ``filters``.
        """
        _check_index(index, len(self.filters), "filters")
        filters = self.filters[:index] + self.filters[index + 1 :]
        return self.model_copy(update={"filters": filters})

    def update_filter(
        self, index: int, filter_: Filter | Mapping[str, Any]
    ) -> FilterGroup:
        """
        Return a copy with the filter at ``index`` replaced by ``filter_``.

        Raises:
            FilterIndexError: If ``index`` is outside ``filters``.
            ValidationError: If ``filter_`` is not a valid filter.
        """
        _check_index(index, len(self.filters), "filters")
        filter_ = Filter.model_validate(filter_)
        filters = (*self.filters[:index], filter_, *self.filters[index + 1 :])
        return self.model_copy(update={"filters": filters})

    def add_group(self, group: FilterGroup | Mapping[str, Any]) -> FilterGroup:
        """Return a copy with ``group`` appended to ``groups``."""
        group = FilterGroup.model_validate(group)
        return self.model_copy(update={"groups": (*self.groups, group)})

    def remove_group(self, index: int) -> FilterGroup:
        """
        Return a copy without the nested group at ``index``.

        Raises:
            FilterIndexError: If ``index`` is outside ``groups``.
        """
        _check_index(index, len(self.groups), "groups")
        groups = self.groups[:index] + self.groups[index + 1 :]
        return self.model_copy(update={"groups": groups})

    def with_conjunction(self, conjunction: Conjunction | str) -> FilterGroup:
        """Return a copy joined by ``conjunction``."""
        return self.model_copy(update={"conjunction": Conjunction(conjunction)})

    def clear(self) -> FilterGroup:
        """Return an empty group keeping this group's conjunction."""
        return FilterGroup(conjunction=self.conjunction)

    # -- Queries ------------------------------------------------------------

    def has_filters(self) -> bool:
        """``True`` if this group or any nested group holds a filter."""
        return bool(self.filters) or any(g.has_filters() for g in self.groups)

    def count_filters(self) -> int:
        """Total number of filters, nested groups included."""
        return len(self.filters) + sum(g.count_filters() for g in self.groups)
