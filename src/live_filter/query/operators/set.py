"""Range and membership operators for SQLAlchemy: between, in, not_in."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import and_

from ...operators import FilterOperator
from ...utils import as_range, as_sequence
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...operators import FieldType


class BetweenOperator(SQLAlchemyOperator):
    """``column >= min AND column <= max``; anything but a pair is dropped."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.BETWEEN

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        bounds = as_range(value)
        if bounds is None:
            return None
        low, high = bounds
        return and_(column >= low, column <= high)


class InOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IN

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        candidates = as_sequence(value)
        if candidates is None:
            return None
        return cast("ColumnElement[bool]", column.in_(candidates))


class NotInOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT_IN

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        candidates = as_sequence(value)
        if candidates is None:
            return None
        return cast("ColumnElement[bool]", column.not_in(candidates))
