"""Equality and numeric comparison operators for SQLAlchemy."""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, cast

from ...operators import FilterOperator
from ...utils import is_absent, is_scalar
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...operators import FieldType


class EqualsOperator(SQLAlchemyOperator):
    """``column = value``; ``IS NULL`` when the value is absent."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.EQUALS

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool]:
        if is_absent(value):
            return cast("ColumnElement[bool]", column.is_(None))
        return cast("ColumnElement[bool]", op_module.eq(column, value))


class NotEqualsOperator(SQLAlchemyOperator):
    """``column != value``; ``IS NOT NULL`` when the value is absent."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT_EQUALS

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool]:
        if is_absent(value):
            return cast("ColumnElement[bool]", column.is_not(None))
        return cast("ColumnElement[bool]", op_module.ne(column, value))


class _ComparisonOperator(SQLAlchemyOperator):
    """Ordering comparison against a single scalar value."""

    compare: Any = None

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        if not is_scalar(value):
            return None
        return cast("ColumnElement[bool]", type(self).compare(column, value))


class GreaterThanOperator(_ComparisonOperator):
    compare = op_module.gt

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GREATER_THAN


class LessThanOperator(_ComparisonOperator):
    compare = op_module.lt

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LESS_THAN


class GreaterThanOrEqualOperator(_ComparisonOperator):
    compare = op_module.ge

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GREATER_THAN_OR_EQUAL


class LessThanOrEqualOperator(_ComparisonOperator):
    compare = op_module.le

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LESS_THAN_OR_EQUAL
