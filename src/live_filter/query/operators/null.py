"""Null / empty check operators for SQLAlchemy.

What counts as empty depends on the declared field type: strings are empty
when null or ``""``, arrays when null or ``[]``, everything else only when
null.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import and_, or_

from ...operators import ARRAY_TYPES, STRING_TYPES, FilterOperator
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...operators import FieldType


def _empty_value(field_type: FieldType | str | None) -> Any:
    if field_type in STRING_TYPES:
        return ""
    if field_type in ARRAY_TYPES:
        return []
    return None


class IsEmptyOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IS_EMPTY

    def apply(
        self, column: Any, _value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool]:
        empty = _empty_value(field_type)
        if empty is None:
            return cast("ColumnElement[bool]", column.is_(None))
        return or_(column.is_(None), column == empty)


class IsNotEmptyOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IS_NOT_EMPTY

    def apply(
        self, column: Any, _value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool]:
        empty = _empty_value(field_type)
        if empty is None:
            return cast("ColumnElement[bool]", column.is_not(None))
        return and_(column.is_not(None), column != empty)
