"""Boolean truth operators for SQLAlchemy. The filter value is ignored."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from ...operators import FilterOperator
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...operators import FieldType


class IsTrueOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IS_TRUE

    def apply(
        self, column: Any, _value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column == True)  # noqa: E712


class IsFalseOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IS_FALSE

    def apply(
        self, column: Any, _value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column == False)  # noqa: E712
