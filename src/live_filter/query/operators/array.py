"""Array overlap / containment operators for SQLAlchemy.

The underlying implementation uses the PostgreSQL array operators
(``&&`` for overlap, ``@>`` for containment). Columns typed as
:class:`sqlalchemy.dialects.postgresql.ARRAY` go through SQLAlchemy's typed
comparators; any other column gets the raw operator with the candidates
bound against the column's type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy.dialects.postgresql import ARRAY

from ...operators import FilterOperator
from ...utils import as_sequence
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...operators import FieldType


def _expression(column: Any) -> Any:
    if hasattr(column, "__clause_element__"):
        return column.__clause_element__()
    return column


def _overlap(column: Any, values: list[Any]) -> ColumnElement[bool]:
    expr = _expression(column)
    if isinstance(getattr(expr, "type", None), ARRAY):
        return cast("ColumnElement[bool]", expr.overlap(values))
    return cast("ColumnElement[bool]", expr.op("&&", is_comparison=True)(values))


def _contains(column: Any, values: list[Any]) -> ColumnElement[bool]:
    expr = _expression(column)
    if isinstance(getattr(expr, "type", None), ARRAY):
        return cast("ColumnElement[bool]", expr.contains(values))
    return cast("ColumnElement[bool]", expr.op("@>", is_comparison=True)(values))


class ContainsAnyOperator(SQLAlchemyOperator):
    """``column && candidates``"""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.CONTAINS_ANY

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        candidates = as_sequence(value)
        if candidates is None:
            return None
        return _overlap(column, candidates)


class ContainsAllOperator(SQLAlchemyOperator):
    """``column @> candidates``"""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.CONTAINS_ALL

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        candidates = as_sequence(value)
        if candidates is None:
            return None
        return _contains(column, candidates)


class NotContainsAnyOperator(SQLAlchemyOperator):
    """``NOT (column && candidates)``"""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT_CONTAINS_ANY

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        candidates = as_sequence(value)
        if candidates is None:
            return None
        return cast("ColumnElement[bool]", ~_overlap(column, candidates))
