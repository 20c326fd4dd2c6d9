"""Case-insensitive string matching operators for SQLAlchemy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from ...operators import FilterOperator
from ...utils import is_scalar, like_pattern
from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

    from ...operators import FieldType


class _ILikeOperator(SQLAlchemyOperator):
    prefix = True
    suffix = True
    negate = False

    def apply(
        self, column: Any, value: Any, field_type: FieldType | str | None = None
    ) -> ColumnElement[bool] | None:
        if not is_scalar(value):
            return None
        pattern = like_pattern(value, prefix=self.prefix, suffix=self.suffix)
        expr = column.ilike(pattern)
        return cast("ColumnElement[bool]", ~expr if self.negate else expr)


class ContainsOperator(_ILikeOperator):
    """``column ILIKE '%value%'``"""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.CONTAINS


class NotContainsOperator(_ILikeOperator):
    """``column NOT ILIKE '%value%'``"""

    negate = True

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT_CONTAINS


class StartsWithOperator(_ILikeOperator):
    """``column ILIKE 'value%'``"""

    prefix = False

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.STARTS_WITH


class EndsWithOperator(_ILikeOperator):
    """``column ILIKE '%value'``"""

    suffix = False

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ENDS_WITH


class MatchesOperator(_ILikeOperator):
    """Substring match, same as ``contains``."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.MATCHES
