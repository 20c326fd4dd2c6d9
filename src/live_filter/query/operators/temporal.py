"""Date / time comparison operators for SQLAlchemy.

Same comparison semantics as the numeric family, under the names used for
``date`` / ``datetime`` fields.
"""

from __future__ import annotations

import operator as op_module

from ...operators import FilterOperator
from .standard import _ComparisonOperator


class BeforeOperator(_ComparisonOperator):
    compare = op_module.lt

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.BEFORE


class AfterOperator(_ComparisonOperator):
    compare = op_module.gt

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.AFTER


class OnOrBeforeOperator(_ComparisonOperator):
    compare = op_module.le

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ON_OR_BEFORE


class OnOrAfterOperator(_ComparisonOperator):
    compare = op_module.ge

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ON_OR_AFTER
