"""
SQLAlchemy operator implementations and default registry.

Usage::

    from live_filter.query.operators import DEFAULT_SQLA_REGISTRY

    expr = DEFAULT_SQLA_REGISTRY.apply(FilterOperator.EQUALS, column, value)
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .array import (
    ContainsAllOperator,
    ContainsAnyOperator,
    NotContainsAnyOperator,
)
from .boolean import (
    IsFalseOperator,
    IsTrueOperator,
)
from .null import (
    IsEmptyOperator,
    IsNotEmptyOperator,
)
from .set import (
    BetweenOperator,
    InOperator,
    NotInOperator,
)
from .standard import (
    EqualsOperator,
    GreaterThanOperator,
    GreaterThanOrEqualOperator,
    LessThanOperator,
    LessThanOrEqualOperator,
    NotEqualsOperator,
)
from .string import (
    ContainsOperator,
    EndsWithOperator,
    MatchesOperator,
    NotContainsOperator,
    StartsWithOperator,
)
from .temporal import (
    AfterOperator,
    BeforeOperator,
    OnOrAfterOperator,
    OnOrBeforeOperator,
)


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with all built-in SQLAlchemy operators."""
    registry = SQLAlchemyOperatorRegistry()
    registry.register_all(
        # Equality / comparison
        EqualsOperator(),
        NotEqualsOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterThanOrEqualOperator(),
        LessThanOrEqualOperator(),
        # Date / time
        BeforeOperator(),
        AfterOperator(),
        OnOrBeforeOperator(),
        OnOrAfterOperator(),
        # Range / membership
        BetweenOperator(),
        InOperator(),
        NotInOperator(),
        # String
        ContainsOperator(),
        NotContainsOperator(),
        StartsWithOperator(),
        EndsWithOperator(),
        MatchesOperator(),
        # Null / empty
        IsEmptyOperator(),
        IsNotEmptyOperator(),
        # Boolean
        IsTrueOperator(),
        IsFalseOperator(),
        # Array
        ContainsAnyOperator(),
        ContainsAllOperator(),
        NotContainsAnyOperator(),
    )
    return registry


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperatorRegistry",
]
