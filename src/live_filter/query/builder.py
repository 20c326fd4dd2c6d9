"""
Compile a :class:`FilterGroup` into a SQLAlchemy filter expression.

Uses the strategy pattern: each operator is an isolated class in
``operators/``, registered in a ``SQLAlchemyOperatorRegistry``.
``build_filter`` walks the group tree bottom-up and delegates leaf
compilation to the registry.

Compilation rules
-----------------
* A leaf without a value is dropped, unless its operator is ``is_empty`` /
  ``is_not_empty``.
* A leaf whose operator is not registered, or whose value has the wrong
  shape for its operator, is dropped.
* A group compiles its direct filters, then its nested groups, discards the
  dropped ones and joins the rest with its own conjunction. Nothing left
  means no condition (``None``); a single predicate is returned unwrapped.

Dropped leaves are logged at ``DEBUG`` on this module's logger.

Sorting
-------
``apply_sort`` appends one ``ORDER BY`` term per ``Sort`` in sequence
order: the first sort is the primary key, later ones break ties.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, asc, desc, or_

from ..operators import VALUELESS_OPERATORS, Conjunction
from ..sort import SortDirection, normalize_sorts
from ..utils import is_absent
from .operators import DEFAULT_SQLA_REGISTRY
from .resolution import resolve_column

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select

    from ..filter import Filter, FilterGroup
    from ..sort import SortSpec
    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_filter(
    target: Any,
    filter_group: FilterGroup,
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool] | None:
    """
    Build a SQLAlchemy filter expression from a filter group.

    Args:
        target: The record alias fields are resolved against: a mapped
            class, an aliased class, a ``Table`` or a ``Select``.
        filter_group: The group to compile.
        registry: Optional custom operator registry.  Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Returns:
        SQLAlchemy Boolean expression, or ``None`` when the group has no
        effective condition.
    """
    reg = registry or DEFAULT_SQLA_REGISTRY
    return _compile_group(target, filter_group, reg)


def build_query(
    stmt: Select[Any],
    filter_group: FilterGroup,
    *,
    model: Any = None,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> Select[Any]:
    """
    Attach the compiled group to ``stmt`` as a WHERE clause.

    Returns ``stmt`` itself when the group has no effective condition.
    Calling it again on the result adds another, AND-ed, clause.

    Args:
        stmt: The base ``Select`` statement.
        filter_group: The group to compile.
        model: Target to resolve fields against. Defaults to the first
            entity selected by ``stmt``.
        registry: Optional custom operator registry.
    """
    target = model if model is not None else stmt
    predicate = build_filter(target, filter_group, registry=registry)
    if predicate is None:
        return stmt
    return stmt.where(predicate)


def apply_sort(
    stmt: Select[Any],
    sorts: SortSpec,
    *,
    model: Any = None,
) -> Select[Any]:
    """
    Apply a ``Sort``, a sequence of sorts, or ``None`` to ``stmt``.

    Returns ``stmt`` itself for ``None`` or an empty sequence.
    """
    target = model if model is not None else stmt
    for sort in normalize_sorts(sorts):
        column = resolve_column(target, sort.field)
        direction = desc if sort.direction is SortDirection.DESC else asc
        stmt = stmt.order_by(direction(column))
    return stmt


class QueryBuilder:
    """Compiles filter groups and sorts against SQLAlchemy statements.

    Binds an operator registry so callers configure dispatch once::

        builder = QueryBuilder()
        stmt = builder.apply_sort(builder.build_query(select(Task), group), sorts)
    """

    def __init__(self, registry: SQLAlchemyOperatorRegistry | None = None) -> None:
        self.registry = registry or DEFAULT_SQLA_REGISTRY

    def build_filter(
        self, target: Any, filter_group: FilterGroup
    ) -> ColumnElement[bool] | None:
        return build_filter(target, filter_group, registry=self.registry)

    def build_query(
        self, stmt: Select[Any], filter_group: FilterGroup, *, model: Any = None
    ) -> Select[Any]:
        return build_query(stmt, filter_group, model=model, registry=self.registry)

    def apply_sort(
        self, stmt: Select[Any], sorts: SortSpec, *, model: Any = None
    ) -> Select[Any]:
        return apply_sort(stmt, sorts, model=model)


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _combine(
    predicates: list[ColumnElement[bool]], conjunction: Conjunction
) -> ColumnElement[bool]:
    """Fold ``predicates`` left-to-right with one conjunction."""
    join = and_ if conjunction is Conjunction.AND else or_
    return reduce(lambda acc, predicate: join(acc, predicate), predicates)


def _compile_group(
    target: Any,
    group: FilterGroup,
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool] | None:
    compiled = [_compile_filter(target, f, registry) for f in group.filters]
    compiled.extend(_compile_group(target, g, registry) for g in group.groups)

    predicates = [p for p in compiled if p is not None]
    if not predicates:
        return None
    if len(predicates) == 1:
        return predicates[0]
    return _combine(predicates, group.conjunction)


def _compile_filter(
    target: Any,
    filter_: Filter,
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool] | None:
    """Compile one leaf, or return ``None`` to drop it."""
    operator = filter_.operator

    if is_absent(filter_.value) and operator not in VALUELESS_OPERATORS:
        logger.debug("Dropping filter on %r: %s needs a value", filter_.field, operator)
        return None

    strategy = registry.get(operator)
    if strategy is None:
        logger.debug(
            "Dropping filter on %r: unsupported operator %r", filter_.field, operator
        )
        return None

    column = resolve_column(target, filter_.field)
    expr = strategy.apply(column, filter_.value, filter_.type)
    if expr is None:
        logger.debug(
            "Dropping filter on %r: %s cannot use value %r",
            filter_.field,
            operator,
            filter_.value,
        )
    return expr
