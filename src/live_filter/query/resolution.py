"""
Field resolution against the query target.

The target is whatever the record alias of the query is: a mapped class, an
``aliased()`` class, a ``Table`` / subquery, or a ``Select`` whose first
selected entity is used. Field names are not validated here: a name that
does not resolve becomes a bare column reference, and the database reports
it when the statement executes.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import ColumnElement, Select, column

logger = logging.getLogger(__name__)


def primary_entity(stmt: Select[Any]) -> Any | None:
    """Return the first ORM entity selected by ``stmt``, if any."""
    for description in stmt.column_descriptions:
        entity = description.get("entity")
        if entity is not None:
            return entity
    return None


def _is_expression(attr: Any) -> bool:
    return isinstance(attr, ColumnElement) or hasattr(attr, "__clause_element__")


def _lookup(target: Any, name: str) -> Any | None:
    if isinstance(target, Select):
        entity = primary_entity(target)
        if entity is None:
            return target.selected_columns.get(name)
        target = entity

    # Table, Alias, Subquery, CTE
    if hasattr(target, "c") and not hasattr(target, "__mapper__"):
        return target.c.get(name)

    attr = getattr(target, name, None)
    return attr if _is_expression(attr) else None


def resolve_column(target: Any, name: str) -> Any:
    """
    Resolve ``name`` to a column expression on ``target``.

    Args:
        target: Mapped class, aliased class, selectable or ``Select``.
        name: Attribute / column name.

    Returns:
        The mapped attribute or column, or an unbound ``column(name)``
        when ``target`` has no such field.
    """
    resolved = _lookup(target, name)
    if resolved is None:
        logger.debug("Field %r not found on %r; using a bare column", name, target)
        return column(name)
    return resolved
