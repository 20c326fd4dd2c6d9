"""
FilterGroup-to-SQLAlchemy compilation.

Public API:
    - ``build_filter(target, group)``: compile a group to a
      ``ColumnElement[bool]``, or ``None`` when there is no condition
    - ``build_query(stmt, group)``: attach the compiled group to a
      ``Select`` as a WHERE clause
    - ``apply_sort(stmt, sorts)``: append ORDER BY terms to a ``Select``
    - ``QueryBuilder``: the above bound to an operator registry
    - ``DEFAULT_SQLA_REGISTRY``: the default operator registry
    - ``SQLAlchemyOperator`` / ``SQLAlchemyOperatorRegistry``: extension
      points for custom operators
    - ``resolve_column``: field lookup used by the compiler
"""

from .builder import QueryBuilder, apply_sort, build_filter, build_query
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .resolution import primary_entity, resolve_column
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "QueryBuilder",
    "build_filter",
    "build_query",
    "apply_sort",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "primary_entity",
    "resolve_column",
]
