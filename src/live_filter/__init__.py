"""Composable filter groups and sorts, compiled to SQLAlchemy queries."""

from .exceptions import FilterIndexError, LiveFilterError
from .filter import Filter, FilterGroup
from .operators import (
    ARRAY_TYPES,
    STRING_TYPES,
    Conjunction,
    FieldType,
    FilterOperator,
)
from .query import (
    DEFAULT_SQLA_REGISTRY,
    QueryBuilder,
    SQLAlchemyOperator,
    SQLAlchemyOperatorRegistry,
    apply_sort,
    build_default_sqla_registry,
    build_filter,
    build_query,
)
from .sort import Sort, SortDirection, SortInfo, normalize_sorts, sort_info

__version__ = "0.1.2"

__all__ = [
    # Data model
    "Filter",
    "FilterGroup",
    "Sort",
    "SortDirection",
    "SortInfo",
    "sort_info",
    "normalize_sorts",
    # Enumerations
    "FilterOperator",
    "FieldType",
    "Conjunction",
    "STRING_TYPES",
    "ARRAY_TYPES",
    # Compiler
    "QueryBuilder",
    "build_filter",
    "build_query",
    "apply_sort",
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    # Exceptions
    "LiveFilterError",
    "FilterIndexError",
]
