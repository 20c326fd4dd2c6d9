"""
SQLAlchemy operator compilation strategy.

Provides the ``SQLAlchemyOperator`` strategy interface and the registry
that serves as the operator dispatch table of the compiler.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..operators import FilterOperator

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from ..operators import FieldType


class SQLAlchemyOperator(ABC):
    """
    Strategy interface for compiling a filter operator
    into a SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def name(self) -> FilterOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def apply(
        self,
        column: Any,
        value: Any,
        field_type: FieldType | str | None = None,
    ) -> ColumnElement[bool] | None:
        """
        Build a SQLAlchemy filter clause.

        Args:
            column: A SQLAlchemy column or instrumented attribute.
            value: The filter value.
            field_type: The declared field type.

        Returns:
            A SQLAlchemy boolean expression, or ``None`` when ``value`` does
            not have the shape the operator needs.
        """
        ...


class SQLAlchemyOperatorRegistry:
    """
    Registry of ``SQLAlchemyOperator`` instances keyed by
    :class:`FilterOperator`.
    """

    def __init__(self) -> None:
        self._operators: dict[FilterOperator, SQLAlchemyOperator] = {}

    def register(self, operator: SQLAlchemyOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: SQLAlchemyOperator) -> None:
        for op in operators:
            self.register(op)

    def unregister(self, name: FilterOperator) -> None:
        self._operators.pop(name, None)

    def get(self, name: FilterOperator | str) -> SQLAlchemyOperator | None:
        try:
            key = FilterOperator(name)
        except ValueError:
            return None
        return self._operators.get(key)

    def has(self, name: FilterOperator | str) -> bool:
        return self.get(name) is not None

    @property
    def supported_operators(self) -> set[FilterOperator]:
        return set(self._operators.keys())

    def copy(self) -> SQLAlchemyOperatorRegistry:
        """Return an independent registry with the same strategies."""
        clone = SQLAlchemyOperatorRegistry()
        clone.register_all(*self._operators.values())
        return clone

    def apply(
        self,
        name: FilterOperator | str,
        column: Any,
        value: Any,
        field_type: FieldType | str | None = None,
    ) -> ColumnElement[bool] | None:
        """
        Look up the operator and apply.

        Returns ``None`` if the operator is not registered, so the
        condition is dropped rather than failing the whole query.
        """
        op = self.get(name)
        if op is None:
            return None
        return op.apply(column, value, field_type)
