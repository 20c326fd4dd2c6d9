"""Tests for the built-in SQLAlchemy operator strategies."""

from __future__ import annotations

import datetime

import pytest
from models import TaggedRecord, TaskRecord, pg_sql, sql
from sqlalchemy.dialects import postgresql

from live_filter import DEFAULT_SQLA_REGISTRY, FieldType, FilterOperator


def apply(operator, column, value, field_type=None):
    return DEFAULT_SQLA_REGISTRY.apply(operator, column, value, field_type)


def test_default_registry_covers_every_operator():
    assert DEFAULT_SQLA_REGISTRY.supported_operators == set(FilterOperator)


# -- Equality -------------------------------------------------------------------


def test_equals():
    expr = apply(FilterOperator.EQUALS, TaskRecord.status, "active")
    assert sql(expr) == "tasks.status = 'active'"


def test_not_equals():
    expr = apply(FilterOperator.NOT_EQUALS, TaskRecord.status, "active")
    assert sql(expr) == "tasks.status != 'active'"


def test_equals_absent_value_is_null():
    assert sql(apply("equals", TaskRecord.status, None)) == "tasks.status IS NULL"


def test_not_equals_absent_value_is_not_null():
    expr = apply("not_equals", TaskRecord.status, None)
    assert sql(expr) == "tasks.status IS NOT NULL"


# -- Comparison -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("operator", "expected"),
    [
        (FilterOperator.GREATER_THAN, "tasks.priority > 3"),
        (FilterOperator.LESS_THAN, "tasks.priority < 3"),
        (FilterOperator.GREATER_THAN_OR_EQUAL, "tasks.priority >= 3"),
        (FilterOperator.LESS_THAN_OR_EQUAL, "tasks.priority <= 3"),
    ],
)
def test_numeric_comparison(operator, expected):
    assert sql(apply(operator, TaskRecord.priority, 3)) == expected


@pytest.mark.parametrize(
    ("operator", "symbol"),
    [
        (FilterOperator.BEFORE, "<"),
        (FilterOperator.AFTER, ">"),
        (FilterOperator.ON_OR_BEFORE, "<="),
        (FilterOperator.ON_OR_AFTER, ">="),
    ],
)
def test_temporal_comparison(operator, symbol):
    expr = apply(operator, TaskRecord.due_date, datetime.date(2024, 1, 1), "date")
    assert sql(expr, literal=False) == f"tasks.due_date {symbol} :due_date_1"


def test_comparison_rejects_sequence_value():
    assert apply(FilterOperator.GREATER_THAN, TaskRecord.priority, [1, 2]) is None
    assert apply(FilterOperator.BEFORE, TaskRecord.due_date, (1, 2)) is None


# -- String matching ------------------------------------------------------------


@pytest.mark.parametrize(
    ("operator", "pattern"),
    [
        (FilterOperator.CONTAINS, "%phone%"),
        (FilterOperator.STARTS_WITH, "phone%"),
        (FilterOperator.ENDS_WITH, "%phone"),
        (FilterOperator.MATCHES, "%phone%"),
    ],
)
def test_ilike_patterns(operator, pattern):
    compiled = apply(operator, TaskRecord.title, "phone").compile()
    assert str(compiled) == "lower(tasks.title) LIKE lower(:title_1)"
    assert compiled.params == {"title_1": pattern}


def test_not_contains():
    compiled = apply(FilterOperator.NOT_CONTAINS, TaskRecord.title, "phone").compile()
    assert "NOT LIKE" in str(compiled)
    assert compiled.params == {"title_1": "%phone%"}


def test_ilike_renders_natively_on_postgresql():
    expr = apply(FilterOperator.CONTAINS, TaggedRecord.title, "phone")
    assert "tagged.title ILIKE" in pg_sql(expr)


def test_contains_stringifies_scalar():
    compiled = apply(FilterOperator.CONTAINS, TaskRecord.title, 42).compile()
    assert compiled.params == {"title_1": "%42%"}


def test_string_match_rejects_sequence_value():
    assert apply(FilterOperator.CONTAINS, TaskRecord.title, ["a", "b"]) is None


# -- Null / empty -------------------------------------------------------------------


@pytest.mark.parametrize("field_type", [FieldType.STRING, FieldType.TEXT, "string"])
def test_is_empty_string_family(field_type):
    expr = apply(FilterOperator.IS_EMPTY, TaskRecord.title, None, field_type)
    assert sql(expr) == "tasks.title IS NULL OR tasks.title = ''"


def test_is_not_empty_string_family():
    expr = apply(FilterOperator.IS_NOT_EMPTY, TaskRecord.title, None, FieldType.STRING)
    assert sql(expr) == "tasks.title IS NOT NULL AND tasks.title != ''"


@pytest.mark.parametrize("field_type", [FieldType.ARRAY, FieldType.MULTI_SELECT])
def test_is_empty_array_family(field_type):
    expr = apply(FilterOperator.IS_EMPTY, TaggedRecord.tags, None, field_type)
    compiled = pg_sql(expr)
    assert "tagged.tags IS NULL OR tagged.tags = " in compiled


def test_is_not_empty_array_family():
    expr = apply(FilterOperator.IS_NOT_EMPTY, TaggedRecord.tags, None, FieldType.ARRAY)
    compiled = pg_sql(expr)
    assert "tagged.tags IS NOT NULL AND tagged.tags != " in compiled


@pytest.mark.parametrize(
    "field_type", [FieldType.INTEGER, FieldType.DATE, FieldType.BOOLEAN, None, "point"]
)
def test_is_empty_other_types_is_null_only(field_type):
    assert sql(apply("is_empty", TaskRecord.priority, None, field_type)) == (
        "tasks.priority IS NULL"
    )
    assert sql(apply("is_not_empty", TaskRecord.priority, None, field_type)) == (
        "tasks.priority IS NOT NULL"
    )


# -- Range / membership -------------------------------------------------------------


@pytest.mark.parametrize("value", [(10, 20), [10, 20]])
def test_between_is_inclusive_on_both_ends(value):
    expr = apply(FilterOperator.BETWEEN, TaskRecord.priority, value)
    assert sql(expr) == "tasks.priority >= 10 AND tasks.priority <= 20"


@pytest.mark.parametrize("value", [20, "10,20", (1, 2, 3), [5], {"min": 1, "max": 2}])
def test_between_rejects_non_pair(value):
    assert apply(FilterOperator.BETWEEN, TaskRecord.priority, value) is None


def test_in():
    expr = apply(FilterOperator.IN, TaskRecord.status, ["active", "pending"])
    assert sql(expr) == "tasks.status IN ('active', 'pending')"


def test_not_in():
    expr = apply(FilterOperator.NOT_IN, TaskRecord.status, ("active",))
    assert "tasks.status NOT IN ('active')" in sql(expr)


def test_in_accepts_set_in_sorted_order():
    expr = apply(FilterOperator.IN, TaskRecord.status, {"pending", "active"})
    assert sql(expr) == "tasks.status IN ('active', 'pending')"


def test_in_rejects_scalar():
    assert apply(FilterOperator.IN, TaskRecord.status, "active") is None
    assert apply(FilterOperator.NOT_IN, TaskRecord.status, 3) is None


# -- Boolean --------------------------------------------------------------------


def test_is_true_ignores_value():
    assert sql(apply(FilterOperator.IS_TRUE, TaskRecord.is_urgent, "anything")) == sql(
        TaskRecord.is_urgent == True  # noqa: E712
    )


def test_is_false_ignores_value():
    assert sql(apply(FilterOperator.IS_FALSE, TaskRecord.is_urgent, 1)) == sql(
        TaskRecord.is_urgent == False  # noqa: E712
    )


# -- Array --------------------------------------------------------------------------


def test_contains_any_uses_overlap():
    expr = apply(FilterOperator.CONTAINS_ANY, TaggedRecord.tags, ["urgent", "bug"])
    assert "tagged.tags && " in pg_sql(expr)


def test_contains_all_uses_containment():
    expr = apply(FilterOperator.CONTAINS_ALL, TaggedRecord.tags, ["urgent", "bug"])
    assert "tagged.tags @> " in pg_sql(expr)


def test_not_contains_any_negates_overlap():
    expr = apply(FilterOperator.NOT_CONTAINS_ANY, TaggedRecord.tags, ["urgent"])
    compiled = pg_sql(expr)
    assert "NOT" in compiled
    assert "tagged.tags && " in compiled


def test_array_operators_bind_candidates_as_one_array():
    expr = apply(FilterOperator.CONTAINS_ANY, TaggedRecord.tags, ("urgent", "bug"))
    params = expr.compile(dialect=postgresql.dialect()).params
    assert list(params.values()) == [["urgent", "bug"]]


def test_array_operators_on_untyped_column_use_raw_operators():
    overlap = apply(FilterOperator.CONTAINS_ANY, TaggedRecord.labels, ["a"])
    contains = apply(FilterOperator.CONTAINS_ALL, TaggedRecord.labels, ["a"])
    assert "tagged.labels && " in pg_sql(overlap)
    assert "tagged.labels @> " in pg_sql(contains)


@pytest.mark.parametrize(
    "operator",
    [
        FilterOperator.CONTAINS_ANY,
        FilterOperator.CONTAINS_ALL,
        FilterOperator.NOT_CONTAINS_ANY,
    ],
)
def test_array_operators_reject_scalar(operator):
    assert apply(operator, TaggedRecord.tags, "urgent") is None
