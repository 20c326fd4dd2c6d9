from enum import Enum


class FilterOperator(str, Enum):
    """Supported filter operators."""

    # Equality
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"

    # String matching (case-insensitive)
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    MATCHES = "matches"

    # Null/Empty checks
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"

    # Numeric comparison
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    BETWEEN = "between"

    # Boolean
    IS_TRUE = "is_true"
    IS_FALSE = "is_false"

    # Date / time comparison
    BEFORE = "before"
    AFTER = "after"
    ON_OR_BEFORE = "on_or_before"
    ON_OR_AFTER = "on_or_after"

    # Membership
    IN = "in"
    NOT_IN = "not_in"

    # Array
    CONTAINS_ANY = "contains_any"
    CONTAINS_ALL = "contains_all"
    NOT_CONTAINS_ANY = "not_contains_any"


class FieldType(str, Enum):
    """Declared type of a filtered field."""

    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    UTC_DATETIME = "utc_datetime"
    ENUM = "enum"
    ARRAY = "array"
    MULTI_SELECT = "multi_select"


class Conjunction(str, Enum):
    """Boolean operator joining the direct children of a filter group."""

    AND = "and"
    OR = "or"


STRING_TYPES = frozenset({FieldType.STRING, FieldType.TEXT})
ARRAY_TYPES = frozenset({FieldType.ARRAY, FieldType.MULTI_SELECT})

# Operators that are meaningful without a value.
VALUELESS_OPERATORS = frozenset({FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY})
