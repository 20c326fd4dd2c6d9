"""
Value-shape helpers for filter values.

A filter value is one of: absent (``None``), a scalar, a two-element
``(min, max)`` range, or a sequence of candidates. These helpers recognise
the shape at compile time; values arriving from deserialised state are
never trusted to have the shape their operator needs.
"""

from __future__ import annotations

from typing import Any

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def is_absent(value: Any) -> bool:
    return value is None


def is_range(value: Any) -> bool:
    """Return ``True`` for a two-element ``tuple`` or ``list``."""
    return isinstance(value, tuple | list) and len(value) == 2


def is_sequence(value: Any) -> bool:
    """Return ``True`` for list-like collections; strings are scalars."""
    return isinstance(value, _SEQUENCE_TYPES)


def is_scalar(value: Any) -> bool:
    return not is_absent(value) and not is_sequence(value)


def as_range(value: Any) -> tuple[Any, Any] | None:
    """Unpack a range value into ``(min, max)``, or ``None`` if not a pair."""
    if not is_range(value):
        return None
    low, high = value
    return low, high


def as_sequence(value: Any) -> list[Any] | None:
    """Copy a sequence value into a list, or ``None`` if not a sequence.

    Sets are sorted when their items allow it so compiled statements are
    deterministic.
    """
    if not is_sequence(value):
        return None
    if isinstance(value, set | frozenset):
        try:
            return sorted(value)
        except TypeError:
            return list(value)
    return list(value)


def like_pattern(value: Any, *, prefix: bool = True, suffix: bool = True) -> str:
    """Wrap a value in ``%`` wildcards for a LIKE / ILIKE match."""
    text = str(value)
    return f"{'%' if prefix else ''}{text}{'%' if suffix else ''}"
