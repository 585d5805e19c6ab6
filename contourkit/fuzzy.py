"""Fuzzy comparisons of floating point values using an epsilon tolerance."""

from __future__ import annotations

DEFAULT_EPSILON = 1.0e-8
"""Epsilon used when no other tolerance is given."""


def fuzzy_eq(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``epsilon``."""
    return abs(a - b) < epsilon


def fuzzy_eq_zero(value: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True if ``value`` is within ``epsilon`` of zero."""
    return abs(value) < epsilon


def fuzzy_gt(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Fuzzy greater than: true when ``a + epsilon > b``."""
    return a + epsilon > b


def fuzzy_lt(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Fuzzy less than: true when ``a < b + epsilon``."""
    return a < b + epsilon


def fuzzy_in_range(
    value: float,
    min_value: float,
    max_value: float,
    epsilon: float = DEFAULT_EPSILON,
) -> bool:
    """Return True if ``value`` lies between ``min_value`` and ``max_value``, fuzzy inclusive."""
    return fuzzy_gt(value, min_value, epsilon) and fuzzy_lt(value, max_value, epsilon)