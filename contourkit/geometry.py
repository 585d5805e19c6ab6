"""Common math for angles, points, line segments and arcs in 2D space."""

from __future__ import annotations

import math
from typing import Tuple, TypeVar

from contourkit.fuzzy import DEFAULT_EPSILON
from contourkit.vector2 import Vector2

T = TypeVar("T")

_TAU = math.tau
_PI = math.pi


def min_max(v1: T, v2: T) -> Tuple[T, T]:
    """Return ``(min, max)`` of ``v1`` and ``v2``."""
    if v1 < v2:  # type: ignore[operator]
        return v1, v2
    return v2, v1


def normalize_radians(angle: float) -> float:
    """Normalize ``angle`` to lie between 0 and 2*PI (inclusive at both ends)."""
    if 0.0 <= angle <= _TAU:
        return angle
    return angle - math.floor(angle / _TAU) * _TAU


def delta_angle(angle1: float, angle2: float) -> float:
    """Smaller difference from ``angle1`` to ``angle2``.

    Negative if the normalized difference is greater than PI.
    """
    diff = normalize_radians(angle2 - angle1)
    if diff > _PI:
        diff -= _TAU
    return diff


def delta_angle_signed(angle1: float, angle2: float, negative: bool) -> float:
    """Like :func:`delta_angle` but with the sign forced by ``negative``."""
    diff = abs(delta_angle(angle1, angle2))
    return -diff if negative else diff


def angle_is_between(
    test_angle: float,
    start_angle: float,
    end_angle: float,
    epsilon: float = DEFAULT_EPSILON,
) -> bool:
    """Test if ``test_angle`` lies counter clockwise from start to end, fuzzy inclusive."""
    end_sweep = normalize_radians(end_angle - start_angle)
    mid_sweep = normalize_radians(test_angle - start_angle)
    return mid_sweep < end_sweep + epsilon


def angle_is_within_sweep(
    test_angle: float,
    start_angle: float,
    sweep_angle: float,
    epsilon: float = DEFAULT_EPSILON,
) -> bool:
    """Test if ``test_angle`` is within ``sweep_angle`` starting at ``start_angle``.

    A positive sweep is counter clockwise, a negative one clockwise.
    """
    end_angle = start_angle + sweep_angle
    if sweep_angle < 0.0:
        return angle_is_between(test_angle, end_angle, start_angle, epsilon)
    return angle_is_between(test_angle, start_angle, end_angle, epsilon)


def quadratic_solutions(
    a: float, b: float, c: float, sqrt_discriminant: float
) -> Tuple[float, float]:
    """Both solutions of ``a*x^2 + b*x + c = 0`` computed to limit precision loss.

    ``sqrt_discriminant`` must be ``sqrt(b*b - 4*a*c)``.
    """
    denom = 2.0 * a
    if b < 0.0:
        sol1 = (-b + sqrt_discriminant) / denom
    else:
        sol1 = (-b - sqrt_discriminant) / denom
    sol2 = (c / a) / sol1
    return sol1, sol2


def dist_squared(p0: Vector2, p1: Vector2) -> float:
    """Squared distance between ``p0`` and ``p1``."""
    d = p0 - p1
    return d.dot(d)


def angle(p0: Vector2, p1: Vector2) -> float:
    """Angle of the direction from ``p0`` to ``p1``."""
    return math.atan2(p1.y - p0.y, p1.x - p0.x)


def midpoint(p0: Vector2, p1: Vector2) -> Vector2:
    """Midpoint of the segment from ``p0`` to ``p1``."""
    return Vector2((p0.x + p1.x) / 2.0, (p0.y + p1.y) / 2.0)


def point_on_circle(radius: float, center: Vector2, angle: float) -> Vector2:
    """Point on the circle of ``radius`` about ``center`` at polar ``angle``."""
    return Vector2(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def point_from_parametric(p0: Vector2, p1: Vector2, t: float) -> Vector2:
    """Point on the segment from ``p0`` to ``p1`` at parametric value ``t``."""
    return p0 + (p1 - p0).scale(t)


def parametric_from_point(
    p0: Vector2, p1: Vector2, point: Vector2, epsilon: float = DEFAULT_EPSILON
) -> float:
    """Parametric value of ``point`` on the line through ``p0`` and ``p1``.

    The point is assumed to lie on the line; the component with the larger
    difference is used so vertical and horizontal lines are handled.
    """
    x_diff = p1.x - p0.x
    y_diff = p1.y - p0.y
    if abs(x_diff) < abs(y_diff):
        return (point.y - p0.y) / y_diff
    return (point.x - p0.x) / x_diff


def line_seg_closest_point(p0: Vector2, p1: Vector2, point: Vector2) -> Vector2:
    """Closest point on the segment from ``p0`` to ``p1`` to ``point``."""
    v = p1 - p0
    w = point - p0
    c1 = w.dot(v)
    if c1 < DEFAULT_EPSILON:
        return p0
    c2 = v.length_squared()
    if c2 < c1 + DEFAULT_EPSILON:
        return p1
    return p0 + v.scale(c1 / c2)


def _perp_dot_test_value(p0: Vector2, p1: Vector2, point: Vector2) -> float:
    return (p1.x - p0.x) * (point.y - p0.y) - (p1.y - p0.y) * (point.x - p0.x)


def is_left(p0: Vector2, p1: Vector2, point: Vector2) -> bool:
    """True if ``point`` is strictly left of the direction ``p1 - p0``."""
    return _perp_dot_test_value(p0, p1, point) > 0.0


def is_left_or_equal(p0: Vector2, p1: Vector2, point: Vector2) -> bool:
    """True if ``point`` is left of or on the direction ``p1 - p0``."""
    return _perp_dot_test_value(p0, p1, point) >= 0.0


def is_left_or_coincident(
    p0: Vector2, p1: Vector2, point: Vector2, epsilon: float = DEFAULT_EPSILON
) -> bool:
    """True if ``point`` is left of or fuzzy coincident with ``p1 - p0``."""
    return _perp_dot_test_value(p0, p1, point) > -epsilon


def is_right_or_coincident(
    p0: Vector2, p1: Vector2, point: Vector2, epsilon: float = DEFAULT_EPSILON
) -> bool:
    """True if ``point`` is right of or fuzzy coincident with ``p1 - p0``."""
    return _perp_dot_test_value(p0, p1, point) < epsilon


def point_within_arc_sweep(
    center: Vector2,
    arc_start: Vector2,
    arc_end: Vector2,
    is_clockwise: bool,
    point: Vector2,
    epsilon: float = DEFAULT_EPSILON,
) -> bool:
    """Test if ``point`` lies in the cone projected outward by an arc's sweep."""
    if is_clockwise:
        return is_right_or_coincident(
            center, arc_start, point, epsilon
        ) and is_left_or_coincident(center, arc_end, point, epsilon)
    return is_left_or_coincident(
        center, arc_start, point, epsilon
    ) and is_right_or_coincident(center, arc_end, point, epsilon)


def bulge_from_angle(angle: float) -> float:
    """Bulge for an arc sweep angle: ``tan(angle / 4)``."""
    return math.tan(angle / 4.0)


def angle_from_bulge(bulge: float) -> float:
    """Arc sweep angle for a bulge: ``4 * atan(bulge)``."""
    return 4.0 * math.atan(bulge)