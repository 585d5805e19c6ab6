"""Intersection of a line segment and a circle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from contourkit.fuzzy import fuzzy_eq, fuzzy_eq_zero
from contourkit.geometry import min_max, parametric_from_point
from contourkit.vector2 import Vector2


@dataclass(frozen=True)
class NoIntersect:
    """The segment's line does not meet the circle."""


@dataclass(frozen=True)
class TangentIntersect:
    """A single tangent intersect at parametric value ``t0``."""

    t0: float


@dataclass(frozen=True)
class TwoIntersects:
    """Two intersects at parametric values ``t0 <= t1``."""

    t0: float
    t1: float


LineCircleIntr = Union[NoIntersect, TangentIntersect, TwoIntersects]


def line_circle_intr(
    p0: Vector2,
    p1: Vector2,
    radius: float,
    circle_center: Vector2,
    epsilon: float,
) -> LineCircleIntr:
    """Find the intersects between the segment ``p0``-``p1`` and a circle.

    Results are parametric values of ``P(t) = p0 + t * (p1 - p0)``; values
    outside 0..1 lie on the extended line. Near tangent cases snap to a single
    tangent intersect using ``epsilon``.
    """
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    h = circle_center.x
    k = circle_center.y

    if p0.fuzzy_eq(p1, epsilon):
        xh = (p0.x + p1.x) / 2.0 - h
        yk = (p0.y + p1.y) / 2.0 - k
        if fuzzy_eq(xh * xh + yk * yk, radius * radius, epsilon):
            return TangentIntersect(0.0)
        return NoIntersect()

    p0_shifted = p0 - circle_center
    p1_shifted = p1 - circle_center

    # Default epsilon here: only guards against dividing by a tiny number.
    if fuzzy_eq_zero(dx):
        x_pos = (p1_shifted.x + p0_shifted.x) / 2.0
        a, b, c = 1.0, 0.0, -x_pos
    else:
        m = dy / dx
        a, b, c = m, -1.0, p1_shifted.y - m * p1_shifted.x

    a2_b2 = a * a + b * b
    shortest_dist = abs(c) / math.sqrt(a2_b2)

    if shortest_dist > radius + epsilon:
        return NoIntersect()

    x0 = -a * c / a2_b2 + h
    y0 = -b * c / a2_b2 + k

    if fuzzy_eq(shortest_dist, radius, epsilon):
        return TangentIntersect(parametric_from_point(p0, p1, Vector2(x0, y0), epsilon))

    d = radius * radius - c * c / a2_b2
    mult = math.sqrt(abs(d / a2_b2))

    sol1 = parametric_from_point(
        p0, p1, Vector2(x0 + b * mult, y0 - a * mult), epsilon
    )
    sol2 = parametric_from_point(
        p0, p1, Vector2(x0 - b * mult, y0 + a * mult), epsilon
    )
    t0, t1 = min_max(sol1, sol2)
    return TwoIntersects(t0, t1)