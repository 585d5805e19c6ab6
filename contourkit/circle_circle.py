"""Intersection of two circles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from contourkit.fuzzy import fuzzy_eq, fuzzy_eq_zero, fuzzy_gt, fuzzy_lt
from contourkit.vector2 import Vector2


@dataclass(frozen=True)
class NoIntersect:
    """The circles do not intersect."""


@dataclass(frozen=True)
class TangentIntersect:
    """The circles touch at a single tangent point."""

    point: Vector2


@dataclass(frozen=True)
class TwoIntersects:
    """The circles cross at two points."""

    point1: Vector2
    point2: Vector2


@dataclass(frozen=True)
class Overlapping:
    """The circles are the same circle."""


CircleCircleIntr = Union[NoIntersect, TangentIntersect, TwoIntersects, Overlapping]


def circle_circle_intr(
    radius1: float,
    center1: Vector2,
    radius2: float,
    center2: Vector2,
    epsilon: float,
) -> CircleCircleIntr:
    """Find the intersects between two circles given by radius and center.

    ``epsilon`` is used for fuzzy comparisons.
    """
    cv = center2 - center1
    d2 = cv.dot(cv)
    d = math.sqrt(d2)

    if fuzzy_eq_zero(d, epsilon):
        if fuzzy_eq(radius1, radius2, epsilon):
            return Overlapping()
        return NoIntersect()

    if not fuzzy_lt(d, radius1 + radius2, epsilon) or not fuzzy_gt(
        d, abs(radius1 - radius2), epsilon
    ):
        return NoIntersect()

    rad1_sq = radius1 * radius1
    a = (rad1_sq - radius2 * radius2 + d2) / (2.0 * d)
    mid = center1 + cv.scale(a / d)
    diff = rad1_sq - a * a

    if diff < 0.0:
        return TangentIntersect(mid)

    h_over_d = math.sqrt(diff) / d
    x_term = h_over_d * cv.y
    y_term = h_over_d * cv.x

    pt1 = Vector2(mid.x + x_term, mid.y - y_term)
    pt2 = Vector2(mid.x - x_term, mid.y + y_term)

    if pt1.fuzzy_eq(pt2, epsilon):
        return TangentIntersect(pt1)

    return TwoIntersects(pt1, pt2)