"""Intersection of two line segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from contourkit.fuzzy import fuzzy_eq_zero, fuzzy_gt, fuzzy_in_range, fuzzy_lt
from contourkit.geometry import parametric_from_point
from contourkit.vector2 import Vector2


@dataclass(frozen=True)
class NoIntersect:
    """Segments are parallel and not collinear, or are distinct points."""


@dataclass(frozen=True)
class TrueIntersect:
    """The segments intersect at the given parametric values."""

    seg1_t: float
    seg2_t: float


@dataclass(frozen=True)
class Overlapping:
    """The segments are collinear and overlap along the second segment."""

    seg2_t0: float
    seg2_t1: float


@dataclass(frozen=True)
class FalseIntersect:
    """The lines intersect only when one or both segments are extended."""

    seg1_t: float
    seg2_t: float


LineLineIntr = Union[NoIntersect, TrueIntersect, Overlapping, FalseIntersect]


def line_line_intr(
    v1: Vector2,
    v2: Vector2,
    u1: Vector2,
    u2: Vector2,
    epsilon: float,
) -> LineLineIntr:
    """Find the intersects between segments ``v1``-``v2`` and ``u1``-``u2``.

    Handles parallel, collinear and single point segments; ``epsilon`` is used
    for fuzzy comparisons, with parametric values scaled by segment length.
    """
    v = v2 - v1
    u = u2 - u1
    v_pdot_u = v.perp_dot(u)
    w = v1 - u1

    seg1_length = v.length()
    seg2_length = u.length()

    if not fuzzy_eq_zero(v_pdot_u, epsilon):
        seg1_t = u.perp_dot(w) / v_pdot_u
        seg2_t = v.perp_dot(w) / v_pdot_u
        if not fuzzy_in_range(
            seg1_t * seg1_length, 0.0, seg1_length, epsilon
        ) or not fuzzy_in_range(seg2_t * seg2_length, 0.0, seg2_length, epsilon):
            return FalseIntersect(seg1_t, seg2_t)
        return TrueIntersect(seg1_t, seg2_t)

    if not fuzzy_eq_zero(v.perp_dot(w), epsilon) or not fuzzy_eq_zero(
        u.perp_dot(w), epsilon
    ):
        return NoIntersect()

    v_is_point = v1.fuzzy_eq(v2, epsilon)
    u_is_point = u1.fuzzy_eq(u2, epsilon)

    if v_is_point and u_is_point:
        if v1.fuzzy_eq(u1, epsilon):
            return TrueIntersect(0.0, 0.0)
        return NoIntersect()

    if v_is_point:
        seg2_t = parametric_from_point(u1, u2, v1, epsilon)
        if fuzzy_in_range(seg2_t * seg2_length, 0.0, seg2_length, epsilon):
            return TrueIntersect(0.0, seg2_t)
        return NoIntersect()

    if u_is_point:
        seg1_t = parametric_from_point(v1, v2, u1, epsilon)
        if fuzzy_in_range(seg1_t * seg1_length, 0.0, seg1_length, epsilon):
            return TrueIntersect(seg1_t, 0.0)
        return NoIntersect()

    w2 = v2 - u1
    if fuzzy_eq_zero(u.x, epsilon):
        seg2_t0, seg2_t1 = w.y / u.y, w2.y / u.y
    else:
        seg2_t0, seg2_t1 = w.x / u.x, w2.x / u.x

    if seg2_t0 > seg2_t1:
        seg2_t0, seg2_t1 = seg2_t1, seg2_t0

    if not fuzzy_lt(seg2_t0 * seg2_length, seg2_length, epsilon) or not fuzzy_gt(
        seg2_t1 * seg2_length, 0.0, epsilon
    ):
        return NoIntersect()

    seg2_t0 = max(seg2_t0, 0.0)
    seg2_t1 = min(seg2_t1, 1.0)

    if fuzzy_eq_zero((seg2_t1 - seg2_t0) * seg2_length, epsilon):
        # segments meet end to end at a single point
        if v1.fuzzy_eq(u1, epsilon) or v1.fuzzy_eq(u2, epsilon):
            seg1_t = 0.0
        else:
            seg1_t = 1.0
        return TrueIntersect(seg1_t, seg2_t0)

    return Overlapping(seg2_t0, seg2_t1)