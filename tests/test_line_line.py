import math

import pytest

from contourkit.fuzzy import fuzzy_eq
from contourkit.line_line import (
    FalseIntersect,
    NoIntersect,
    Overlapping,
    TrueIntersect,
    line_line_intr,
)
from contourkit.vector2 import Vector2

TEST_ROTATION_ANGLES = [math.pi / 8, math.pi / 6, math.pi / 4, math.pi / 3, math.pi / 2]


def assert_case_eq(left, right):
    assert type(left) is type(right), f"{left!r} != {right!r}"
    if isinstance(left, (TrueIntersect, FalseIntersect)):
        assert fuzzy_eq(left.seg1_t, right.seg1_t), f"{left!r} != {right!r}"
        assert fuzzy_eq(left.seg2_t, right.seg2_t), f"{left!r} != {right!r}"
    elif isinstance(left, Overlapping):
        assert fuzzy_eq(left.seg2_t0, right.seg2_t0), f"{left!r} != {right!r}"
        assert fuzzy_eq(left.seg2_t1, right.seg2_t1), f"{left!r} != {right!r}"


def test_true_intersect():
    result = line_line_intr(
        Vector2(-1.0, -1.0), Vector2(1.0, 1.0), Vector2(-1.0, 1.0), Vector2(1.0, -1.0), 1e-5
    )
    assert_case_eq(result, TrueIntersect(0.5, 0.5))


def test_true_intersect_doc_example():
    result = line_line_intr(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(0.5, -1.0), Vector2(0.5, 1.0), 1e-5
    )
    assert result == TrueIntersect(0.5, 0.5)


def test_end_point_start_point_touch_same_direction():
    u1, u2 = Vector2(-1.0, -1.0), Vector2(1.0, 1.0)
    v1, v2 = Vector2(1.0, 1.0), Vector2(2.0, 2.0)
    assert_case_eq(line_line_intr(u1, u2, v1, v2, 1e-5), TrueIntersect(1.0, 0.0))
    assert_case_eq(line_line_intr(v1, v2, u1, u2, 1e-5), TrueIntersect(0.0, 1.0))


@pytest.mark.parametrize("angle", TEST_ROTATION_ANGLES)
def test_end_point_start_point_touch_rotated(angle):
    u1, u2 = Vector2(-1.0, -1.0), Vector2(1.0, 1.0)
    v1, v2 = Vector2(1.0, 1.0), Vector2(2.0, 2.0)
    rotated = v2.rotate_about(v1, angle)
    assert_case_eq(line_line_intr(u1, u2, v1, rotated, 1e-5), TrueIntersect(1.0, 0.0))


def test_start_points_touch_opposing_direction():
    u1, u2 = Vector2(0.0, 0.0), Vector2(1.0, 1.0)
    v1, v2 = Vector2(0.0, 0.0), Vector2(-1.0, -1.0)
    assert_case_eq(line_line_intr(u1, u2, v1, v2, 1e-5), TrueIntersect(0.0, 0.0))
    assert_case_eq(line_line_intr(v1, v2, u1, u2, 1e-5), TrueIntersect(0.0, 0.0))


@pytest.mark.parametrize("angle", TEST_ROTATION_ANGLES)
def test_start_points_touch_opposing_direction_rotated(angle):
    u1, u2 = Vector2(0.0, 0.0), Vector2(1.0, 1.0)
    v1, v2 = Vector2(0.0, 0.0), Vector2(-1.0, -1.0)
    rotated = v2.rotate_about(v1, angle)
    assert_case_eq(line_line_intr(u1, u2, v1, rotated, 1e-5), TrueIntersect(0.0, 0.0))


def test_false_intersect():
    result = line_line_intr(
        Vector2(-1.0, -1.0), Vector2(-0.5, -0.5), Vector2(-1.0, 1.0), Vector2(1.0, -1.0), 1e-5
    )
    assert_case_eq(result, FalseIntersect(2.0, 0.5))


def test_no_intersect():
    result = line_line_intr(
        Vector2(-1.0, -1.0), Vector2(1.0, 1.0), Vector2(0.0, 1.0), Vector2(1.0, 2.0), 1e-5
    )
    assert_case_eq(result, NoIntersect())


def test_no_intersect_vertical():
    result = line_line_intr(
        Vector2(2.0, 0.0), Vector2(2.0, 1.0), Vector2(-1.0, -1.0), Vector2(-1.0, -2.0), 1e-5
    )
    assert_case_eq(result, NoIntersect())


def test_no_intersect_horizontal():
    result = line_line_intr(
        Vector2(-2.0, -1.0), Vector2(2.0, -1.0), Vector2(-1.0, 5.0), Vector2(1.0, 5.0), 1e-5
    )
    assert_case_eq(result, NoIntersect())


def test_overlapping_intersect():
    result = line_line_intr(
        Vector2(-1.0, -1.0), Vector2(1.0, 1.0), Vector2(0.0, 0.0), Vector2(0.5, 0.5), 1e-5
    )
    assert_case_eq(result, Overlapping(0.0, 1.0))


@pytest.mark.parametrize(
    "u1, u2",
    [
        (Vector2(-1.0, -1.0), Vector2(1.0, 1.0)),
        (Vector2(0.0, -1.0), Vector2(0.0, 1.0)),
        (Vector2(-1.0, 0.0), Vector2(1.0, 0.0)),
    ],
)
def test_point_intersect(u1, u2):
    v1 = v2 = Vector2(0.0, 0.0)
    assert_case_eq(line_line_intr(u1, u2, v1, v2, 1e-5), TrueIntersect(0.5, 0.0))
    assert_case_eq(line_line_intr(v1, v2, u1, u2, 1e-5), TrueIntersect(0.0, 0.5))


def test_point_intersect_at_end():
    u1, u2 = Vector2(-1.0, -1.0), Vector2(1.0, 1.0)
    assert_case_eq(line_line_intr(u1, u2, u1, u1, 1e-5), TrueIntersect(0.0, 0.0))
    assert_case_eq(line_line_intr(u1, u1, u1, u2, 1e-5), TrueIntersect(0.0, 0.0))
    assert_case_eq(line_line_intr(u1, u2, u2, u2, 1e-5), TrueIntersect(1.0, 0.0))
    assert_case_eq(line_line_intr(u2, u2, u1, u2, 1e-5), TrueIntersect(0.0, 1.0))


def test_distinct_points():
    p = Vector2(0.0, 0.0)
    q = Vector2(1.0, 1.0)
    assert line_line_intr(p, p, q, q, 1e-5) == NoIntersect()


def test_entirely_overlapping_same_direction():
    u1, u2 = Vector2(-1.0, -1.0), Vector2(1.0, 1.0)
    assert_case_eq(line_line_intr(u1, u2, u1, u2, 1e-5), Overlapping(0.0, 1.0))


@pytest.mark.parametrize("angle", TEST_ROTATION_ANGLES)
def test_entirely_overlapping_same_direction_rotated(angle):
    u1, u2 = Vector2(-1.0, -1.0), Vector2(1.0, 1.0)
    ru2 = u2.rotate_about(u1, angle)
    rv2 = u2.rotate_about(u1, angle)
    assert_case_eq(line_line_intr(u1, ru2, u1, rv2, 1e-5), Overlapping(0.0, 1.0))


def test_entirely_overlapping_opposing_direction():
    u1, u2 = Vector2(-1.0, -1.0), Vector2(1.0, 1.0)
    v1, v2 = u2, u1
    assert_case_eq(line_line_intr(u1, u2, v1, v2, 1e-5), Overlapping(0.0, 1.0))
    assert_case_eq(line_line_intr(v1, v2, u1, u2, 1e-5), Overlapping(0.0, 1.0))


@pytest.mark.parametrize("angle", TEST_ROTATION_ANGLES)
def test_entirely_overlapping_opposing_direction_rotated(angle):
    u1, u2 = Vector2(-1.0, -1.0), Vector2(1.0, 1.0)
    v1, v2 = u2, u1
    ru2 = u2.rotate_about(u1, angle)
    rv1 = v1.rotate_about(v2, angle)
    assert_case_eq(line_line_intr(u1, ru2, rv1, v2, 1e-5), Overlapping(0.0, 1.0))


def test_collinear_disjoint():
    result = line_line_intr(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(2.0, 0.0), Vector2(3.0, 0.0), 1e-5
    )
    assert result == NoIntersect()