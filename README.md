# contourkit

Small, dependency-free building blocks for 2D geometry: fuzzy floating point
comparison, an immutable 2D vector, angle and arc bulge helpers, and
intersection routines for line segments and circles.

## Installation

```
pip install contourkit
```

## Modules

- `contourkit.fuzzy` – `fuzzy_eq`, `fuzzy_eq_zero`, `fuzzy_gt`, `fuzzy_lt` and
  `fuzzy_in_range` compare floats within an epsilon. The epsilon defaults to
  `DEFAULT_EPSILON` (`1e-8`).
- `contourkit.vector2` – `Vector2`, a frozen dataclass with `x` and `y`.
  It supports `+`, `-`, unary `-`, iteration (`x, y = v`) and offers `zero`,
  `scale`, `dot`, `perp_dot`, `length_squared`, `length`, `normalize`, `perp`,
  `unit_perp`, `rotate_about` and `fuzzy_eq`. `vec2(x, y)` is a shorthand
  constructor. `str(v)` gives `[x, y]`.
- `contourkit.control` – `Control`, a continue/break signal for visitor
  callbacks: `Control.continuing()`, `Control.breaking(value)` and
  `should_break()`.
- `contourkit.geometry` – `normalize_radians`, `delta_angle`,
  `delta_angle_signed`, `angle_is_between`, `angle_is_within_sweep`,
  `quadratic_solutions`, `min_max`, `dist_squared`, `angle`, `midpoint`,
  `point_on_circle`, `point_from_parametric`, `parametric_from_point`,
  `line_seg_closest_point`, `is_left`, `is_left_or_equal`,
  `is_left_or_coincident`, `is_right_or_coincident`, `point_within_arc_sweep`,
  `bulge_from_angle` and `angle_from_bulge`.
- `contourkit.line_line` – `line_line_intr(v1, v2, u1, u2, epsilon)` returns
  `NoIntersect`, `TrueIntersect(seg1_t, seg2_t)`,
  `FalseIntersect(seg1_t, seg2_t)` or `Overlapping(seg2_t0, seg2_t1)`.
- `contourkit.line_circle` – `line_circle_intr(p0, p1, radius, circle_center, epsilon)`
  returns `NoIntersect`, `TangentIntersect(t0)` or `TwoIntersects(t0, t1)`,
  given as parametric values along the segment (`t0 <= t1`).
- `contourkit.circle_circle` – `circle_circle_intr(radius1, center1, radius2, center2, epsilon)`
  returns `NoIntersect`, `TangentIntersect(point)`, `TwoIntersects(point1, point2)`
  or `Overlapping`.

Intersection results are frozen dataclasses; tell them apart with
`isinstance` or a `match` statement.

## Example

```python
from contourkit.vector2 import Vector2
from contourkit.line_line import line_line_intr, TrueIntersect
from contourkit.circle_circle import circle_circle_intr, TangentIntersect

result = line_line_intr(
    Vector2(0.0, 0.0), Vector2(1.0, 0.0),
    Vector2(0.5, -1.0), Vector2(0.5, 1.0),
    1e-5,
)
assert isinstance(result, TrueIntersect)
assert (result.seg1_t, result.seg2_t) == (0.5, 0.5)

tangent = circle_circle_intr(1.0, Vector2(0.0, 0.0), 1.0, Vector2(0.0, 2.0), 1e-5)
assert isinstance(tangent, TangentIntersect)
print(tangent.point)  # [0.0, 1.0]
```

Every intersection function takes an explicit `epsilon`. It controls how
"sticky" the fuzzy comparisons are. `1e-5` is a sensible value for data in
everyday units.

## What this package does not do

contourkit provides only the primitives listed above. It has no polyline type,
and so offers no polyline offsetting, boolean operations, area or path length
calculations. It has no spatial index and no command line tool.

## Running the tests

```
pip install contourkit[test]
pytest
```