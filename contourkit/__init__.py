"""2D geometry primitives: fuzzy comparison, vectors, angles and intersections."""

__version__ = "0.4.0"

__all__ = [
    "fuzzy",
    "control",
    "vector2",
    "geometry",
    "circle_circle",
    "line_circle",
    "line_line",
]