from __future__ import annotations
import math
import numbers
from typing import Iterable, Iterator, Sequence, Tuple, Dict, Any

from shapely.geometry import Point as _ShpPoint

from . import config


"""pf.geometry - planar point and the small vector toolkit behind the figures
------------------------------------------------------------------------------
A lightweight 2-D :class:`Point` plus the handful of pure helpers the figure
variants share: side vectors, 2-D cross/dot products, the shoelace area,
vertex averaging and closed polyline length.  Shapely is used only for
interop (``to_shapely``); every formula here is evaluated directly.
"""

Vector = Tuple[float, float]


def _coerce_coordinate(value: Any, axis: str) -> float:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Point {axis} must be a real number, got {type(value).__name__}.")
    return float(value)


# ---------------------------------------------------------------------------
# Point ----------------------------------------------------------------------
# ---------------------------------------------------------------------------
class Point:
    """
    Two-dimensional point.

    A plain value object: coordinates are stored as floats, equality compares
    them with an absolute tolerance, and the only mutation is :meth:`move`.
    Because it can be moved, a Point is not hashable.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._x = _coerce_coordinate(x, "x")
        self._y = _coerce_coordinate(y, "y")

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def get_point(self) -> Tuple[float, float]:
        """Return the coordinates as a tuple."""
        return (self._x, self._y)

    def move(self, new_x: float, new_y: float) -> None:
        """Rebind the point to new coordinates."""
        x = _coerce_coordinate(new_x, "x")
        y = _coerce_coordinate(new_y, "y")
        self._x, self._y = x, y

    def distance_to(self, other: "Point") -> float:
        """Calculate Euclidean distance to another Point."""
        if not isinstance(other, Point):
            raise TypeError("Can only calculate distance to another Point instance.")
        return math.hypot(self._x - other._x, self._y - other._y)

    def to_shapely(self) -> _ShpPoint:
        """Return the equivalent *shapely.geometry.Point*."""
        return _ShpPoint(self._x, self._y)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self._x, "y": self._y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(data["x"], data["y"])

    # ------------------------------------------------------------------
    # Dunder / Properties
    # ------------------------------------------------------------------
    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (
            math.isclose(self._x, other._x, abs_tol=config.POINT_EQ_TOL) and
            math.isclose(self._y, other._y, abs_tol=config.POINT_EQ_TOL)
        )

    __hash__ = None  # mutable through move()

    def __str__(self) -> str:
        return f"({format_coordinate(self._x)}, {format_coordinate(self._y)})"

    def __repr__(self):
        return f"<pf.geometry.Point x={self._x:.3f}, y={self._y:.3f}>"


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    if not isinstance(a, Point):
        raise TypeError("Can only calculate distance between Point instances.")
    return a.distance_to(b)


def format_coordinate(value: float) -> str:
    """Integral values print without a fractional part, others round-trip exactly."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# Vector helpers -------------------------------------------------------------
# ---------------------------------------------------------------------------
def vector(a: Point, b: Point) -> Vector:
    """Side vector a - b."""
    return (a.x - b.x, a.y - b.y)


def cross(u: Vector, v: Vector) -> float:
    """z component of the cross product of two planar vectors."""
    return u[0] * v[1] - u[1] * v[0]


def dot(u: Vector, v: Vector) -> float:
    return u[0] * v[0] + u[1] * v[1]


def norm(u: Vector) -> float:
    return math.hypot(u[0], u[1])


def side_vectors(points: Sequence[Point]) -> list[Vector]:
    """Vectors p[i] - p[i+1] around the closed polygon (last one wraps to p[0])."""
    n = len(points)
    return [vector(points[i], points[(i + 1) % n]) for i in range(n)]


def side_lengths(points: Sequence[Point]) -> list[float]:
    n = len(points)
    return [distance(points[i], points[(i + 1) % n]) for i in range(n)]


# ---------------------------------------------------------------------------
# Polygon measures -----------------------------------------------------------
# ---------------------------------------------------------------------------
def shoelace_area(points: Sequence[Point]) -> float:
    """
    Area of a simple polygon from its ordered vertices.

    S = 1/2 * |sum(x_i * y_{i+1} - y_i * x_{i+1})| with (x_{n+1}, y_{n+1}) = (x_1, y_1).
    """
    n = len(points)
    if n < 3:
        return 0.0
    s = sum(points[i].x * points[(i + 1) % n].y - points[(i + 1) % n].x * points[i].y for i in range(n))
    return abs(s) * 0.5


def polyline_length(points: Sequence[Point], closed: bool = True) -> float:
    """Sum of consecutive vertex distances; closes the ring unless closed=False."""
    if len(points) < 2:
        return 0.0
    total = sum(distance(points[i], points[i + 1]) for i in range(len(points) - 1))
    if closed:
        total += distance(points[-1], points[0])
    return total


def vertex_mean(points: Iterable[Point]) -> Point:
    """Arithmetic mean of the vertices (not the area centroid)."""
    pts = list(points)
    if not pts:
        raise ValueError("Cannot average an empty vertex list.")
    return Point(sum(p.x for p in pts) / len(pts), sum(p.y for p in pts) / len(pts))
