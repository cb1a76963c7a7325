from __future__ import annotations
from typing import Sequence

from .. import config
from ..geometry import Point, Vector, cross, dot, norm, polyline_length, shoelace_area, side_vectors
from .base import Figure, reject


def is_parallel(u: Vector, v: Vector, eps: float | None = None) -> bool:
    """
    True when the sine of the angle between u and v is at most `eps`.

    The test is |u x v| <= eps * |u| * |v|, so it does not depend on the
    scale of the coordinates.
    """
    if eps is None:
        eps = config.PARALLEL_EPS
    return abs(cross(u, v)) <= eps * norm(u) * norm(v)


class Trapezoid(Figure):
    """
    Quadrilateral with exactly one pair of parallel opposite sides.

    Vertices in winding order A, B, C, D; the opposite pairs are AB/CD and
    BC/DA.  Rejected: a zero-length side, no parallel pair, both pairs
    parallel (parallelogram, rectangle, rhombus), and a parallel pair
    traversed in the same direction, which means the sides cross.
    """

    __slots__ = ()

    VERTEX_COUNT = 4
    DEFAULT_DESCRIPTION = "trapezoid"

    def __init__(self, *points: Point, description: str | None = None) -> None:
        super().__init__(points or None, description)

    @classmethod
    def _validate(cls, vertices: Sequence[Point]) -> None:
        ab, bc, cd, da = side_vectors(vertices)
        if any(norm(s) == 0.0 for s in (ab, bc, cd, da)):
            reject("trapezoid", "sides must have non-zero length.")

        first = is_parallel(ab, cd)
        second = is_parallel(bc, da)
        if first and second:
            reject("trapezoid", "both pairs of opposite sides are parallel.")
        if not (first or second):
            reject("trapezoid", "at least one pair of opposite sides must be parallel.")

        u, v = (ab, cd) if first else (bc, da)
        if dot(u, v) >= 0:
            reject("trapezoid", "parallel sides must run in opposite directions (vertices out of order).")

    def bases(self) -> tuple[float, float]:
        """Lengths of the two parallel sides."""
        ab, bc, cd, da = side_vectors(self._vertices)
        if is_parallel(ab, cd):
            return norm(ab), norm(cd)
        return norm(bc), norm(da)

    def square(self) -> float:
        return shoelace_area(self._vertices)

    def perimeter(self) -> float:
        return polyline_length(self._vertices)
