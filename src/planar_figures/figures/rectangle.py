from __future__ import annotations
from typing import Optional, Sequence

from ..geometry import Point, distance
from .base import Figure, reject


class Rectangle(Figure):
    """
    Axis-aligned rectangle given by two opposite corners.

    Vertices are stored as ``p1, (p2.x, p1.y), p2, (p1.x, p2.y)``.
    """

    __slots__ = ()

    VERTEX_COUNT = 4
    DEFAULT_DESCRIPTION = "rectangle"

    def __init__(self, p1: Optional[Point] = None, p2: Optional[Point] = None, *, description: Optional[str] = None) -> None:
        if p1 is None and p2 is None:
            super().__init__(None, description)
            return
        if not isinstance(p1, Point) or not isinstance(p2, Point):
            raise TypeError("Rectangle needs two Point corners (or none for an unset rectangle).")
        super().__init__(self.corners(p1, p2), description)

    @staticmethod
    def corners(p1: Point, p2: Point) -> tuple[Point, Point, Point, Point]:
        """All four corners, in winding order, from two opposite ones."""
        return (Point(p1.x, p1.y), Point(p2.x, p1.y), Point(p2.x, p2.y), Point(p1.x, p2.y))

    @classmethod
    def _validate(cls, vertices: Sequence[Point]) -> None:
        p1, _, p2, _ = vertices
        if p1.x == p2.x or p1.y == p2.y:
            reject("rectangle", "points must not be aligned vertically or horizontally.")
        if tuple(vertices) != cls.corners(p1, p2):
            reject("rectangle", "vertices must be the axis-aligned corners of the p1-p3 diagonal.")

    def square(self) -> float:
        length = distance(self._vertices[0], self._vertices[1])
        width = distance(self._vertices[0], self._vertices[3])
        return length * width

    def perimeter(self) -> float:
        length = distance(self._vertices[0], self._vertices[1])
        width = distance(self._vertices[0], self._vertices[3])
        return 2 * (length + width)
