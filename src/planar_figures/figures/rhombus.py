from __future__ import annotations
from typing import Sequence

from .. import config
from ..geometry import Point, cross, distance, side_lengths, side_vectors
from .base import Figure, reject


class Rhombus(Figure):
    """
    Four equal sides, vertices in winding order.

    Validation: every side equals the first within RHOMBUS_SIDE_EPS, and the
    cross products of consecutive side vectors all exceed ORIENTATION_EPS in
    magnitude with one common sign.  Either winding is accepted; a vertex
    order that turns both ways (crossed diagonals) is not.
    """

    __slots__ = ()

    VERTEX_COUNT = 4
    DEFAULT_DESCRIPTION = "rhombus"

    def __init__(self, *points: Point, description: str | None = None) -> None:
        super().__init__(points or None, description)

    @classmethod
    def _validate(cls, vertices: Sequence[Point]) -> None:
        sides = side_lengths(vertices)
        if any(abs(s - sides[0]) > config.RHOMBUS_SIDE_EPS for s in sides[1:]):
            reject("rhombus", "all sides must be of equal length.")

        vecs = side_vectors(vertices)
        turns = [cross(vecs[i], vecs[(i + 1) % 4]) for i in range(4)]
        if any(abs(t) <= config.ORIENTATION_EPS for t in turns):
            reject("rhombus", "adjacent sides must be non-parallel.")
        if not (all(t > 0 for t in turns) or all(t < 0 for t in turns)):
            reject("rhombus", "vertices must be ordered around the figure.")

    def diagonals(self) -> tuple[float, float]:
        """Lengths of the p1-p3 and p2-p4 diagonals."""
        v = self._vertices
        return distance(v[0], v[2]), distance(v[1], v[3])

    def square(self) -> float:
        d1, d2 = self.diagonals()
        return (d1 * d2) / 2.0

    def perimeter(self) -> float:
        length = distance(self._vertices[0], self._vertices[1])
        width = distance(self._vertices[0], self._vertices[3])
        return 2 * (length + width)
