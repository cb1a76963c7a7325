from __future__ import annotations

from ..geometry import Point
from .base import RegularPolygon


class Hexagon(RegularPolygon):
    """Regular hexagon, six vertices in winding order."""

    __slots__ = ()

    VERTEX_COUNT = 6
    DEFAULT_DESCRIPTION = "hexagon"

    def __init__(self, *points: Point, description: str | None = None) -> None:
        super().__init__(points or None, description)
