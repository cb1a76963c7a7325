from __future__ import annotations

from ..geometry import Point
from .base import RegularPolygon


class Pentagon(RegularPolygon):
    """Regular pentagon, five vertices in winding order."""

    __slots__ = ()

    VERTEX_COUNT = 5
    DEFAULT_DESCRIPTION = "pentagon"

    def __init__(self, *points: Point, description: str | None = None) -> None:
        super().__init__(points or None, description)
