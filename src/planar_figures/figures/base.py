from __future__ import annotations

"""pf.figures.base - the capability set shared by every figure variant
=======================================================================
A :class:`Figure` owns a fixed number of vertices in the order the caller
supplied them and answers area, perimeter and center queries from them.
Validation happens only when vertices come in (constructor, ``from_dict``,
``read``), so a figure built from points is always a valid instance of its
variant.  A figure built without points is an unset placeholder: all
vertices sit at the origin and :meth:`Figure.read` is the way to fill it.
"""

import functools
import io
import logging
import math
from abc import abstractmethod
from typing import Any, ClassVar, Dict, List, NoReturn, Optional, Sequence, Tuple, Type, TypeVar, Union

import numpy as np
from shapely.geometry import LinearRing, Polygon as _ShpPolygon

from .. import config
from ..core.errors import InvalidFigureError
from ..core.figureobject import FigureObject
from ..geometry import Point, polyline_length, shoelace_area, side_lengths, vertex_mean
from ..textio import TextSink, TextSource, as_source, read_points, write_points

LOGGER = logging.getLogger("pf.figures")

F = TypeVar("F", bound="Figure")


def reject(kind: str, reason: str) -> NoReturn:
    """Log and raise the validation failure for a figure variant."""
    msg = f"Invalid {kind} points: {reason}"
    LOGGER.debug(msg)
    raise InvalidFigureError(msg)


@functools.total_ordering
class Figure(FigureObject):
    """
    Abstract planar figure.

    Subclasses set ``VERTEX_COUNT`` and ``DEFAULT_DESCRIPTION`` and implement
    ``_validate``, ``square`` and ``perimeter``.  Figures compare (``==``,
    ``<``, ...) by area, and ``float(figure)`` is its area.
    """

    __slots__ = ("_vertices",)
    __serialize_fields__ = ["id", "description", "vertices"]

    VERTEX_COUNT: ClassVar[int] = 0
    DEFAULT_DESCRIPTION: ClassVar[str] = "figure"
    _REGISTRY: ClassVar[Dict[str, Type["Figure"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        Figure._REGISTRY[cls.__name__] = cls

    def __init__(self, vertices: Optional[Sequence[Point]] = None, description: Optional[str] = None) -> None:
        super().__init__(self.DEFAULT_DESCRIPTION if description is None else description)
        if vertices is None:
            self._vertices: Tuple[Point, ...] = tuple(Point(0.0, 0.0) for _ in range(self.VERTEX_COUNT))
            return
        pts = self._coerce_vertices(vertices)
        self._validate(pts)
        self._vertices = pts

    @classmethod
    def from_vertices(cls: Type[F], vertices: Sequence[Point], description: Optional[str] = None) -> F:
        """Build a figure directly from all of its vertices (validated)."""
        obj = cls.__new__(cls)
        Figure.__init__(obj, vertices, description)
        return obj

    @classmethod
    def _coerce_vertices(cls, vertices: Sequence[Point]) -> Tuple[Point, ...]:
        pts = tuple(vertices)
        if len(pts) != cls.VERTEX_COUNT:
            raise TypeError(f"{cls.__name__} needs {cls.VERTEX_COUNT} points, got {len(pts)}.")
        for p in pts:
            if not isinstance(p, Point):
                raise TypeError(f"{cls.__name__} vertices must be Point instances, not {type(p).__name__}.")
        # private copies; callers can keep moving their own points
        return tuple(Point(p.x, p.y) for p in pts)

    # -------------------------------------------------------------------------
    # Abstract interface
    # -------------------------------------------------------------------------
    @classmethod
    @abstractmethod
    def _validate(cls, vertices: Sequence[Point]) -> None:
        """Raise InvalidFigureError unless `vertices` form a valid instance."""
        raise NotImplementedError

    @abstractmethod
    def square(self) -> float:
        """Area of the figure."""
        raise NotImplementedError

    @abstractmethod
    def perimeter(self) -> float:
        """Sum of the side lengths."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Shared behaviour
    # -------------------------------------------------------------------------
    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Copies of the defining vertices, in winding order."""
        return tuple(Point(p.x, p.y) for p in self._vertices)

    def geometric_center(self) -> Point:
        """Arithmetic mean of the defining vertices."""
        return vertex_mean(self._vertices)

    def __float__(self) -> float:
        return self.square()

    def as_array(self) -> np.ndarray:
        """Vertices as an (N, 2) float array."""
        return np.array([p.get_point() for p in self._vertices], dtype=float)

    def to_shapely(self) -> _ShpPolygon:
        """Return the equivalent *shapely.geometry.Polygon*."""
        return _ShpPolygon([p.get_point() for p in self._vertices])

    # ---------------- text format ------------------------------------
    def write(self, sink: TextSink) -> None:
        """Write the label line followed by one point line per vertex."""
        sink.write(f"{self.description}:\n")
        write_points(sink, self._vertices)

    def read(self, source: Union[TextSource, str, Any]) -> TextSource:
        """
        Replace the vertices with VERTEX_COUNT points read from `source`.

        Never raises for bad input: when the text is malformed, runs out, or
        describes an invalid figure, the source's failure flag is set and the
        current vertices stay as they were.

        Returns:
            The TextSource used, truthy when the read succeeded.
        """
        src = as_source(source)
        points = read_points(src, self.VERTEX_COUNT)
        if points is None:
            return src
        pts = tuple(points)
        try:
            self._validate(pts)
        except InvalidFigureError as exc:
            LOGGER.warning("%s read rejected: %s", self.__class__.__name__, exc)
            src.set_fail()
            return src
        self._vertices = pts
        return src

    # ---------------- serialization ----------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Figure":
        """
        Rebuild a figure from ``to_dict`` output.

        Called on ``Figure`` itself, the variant is taken from "__type__".
        """
        target: Type[Figure] = cls
        type_name = data.get("__type__")
        if type_name is not None and type_name != cls.__name__:
            if type_name not in Figure._REGISTRY:
                raise ValueError(f"Unknown figure type '{type_name}'.")
            target = Figure._REGISTRY[type_name]
            if not issubclass(target, cls):
                raise ValueError(f"'{type_name}' is not a {cls.__name__}.")
        pts: List[Point] = [Point.from_dict(p) for p in data["vertices"]]
        if len(pts) == target.VERTEX_COUNT and all(p.x == 0.0 and p.y == 0.0 for p in pts):
            # unset placeholder, restored without validation
            fig = target.__new__(target)
            Figure.__init__(fig, None, data.get("description"))
        else:
            fig = target.from_vertices(pts, data.get("description"))
        if data.get("id"):
            fig.id = data["id"]
        return fig

    # ---------------- comparison by area -----------------------------
    def __eq__(self, other):
        if not isinstance(other, Figure):
            return NotImplemented
        return math.isclose(self.square(), other.square(), rel_tol=0.0, abs_tol=config.AREA_EPS)

    def __lt__(self, other):
        if not isinstance(other, Figure):
            return NotImplemented
        return not self == other and self.square() < other.square()

    __hash__ = None  # mutable through read()

    # ---------------- representation ---------------------------------
    def __str__(self) -> str:
        buf = io.StringIO()
        self.write(buf)
        return buf.getvalue()

    def __repr__(self) -> str:
        return f"<pf.figures.{self.__class__.__name__} description='{self.description}' area={self.square():.3f}>"


class RegularPolygon(Figure):
    """
    Equal-sided polygon inscribed in a circle (pentagon, hexagon).

    Validation: sides equal within REGULAR_SIDE_EPS and longer than it,
    every vertex at the same distance from the vertex mean within
    CONCYCLIC_EPS, and the vertex ring does not cross itself.
    """

    __slots__ = ()

    @classmethod
    def _validate(cls, vertices: Sequence[Point]) -> None:
        kind = cls.DEFAULT_DESCRIPTION
        sides = side_lengths(vertices)
        if sides[0] <= config.REGULAR_SIDE_EPS:
            reject(kind, "sides must have non-zero length.")
        if any(abs(s - sides[0]) > config.REGULAR_SIDE_EPS for s in sides[1:]):
            reject(kind, "all sides must be equal.")

        arr = np.array([p.get_point() for p in vertices], dtype=float)
        offsets = arr - arr.mean(axis=0)
        radii = np.hypot(offsets[:, 0], offsets[:, 1])
        if np.any(np.abs(radii - radii[0]) > config.CONCYCLIC_EPS):
            reject(kind, "points must be concyclic.")

        if not LinearRing(arr).is_simple:
            reject(kind, "vertices must be ordered around the circle.")

    def square(self) -> float:
        return shoelace_area(self._vertices)

    def perimeter(self) -> float:
        return polyline_length(self._vertices)
