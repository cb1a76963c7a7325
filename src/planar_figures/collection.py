from __future__ import annotations

"""pf.collection - owning, growable array of figures
=====================================================
:class:`ArrayOfFigures` keeps figures in a fixed-size store of slots and
tracks how many of them are occupied.  It owns what it holds:

1. **add takes the object** - ``add_figure`` stores the figure itself, the
   caller should not keep using it.
2. **copy clones** - copying the array clones every stored figure, so two
   arrays never share a figure.
3. **move hands over the store** - ``move`` / ``move_from`` transfer the
   store and leave the source empty (size 0, capacity 0) but usable.

Slots may be ``None`` on purpose; they count towards ``size`` but are
skipped by ``total_square`` and ``print_figures``.

Usage example
-------------
>>> arr = ArrayOfFigures(2)                        # capacity 4
>>> arr.add_figure(Rectangle(Point(0, 0), Point(3, 4)))
>>> arr.total_square()
12.0
"""

import io
import logging
import operator
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .core.figureobject import SerializableBase
from .figures.base import Figure
from .geometry import Point
from .textio import TextSink

__all__ = [
    "ArrayOfFigures",
    "FigureView",
]

LOGGER = logging.getLogger("pf.collection")


# ----------------------------------------------------------------------------
# Read-only slot view ---------------------------------------------------------
# ----------------------------------------------------------------------------
class FigureView:
    """Query-only window on a stored figure; nothing here can change it."""

    __slots__ = ("_figure",)

    def __init__(self, figure: Figure):
        if not isinstance(figure, Figure):
            raise TypeError(f"FigureView wraps a Figure, not {type(figure).__name__}")
        self._figure = figure

    @property
    def id(self) -> str:
        return self._figure.id

    @property
    def description(self) -> str:
        return self._figure.description

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._figure.vertices

    @property
    def kind(self) -> str:
        """Class name of the viewed figure."""
        return type(self._figure).__name__

    def square(self) -> float:
        return self._figure.square()

    def perimeter(self) -> float:
        return self._figure.perimeter()

    def geometric_center(self) -> Point:
        return self._figure.geometric_center()

    def write(self, sink: TextSink) -> None:
        self._figure.write(sink)

    def clone(self) -> Figure:
        """Independent copy of the viewed figure, owned by the caller."""
        return self._figure.clone()

    def is_view_of(self, figure: Any) -> bool:
        return self._figure is figure

    def __float__(self) -> float:
        return self._figure.square()

    def __str__(self) -> str:
        return str(self._figure)

    def __repr__(self) -> str:
        return f"<pf.collection.FigureView of {self._figure!r}>"


# ----------------------------------------------------------------------------
# ArrayOfFigures --------------------------------------------------------------
# ----------------------------------------------------------------------------
class ArrayOfFigures(SerializableBase):
    """
    Resizable, index-addressable store of owned figures.

    ``ArrayOfFigures()`` starts with no store at all (capacity 0).
    ``ArrayOfFigures(n)`` reserves ``max(1, 2 * n)`` slots so the next
    insertions after a size hint do not grow the store right away.
    """

    __slots__ = ("_figures", "_size", "_capacity")

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            cap = 0
        else:
            cap = operator.index(capacity)
            if cap < 0:
                raise ValueError(f"capacity must be non-negative, got {cap}")
            cap = 1 if cap == 0 else cap * 2
        self._figures: List[Optional[Figure]] = [None] * cap
        self._size: int = 0
        self._capacity: int = cap

    @classmethod
    def from_figures(cls, figures: Iterable[Optional[Figure]]) -> "ArrayOfFigures":
        """
        Build an array holding clones of `figures` (``None`` entries stay ``None``).
        The caller keeps ownership of the originals.
        """
        items = list(figures)
        for f in items:
            cls._check_slot_value(f)
        arr = cls(len(items))
        for i, f in enumerate(items):
            arr._figures[i] = f.clone() if f is not None else None
        arr._size = len(items)
        return arr

    # ---------------- checks -----------------------------------------
    @staticmethod
    def _check_slot_value(figure: Any) -> None:
        if figure is not None and not isinstance(figure, Figure):
            raise TypeError(f"ArrayOfFigures stores Figure instances or None, not {type(figure).__name__}")

    def _check_not_stored(self, figure: Any, skip: Optional[int] = None) -> None:
        if figure is None:
            return
        for i, f in enumerate(self._figures[: self._size]):
            if i != skip and f is figure:
                raise ValueError(f"Figure is already stored at index {i}.")

    def _check_index(self, index: Any) -> int:
        idx = operator.index(index)
        if idx < 0 or idx >= self._size:
            raise IndexError(f"Index {idx} out of range for size {self._size}")
        return idx

    # ---------------- mutation ---------------------------------------
    def add_figure(self, figure: Optional[Figure]) -> None:
        """Append `figure` (taking it over, no clone), growing the store when full."""
        self._check_slot_value(figure)
        self._check_not_stored(figure)
        if self._size >= self._capacity:
            self._grow()
        self._figures[self._size] = figure
        self._size += 1

    def _grow(self) -> None:
        new_capacity = 1 if self._capacity == 0 else self._capacity * 2
        new_store: List[Optional[Figure]] = self._figures[: self._size] + [None] * (new_capacity - self._size)
        LOGGER.debug("growing store %d -> %d (size %d)", self._capacity, new_capacity, self._size)
        # swap in only once the new store is complete
        self._figures, self._capacity = new_store, new_capacity

    def remove_figure(self, index: int) -> None:
        """Release the figure at `index` and shift the tail one slot left."""
        idx = self._check_index(index)
        removed = self._figures[idx]
        del self._figures[idx]
        self._figures.append(None)
        self._size -= 1
        LOGGER.debug("removed slot %d (%s), size now %d", idx, type(removed).__name__, self._size)

    def __getitem__(self, index: int) -> Optional[Figure]:
        return self._figures[self._check_index(index)]

    def __setitem__(self, index: int, figure: Optional[Figure]) -> None:
        idx = self._check_index(index)
        self._check_slot_value(figure)
        self._check_not_stored(figure, skip=idx)
        self._figures[idx] = figure

    def at(self, index: int) -> Optional[FigureView]:
        """Read-only view of slot `index` (``None`` for an empty slot)."""
        figure = self._figures[self._check_index(index)]
        return FigureView(figure) if figure is not None else None

    # ---------------- ownership --------------------------------------
    def release(self) -> None:
        """Drop every owned figure and the store itself."""
        self._figures = []
        self._size = 0
        self._capacity = 0

    def swap(self, other: "ArrayOfFigures") -> None:
        if not isinstance(other, ArrayOfFigures):
            raise TypeError("Can only swap with another ArrayOfFigures.")
        self._figures, other._figures = other._figures, self._figures
        self._size, other._size = other._size, self._size
        self._capacity, other._capacity = other._capacity, self._capacity

    def copy(self) -> "ArrayOfFigures":
        """Deep copy: same size and capacity, every slot cloned on its own."""
        new = ArrayOfFigures()
        new._figures = [f.clone() if f is not None else None for f in self._figures]
        new._size = self._size
        new._capacity = self._capacity
        LOGGER.debug("copied array of size %d", self._size)
        return new

    def __copy__(self) -> "ArrayOfFigures":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "ArrayOfFigures":
        return self.copy()

    def copy_from(self, other: "ArrayOfFigures") -> "ArrayOfFigures":
        """Copy assignment: replace the contents with clones of `other`'s."""
        if other is self:
            return self
        if not isinstance(other, ArrayOfFigures):
            raise TypeError("Can only copy from another ArrayOfFigures.")
        tmp = other.copy()
        self.swap(tmp)
        tmp.release()
        return self

    def move(self) -> "ArrayOfFigures":
        """Hand the store over to a new array; this one becomes empty."""
        new = ArrayOfFigures()
        new.swap(self)
        LOGGER.debug("moved array of size %d", new._size)
        return new

    def move_from(self, other: "ArrayOfFigures") -> "ArrayOfFigures":
        """Move assignment: release own figures, take `other`'s store."""
        if other is self:
            return self
        if not isinstance(other, ArrayOfFigures):
            raise TypeError("Can only move from another ArrayOfFigures.")
        self.release()
        self.swap(other)
        return self

    # ---------------- queries ----------------------------------------
    def get_size(self) -> int:
        return self._size

    def get_capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        """Number of occupied slots."""
        return self._size

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return self._capacity

    def total_square(self) -> float:
        """Sum of the areas of the stored figures; empty slots count as 0."""
        return sum((f.square() for f in self._figures[: self._size] if f is not None), 0.0)

    def print_figures(self, sink: TextSink) -> None:
        """Write every stored figure in index order, skipping empty slots."""
        for f in self._figures[: self._size]:
            if f is not None:
                f.write(sink)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Optional[Figure]]:
        return iter(self._figures[: self._size])

    # ---------------- serialization ----------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "capacity": self._capacity,
            "figures": [f.to_dict() if f is not None else None for f in self._figures[: self._size]],
            "__type__": self.__class__.__name__,
            "__version__": self._SERIAL_VERSION,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArrayOfFigures":
        figures = [Figure.from_dict(d) if d is not None else None for d in data.get("figures", [])]
        arr = cls()
        arr._capacity = max(int(data.get("capacity", 0)), len(figures))
        arr._figures = figures + [None] * (arr._capacity - len(figures))
        arr._size = len(figures)
        return arr

    # ---------------- representation ---------------------------------
    def __str__(self) -> str:
        buf = io.StringIO()
        self.print_figures(buf)
        return buf.getvalue()

    def __repr__(self) -> str:
        return f"<pf.collection.ArrayOfFigures size={self._size} capacity={self._capacity}>"
