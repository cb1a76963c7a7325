from __future__ import annotations

"""pf.textio - textual point format
====================================
Points are written as ``(x, y)``.  Reading is tolerant about punctuation:
a point is *delimiter, x, delimiter, y, delimiter* where each delimiter is
any single non-blank character and blanks between tokens are skipped, so
``(1,2)``, ``( 1 , 2 )`` and ``[1;2]`` all parse.

:class:`TextSource` plays the role of an input stream: it hands out
characters on demand and carries a sticky failure flag.  Once a read has
failed the source stays failed until :meth:`TextSource.clear` is called.
"""

import io
import logging
from typing import Any, List, Optional, Protocol, Sequence, Tuple, Union

from .core.errors import MalformedInputError
from .geometry import Point

__all__ = [
    "TextSink",
    "TextSource",
    "as_source",
    "parse_point",
    "read_points",
    "write_point",
    "write_points",
]

LOGGER = logging.getLogger("pf.textio")

_NUMBER_CHARS = frozenset("0123456789+-.eE")


class TextSink(Protocol):
    """Anything with ``write(str)``: files, ``io.StringIO``, ``sys.stdout``."""

    def write(self, s: str) -> Any: ...


class TextSource:
    """Character source with one character of push-back and a failure flag."""

    def __init__(self, stream: Union[str, Any]):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        if not callable(getattr(stream, "read", None)):
            raise TypeError(f"TextSource needs a str or a readable text stream, not {type(stream).__name__}")
        self._stream = stream
        self._pushback: Optional[str] = None
        self._fail = False
        self._eof = False

    # ---------------- state ------------------------------------------
    @property
    def fail(self) -> bool:
        """True once a read has failed."""
        return self._fail

    @property
    def eof(self) -> bool:
        """True once the underlying stream has been exhausted."""
        return self._eof and self._pushback is None

    def set_fail(self) -> None:
        self._fail = True

    def clear(self) -> None:
        """Reset the failure flag so reading can continue."""
        self._fail = False

    def __bool__(self) -> bool:
        return not self._fail

    # ---------------- characters -------------------------------------
    def get(self) -> str:
        """Next character, or "" when exhausted."""
        if self._pushback is not None:
            ch, self._pushback = self._pushback, None
            return ch
        ch = self._stream.read(1)
        if not ch:
            self._eof = True
        return ch

    def unget(self, ch: str) -> None:
        if ch:
            self._pushback = ch

    def skip_blanks(self) -> None:
        ch = self.get()
        while ch and ch.isspace():
            ch = self.get()
        self.unget(ch)

    # ---------------- tokens -----------------------------------------
    def read_delimiter(self) -> str:
        self.skip_blanks()
        ch = self.get()
        if not ch:
            raise MalformedInputError("Unexpected end of input while reading a delimiter.")
        return ch

    def read_number(self) -> float:
        self.skip_blanks()
        chars: List[str] = []
        ch = self.get()
        while ch and ch in _NUMBER_CHARS:
            chars.append(ch)
            ch = self.get()
        self.unget(ch)
        token = "".join(chars)
        if not token:
            if not ch:
                raise MalformedInputError("Unexpected end of input while reading a number.")
            raise MalformedInputError(f"Expected a number, found {ch!r}.")
        try:
            return float(token)
        except ValueError as exc:
            raise MalformedInputError(f"Malformed number {token!r}.") from exc


def as_source(source: Union[TextSource, str, Any]) -> TextSource:
    """Wrap a str or stream in a TextSource; pass TextSource through unchanged."""
    return source if isinstance(source, TextSource) else TextSource(source)


def parse_point(source: TextSource) -> Tuple[float, float]:
    """
    Read one point as (x, y).

    Raises:
        MalformedInputError: source exhausted or not in the point format.
    """
    source.read_delimiter()
    x = source.read_number()
    source.read_delimiter()
    y = source.read_number()
    source.read_delimiter()
    return x, y


def read_points(source: TextSource, count: int) -> Optional[List[Point]]:
    """
    Read exactly `count` points.

    Returns the points, or None after setting the source's failure flag.
    A source that has already failed yields None without consuming input.
    """
    if source.fail:
        return None
    points: List[Point] = []
    try:
        for _ in range(count):
            x, y = parse_point(source)
            points.append(Point(x, y))
    except MalformedInputError as exc:
        LOGGER.debug("point %d of %d rejected: %s", len(points) + 1, count, exc)
        source.set_fail()
        return None
    return points


def write_point(sink: TextSink, point: Point) -> None:
    sink.write(f"{point}\n")


def write_points(sink: TextSink, points: Sequence[Point]) -> None:
    for p in points:
        write_point(sink, p)
