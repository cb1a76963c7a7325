"""Exception types raised by planar_figures."""


class FigureError(Exception):
    """Base class for every error raised by this package."""


class InvalidFigureError(FigureError, ValueError):
    """Vertices do not describe a valid instance of the requested figure."""


class MalformedInputError(FigureError, ValueError):
    """Text does not follow the point format, or the source ran out."""
