from .errors import FigureError, InvalidFigureError, MalformedInputError
from .figureobject import FigureObject, SerializableBase

__all__ = (
    "FigureError",
    "InvalidFigureError",
    "MalformedInputError",
    "FigureObject",
    "SerializableBase",
)
