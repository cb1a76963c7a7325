"""
Planar figures behind one polymorphic interface, and an owning array of them.

    from planar_figures import ArrayOfFigures, Point, Rectangle, Rhombus

Design notes
############
- Every figure validates its vertices when they come in; a figure built
  from points is always a valid instance of its variant.
- ``ArrayOfFigures`` owns the figures it stores: copies clone, moves hand
  the store over.
- Loggers live under the "pf" tree; the level comes from ``PF_LOG_LEVEL``.
"""

import logging

from . import config

# #######
# Errors
# #######
from .core.errors import FigureError, InvalidFigureError, MalformedInputError

# ##################
# Points and text I/O
# ##################
from .geometry import Point, distance
from .textio import TextSource

# ########
# Figures
# ########
from .figures import Figure, RegularPolygon, Rectangle, Rhombus, Trapezoid, Pentagon, Hexagon

# ###########
# Collection
# ###########
from .collection import ArrayOfFigures, FigureView

_root_logger = logging.getLogger("pf")
_root_logger.addHandler(logging.NullHandler())
_root_logger.setLevel(config.LOG_LEVEL)

# #########################
# Explicit public API surface
# #########################
__all__ = (
    # Errors
    "FigureError",
    "InvalidFigureError",
    "MalformedInputError",

    # Points and text I/O
    "Point",
    "distance",
    "TextSource",

    # Figures
    "Figure",
    "RegularPolygon",
    "Rectangle",
    "Rhombus",
    "Trapezoid",
    "Pentagon",
    "Hexagon",

    # Collection
    "ArrayOfFigures",
    "FigureView",
)
