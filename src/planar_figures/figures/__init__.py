"""
Figure variants.

    from planar_figures.figures import Rectangle, Rhombus, Trapezoid, Pentagon, Hexagon

Every variant registers itself with ``Figure`` on import, which is what lets
``Figure.from_dict`` rebuild any of them from its "__type__" tag.
"""

# ###############
# Abstract bases
# ###############
from .base import Figure, RegularPolygon

# ##################
# Quadrilaterals
# ##################
from .rectangle import Rectangle
from .rhombus import Rhombus
from .trapezoid import Trapezoid, is_parallel

# ##################
# Regular polygons
# ##################
from .pentagon import Pentagon
from .hexagon import Hexagon

__all__ = (
    "Figure",
    "RegularPolygon",
    "Rectangle",
    "Rhombus",
    "Trapezoid",
    "is_parallel",
    "Pentagon",
    "Hexagon",
)
