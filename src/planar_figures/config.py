# planar_figures/config.py
"""
Tolerances and logging level for planar_figures.

Every value has a built-in default and can be overridden through an
environment variable, which is handy for CI runs or for experimenting with
inputs on a very different scale.

  Environment variables:
    PF_RHOMBUS_SIDE_EPS   (default: "1e-9")   equal-side tolerance for rhombi
    PF_ORIENTATION_EPS    (default: "1e-10")  min |cross| of adjacent rhombus sides
    PF_PARALLEL_EPS       (default: "1e-9")   max sine of the angle between parallel sides
    PF_REGULAR_SIDE_EPS   (default: "1e-6")   equal-side tolerance for pentagons/hexagons
    PF_CONCYCLIC_EPS      (default: "1e-6")   radius tolerance for pentagons/hexagons
    PF_AREA_EPS           (default: "1e-9")   area tolerance used by figure equality
    PF_POINT_EQ_TOL       (default: "1e-9")   coordinate tolerance used by Point equality
    PF_LOG_LEVEL          (default: "WARNING")
"""

import os

# Rhombus validation
RHOMBUS_SIDE_EPS = float(os.getenv("PF_RHOMBUS_SIDE_EPS", "1e-9"))
ORIENTATION_EPS = float(os.getenv("PF_ORIENTATION_EPS", "1e-10"))

# Trapezoid validation (relative: compared against |u| * |v|)
PARALLEL_EPS = float(os.getenv("PF_PARALLEL_EPS", "1e-9"))

# Pentagon / hexagon validation
REGULAR_SIDE_EPS = float(os.getenv("PF_REGULAR_SIDE_EPS", "1e-6"))
CONCYCLIC_EPS = float(os.getenv("PF_CONCYCLIC_EPS", "1e-6"))

# Comparisons
AREA_EPS = float(os.getenv("PF_AREA_EPS", "1e-9"))
POINT_EQ_TOL = float(os.getenv("PF_POINT_EQ_TOL", "1e-9"))

# Logging for the "pf" logger tree
LOG_LEVEL = os.getenv("PF_LOG_LEVEL", "WARNING").upper()
