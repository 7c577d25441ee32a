"""
sphcollection: Closed-form Test Functions on the Unit Sphere

This package provides reference surfaces for validating quadrature
rules on the sphere:
- Literature test suites (Fornberg, Beentjes, Renka, Reeger, Bellet,
  Franke)
- A family of custom oscillatory and multi-feature functions (cf_f1 ...
  cf_f15)
- Spherical-to-Cartesian conversion and small numeric helpers
- A name-based catalog for selecting test cases
- Plotting of any catalog entry over the (theta, phi) rectangle

Every function has the signature ``f(theta, phi)`` and keeps the
floating width (float32 or float64) of its input.

Version: 0.1.0
"""

__version__ = "0.1.0"

from .coordinates import spherical_to_xyz, validate_angles
from .functions import *  # noqa: F401,F403
from .functions import __all__ as _function_names
from .catalog import (
    get_function,
    list_functions,
    list_families,
    get_info,
    evaluate,
)
from .visualization import plot_function

__all__ = [
    'spherical_to_xyz', 'validate_angles',
    'get_function', 'list_functions', 'list_families', 'get_info',
    'evaluate',
    'plot_function',
] + list(_function_names)
