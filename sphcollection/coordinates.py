"""
Coordinate conversion and small numeric helpers shared by the catalog.

All helpers accept numpy scalars, plain Python numbers or numpy arrays
and keep the floating width of their input.
"""

import numpy as np
from typing import Tuple

from .config import SUPPORTED_DTYPES, default_dtype

_WIDTH_NEUTRAL = (int, float)


def _cast(value, dtype: np.dtype):
    if np.ndim(value) == 0:
        return dtype.type(value)
    return np.asarray(value, dtype=dtype)


def as_float(theta, phi) -> Tuple:
    """
    Bring an angle pair to one common floating width.

    Parameters
    ----------
    theta, phi : float, numpy floating scalar or array_like
        Polar and azimuthal angles in radians

    Returns
    -------
    theta, phi
        Both values as numpy scalars (0-d input) or arrays of the
        resolved dtype

    Raises
    ------
    TypeError
        If the two angles carry different floating widths, or a width
        other than float32/float64

    Notes
    -----
    Plain Python ``int``/``float`` values carry no width of their own and
    adopt the width of the other argument. When both are plain, the width
    comes from :func:`sphcollection.config.default_dtype`. Integer or
    boolean numpy input is promoted the same way.
    """
    explicit = []
    for value in (theta, phi):
        if type(value) in _WIDTH_NEUTRAL:
            continue
        dtype = np.asarray(value).dtype
        if dtype.kind != "f":
            continue
        if dtype not in SUPPORTED_DTYPES:
            raise TypeError(
                f"Unsupported floating type {dtype}; use float32 or float64"
            )
        if dtype not in explicit:
            explicit.append(dtype)

    if len(explicit) > 1:
        raise TypeError(
            "theta and phi must share one floating type, got "
            f"{explicit[0]} and {explicit[1]}"
        )

    dtype = explicit[0] if explicit else default_dtype()
    return _cast(theta, dtype), _cast(phi, dtype)


def spherical_to_xyz(theta, phi) -> Tuple:
    """
    Convert spherical angles to a point on the unit sphere.

    Parameters
    ----------
    theta : float or array_like
        Polar angle measured from the +z axis, in radians
    phi : float or array_like
        Azimuthal angle measured from the +x axis, in radians

    Returns
    -------
    x, y, z
        Cartesian components with x**2 + y**2 + z**2 == 1 up to rounding
    """
    theta, phi = as_float(theta, phi)
    sin_theta = np.sin(theta)
    x = sin_theta * np.cos(phi)
    y = sin_theta * np.sin(phi)
    z = np.cos(theta)
    return x, y, z


def sign(v):
    """Three-way sign: -1 for v < 0, 0 for v == 0, +1 for v > 0."""
    return np.sign(v)


def dot(x1, y1, z1, x2, y2, z2):
    """Inner product of (x1, y1, z1) and (x2, y2, z2)."""
    return x1 * x2 + y1 * y2 + z1 * z2


def validate_angles(theta, phi) -> bool:
    """
    Check that angles lie in the conventional domain.

    Catalog functions never call this; it is offered to callers that
    want to reject out-of-range samples before evaluating.

    Parameters
    ----------
    theta, phi : float or array_like
        Polar and azimuthal angles in radians

    Returns
    -------
    valid : bool
        True if 0 <= theta <= pi and 0 <= phi < 2*pi for every element
    """
    theta = np.asarray(theta, dtype=float)
    phi = np.asarray(phi, dtype=float)
    return bool(np.all(
        (theta >= 0.0) & (theta <= np.pi) & (phi >= 0.0) & (phi < 2.0 * np.pi)
    ))
