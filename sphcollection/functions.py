"""
Closed-form test functions on the unit sphere.

Every function takes the polar angle ``theta`` (from +z) and the
azimuthal angle ``phi`` (from +x), both in radians, and returns one
scalar of the same floating width as its input (float32 or float64).
Array input is evaluated element-wise.

The functions are fixed test cases for checking quadrature rules on the
sphere: smooth polynomials and Gaussian bumps, steep tanh/atan ramps,
discontinuous sign-based steps and oscillatory surfaces. Input is never
validated or wrapped; NaN and inf propagate to the caller.

References
----------
- Beentjes, C. H. L. (2015). "Quadrature on a spherical surface."
- Renka, R. J. (1984). "Interpolation of data on the surface of a
  sphere."
- Reeger, J. A., & Fornberg, B. (2016). "Numerical quadrature over the
  surface of a sphere."
- "Numerical quadrature over smooth surfaces with boundaries."
- "Spherical harmonics collocation: a computational intercomparison of
  several grids."
- Franke, R. (1979). "A critical comparison of some methods for
  interpolation of scattered data."
"""

import math

import numpy as np

from .catalog import register
from .coordinates import as_float, dot, sign, spherical_to_xyz

__all__ = [
    "fornberg_f1", "fornberg_f4",
    "beentjes_f3", "beentjes_f4", "beentjes_f5",
    "renka_f3", "renka_f4", "renka_f5",
    "reegar_f2", "reegar_f3", "reegar_f4",
    "bellet_f4",
    "franke",
    "cf_f1", "cf_f2", "cf_f3", "cf_f4", "cf_f5",
    "cf_f6", "cf_f7", "cf_f8", "cf_f9", "cf_f10",
    "cf_f11", "cf_f12", "cf_f13", "cf_f14", "cf_f15",
]

_FORNBERG = "Fornberg test suite"
_BEENTJES = "Beentjes (2015), Quadrature on a spherical surface"
_RENKA = "Renka (1984), Interpolation of data on the surface of a sphere"
_REEGER_SPHERE = "Numerical Quadrature over the Surface of a Sphere"
_REEGER_BOUNDARIES = "Numerical quadrature over smooth surfaces with boundaries"
_BELLET = (
    "Spherical Harmonics Collocation: A Computational Intercomparison "
    "of Several Grids"
)
_CUSTOM = "Vlnas et al. (2025)"


# ---------------------------------------------------------------------------
# Fornberg
# ---------------------------------------------------------------------------

@register("fornberg", reference=_FORNBERG)
def fornberg_f1(theta, phi):
    """Smooth polynomial 1 + x + y^2 + x^2 y + x^4 + y^5 + x^2 y^2 z^2."""
    x, y, z = spherical_to_xyz(theta, phi)
    return 1.0 + x + y * y + x * x * y + x**4 + y**5 + x * x * y * y * z * z


@register("fornberg", reference=_FORNBERG)
def fornberg_f4(theta, phi):
    """
    Hemisphere indicator (1 + sign(-9x - 9y + 9z)) / 9.

    Takes only the values 0, 1/9 (on the boundary circle) and 2/9.
    """
    x, y, z = spherical_to_xyz(theta, phi)
    return (1.0 + sign(-9.0 * x - 9.0 * y + 9.0 * z)) / 9.0


# ---------------------------------------------------------------------------
# Beentjes
# ---------------------------------------------------------------------------

@register("beentjes", reference=_BEENTJES)
def beentjes_f3(theta, phi):
    """
    Smoothed hemisphere step (1 + tanh(-a x - a y + a z)) / a with a = 9.

    The continuous counterpart of :func:`beentjes_f4`.
    """
    alpha = 9.0
    x, y, z = spherical_to_xyz(theta, phi)
    return (1.0 + np.tanh(-alpha * x - alpha * y + alpha * z)) / alpha


@register("beentjes", reference=_BEENTJES)
def beentjes_f4(theta, phi):
    """Hemisphere step (1 - sign(x + y - z)) / 9, values in {0, 1/9, 2/9}."""
    alpha = 9.0
    x, y, z = spherical_to_xyz(theta, phi)
    return (1.0 - sign(x + y - z)) / alpha


@register("beentjes", reference=_BEENTJES)
def beentjes_f5(theta, phi):
    """Step across the plane pi*x + y = 0: (1 - sign(pi*x + y)) / 9."""
    alpha = 9.0
    x, y, z = spherical_to_xyz(theta, phi)
    return (1.0 - sign(math.pi * x + y)) / alpha


# ---------------------------------------------------------------------------
# Renka
# ---------------------------------------------------------------------------

@register("renka", reference=_RENKA)
def renka_f3(theta, phi):
    """|(1.25 + cos(5.4 y)) cos(6 z) / (6 + 6 (3 x - 1)^2)|"""
    x, y, z = spherical_to_xyz(theta, phi)
    return np.abs(
        (1.25 + np.cos(5.4 * y)) * np.cos(6.0 * z)
        / (6.0 + 6.0 * (3.0 * x - 1.0) ** 2)
    )


@register("renka", reference=_RENKA)
def renka_f4(theta, phi):
    """Gaussian bump centred at (1/2, 1/2, 1/2), exponent factor 81/16."""
    x, y, z = spherical_to_xyz(theta, phi)
    sharpness = 81.0 / 16.0
    r2 = (x - 0.5) ** 2 + (y - 0.5) ** 2 + (z - 0.5) ** 2
    return np.exp(-sharpness * r2) / 3.0


@register("renka", reference=_RENKA)
def renka_f5(theta, phi):
    """Sharper Gaussian bump centred at (1/2, 1/2, 1/2), factor 81/4."""
    x, y, z = spherical_to_xyz(theta, phi)
    sharpness = 81.0 / 4.0
    r2 = (x - 0.5) ** 2 + (y - 0.5) ** 2 + (z - 0.5) ** 2
    return np.exp(-sharpness * r2) / 3.0


# ---------------------------------------------------------------------------
# Reeger
# ---------------------------------------------------------------------------

@register("reegar", reference=_REEGER_BOUNDARIES)
def reegar_f2(theta, phi):
    """2/pi * atan(z)"""
    x, y, z = spherical_to_xyz(theta, phi)
    return 2.0 / math.pi * np.arctan(z)


@register("reegar", reference=_REEGER_SPHERE)
def reegar_f3(theta, phi):
    """
    Steep arctangent ramp around the polar cap z = 0.9999.

    (pi/2 + atan(300 (z - 0.9999))) / pi rises from ~0 to ~1 within a
    narrow band near the north pole.
    """
    x, y, z = spherical_to_xyz(theta, phi)
    steepness = 300.0
    z0 = 9999.0 / 10000.0
    return (math.pi / 2.0 + np.arctan(steepness * (z - z0))) / math.pi


@register("reegar", reference=_REEGER_BOUNDARIES)
def reegar_f4(theta, phi):
    """Arctangent ramp 1/2 + atan(1000 (z - 0.9999 / (2 sqrt 2))) / pi."""
    x, y, z = spherical_to_xyz(theta, phi)
    steepness = 1000.0
    z0 = 9999.0 / (10000.0 * 2.0 * math.sqrt(2.0))
    return 0.5 + np.arctan(steepness * (z - z0)) / math.pi


# ---------------------------------------------------------------------------
# Bellet
# ---------------------------------------------------------------------------

@register("bellet", reference=_BELLET)
def bellet_f4(theta, phi):
    """Cap indicator (1 + sign(x - 1/2)) / 2."""
    x, y, z = spherical_to_xyz(theta, phi)
    return 0.5 * (1.0 + sign(x - 0.5))


# ---------------------------------------------------------------------------
# Franke
# ---------------------------------------------------------------------------

@register("franke", reference="Franke (1979), extended to three dimensions")
def franke(theta, phi):
    """
    Franke's function evaluated on the sphere.

    Sum of three Gaussian peaks and one Gaussian trough with fixed
    centres and weights. The second term keeps Franke's linear (not
    squared) y and z dependence.
    """
    x, y, z = spherical_to_xyz(theta, phi)
    X, Y, Z = 9.0 * x, 9.0 * y, 9.0 * z
    return (
        0.75 * np.exp(
            -(X - 2.0) ** 2 / 4.0 - (Y - 2.0) ** 2 / 4.0 - (Z - 2.0) ** 2 / 4.0
        )
        + 0.75 * np.exp(-(X + 1.0) ** 2 / 49.0 - (Y + 1.0) / 10.0 - (Z + 1.0) / 10.0)
        + 0.5 * np.exp(
            -(X - 7.0) ** 2 / 4.0 - (Y - 3.0) ** 2 / 4.0 - (Z - 5.0) ** 2 / 4.0
        )
        - 0.2 * np.exp(-(X - 4.0) ** 2 - (Y - 7.0) ** 2 - (Z - 5.0) ** 2)
    )


# ---------------------------------------------------------------------------
# Custom functions
# ---------------------------------------------------------------------------

@register("custom", reference=_CUSTOM)
def cf_f1(theta, phi):
    """|sin(cos(2 phi) - 2 theta)| + |cos(2 theta)|"""
    theta, phi = as_float(theta, phi)
    return np.abs(np.sin(np.cos(2.0 * phi) - 2.0 * theta)) + np.abs(np.cos(2.0 * theta))


@register("custom", reference=_CUSTOM)
def cf_f2(theta, phi):
    """|sin(2 phi - theta)| + |cos(2 theta)|"""
    theta, phi = as_float(theta, phi)
    return np.abs(np.sin(2.0 * phi - theta)) + np.abs(np.cos(2.0 * theta))


@register("custom", reference=_CUSTOM)
def cf_f3(theta, phi):
    """1 + sin(5 phi) / 5, independent of theta."""
    theta, phi = as_float(theta, phi)
    # theta only sets the output shape
    _, phi = np.broadcast_arrays(theta, phi)
    return 1.0 + np.sin(5.0 * phi) / 5.0


@register("custom", reference=_CUSTOM)
def cf_f4(theta, phi):
    """1 + cos(5 phi) / 5 + sin(5 theta)"""
    theta, phi = as_float(theta, phi)
    return 1.0 + np.cos(5.0 * phi) / 5.0 + np.sin(5.0 * theta)


@register("custom", reference=_CUSTOM)
def cf_f5(theta, phi):
    """
    Multi-feature surface mixing exponential lobes with a fast ridge.

    Three exponentials of p . a for fixed directions a (p the Cartesian
    point), a growing exp(theta) term, and 4|cos(45 theta + 45 phi)|
    which folds a high-frequency oscillation into sharp ridges.
    """
    theta, phi = as_float(theta, phi)
    x, y, z = spherical_to_xyz(theta, phi)
    return (
        np.exp(2.0 * dot(x, y, z, -1.0, -1.0, 0.8))
        + np.exp(1.5 * dot(x, y, z, 1.0, -1.0, 0.8))
        + np.exp(theta)
        + 10.0 * np.exp(dot(x, y, z, 0.8, 0.3, -4.0) - 1.0)
        + 4.0 * np.abs(np.cos(45.0 * theta + 45.0 * phi))
    )


@register("custom", reference=_CUSTOM)
def cf_f6(theta, phi):
    """1 + 0.5 cos(theta) + 0.3 cos(2 phi)"""
    theta, phi = as_float(theta, phi)
    return 1.0 + 0.5 * np.cos(theta) + 0.3 * np.cos(2.0 * phi)


@register("custom", reference=_CUSTOM)
def cf_f7(theta, phi):
    """|cos(3 x) + sin(2 y) + 0.5 z^2|"""
    x, y, z = spherical_to_xyz(theta, phi)
    return np.abs(np.cos(3.0 * x) + np.sin(2.0 * y) + 0.5 * z * z)


@register("custom", reference=_CUSTOM)
def cf_f8(theta, phi):
    """|sin(2 x) cos(3 y) + 0.5 z^2 + 0.3 sin(5 x) cos(4 z)|"""
    x, y, z = spherical_to_xyz(theta, phi)
    return np.abs(
        np.sin(2.0 * x) * np.cos(3.0 * y)
        + 0.5 * z * z
        + 0.3 * np.sin(5.0 * x) * np.cos(4.0 * z)
    )


@register("custom", reference=_CUSTOM)
def cf_f9(theta, phi):
    """|x^2 - y^2 + 0.5 x z - 0.3 y z|"""
    x, y, z = spherical_to_xyz(theta, phi)
    return np.abs(x * x - y * y + 0.5 * x * z - 0.3 * y * z)


@register("custom", reference=_CUSTOM)
def cf_f10(theta, phi):
    """
    Latitudinal oscillation on a constant offset.

    x^2 + y^2 + z^2 + 5 + 2.5 cos((theta - pi) / 2) sin(16 theta); the
    first three terms sum to one on the sphere.
    """
    theta, phi = as_float(theta, phi)
    x, y, z = spherical_to_xyz(theta, phi)
    return (
        x * x + y * y + z * z + 5.0
        + 2.5 * np.cos((theta - math.pi) / 2.0) * np.sin(16.0 * theta)
    )


@register("custom", reference=_CUSTOM)
def cf_f11(theta, phi):
    """|sin(10 x) cos(12 y) sin(15 z) + cos(20 x)|"""
    x, y, z = spherical_to_xyz(theta, phi)
    return np.abs(
        np.sin(10.0 * x) * np.cos(12.0 * y) * np.sin(15.0 * z) + np.cos(20.0 * x)
    )


@register("custom", reference=_CUSTOM)
def cf_f12(theta, phi):
    """sin(10 x) + cos(12 y) - sin(15 z) + 0.2 cos(18 x) + 3"""
    x, y, z = spherical_to_xyz(theta, phi)
    return (
        np.sin(10.0 * x) + np.cos(12.0 * y) - np.sin(15.0 * z)
        + 0.2 * np.cos(18.0 * x) + 3.0
    )


@register("custom", reference=_CUSTOM)
def cf_f13(theta, phi):
    """exp(-sin(5 x) - cos(6 y)) + 0.3 sin(10 z)"""
    x, y, z = spherical_to_xyz(theta, phi)
    return np.exp(-np.sin(5.0 * x) - np.cos(6.0 * y)) + 0.3 * np.sin(10.0 * z)


@register("custom", reference=_CUSTOM)
def cf_f14(theta, phi):
    """exp(-2 (x^2 + y^2)) sin(4 z), odd in z."""
    x, y, z = spherical_to_xyz(theta, phi)
    return np.exp(-2.0 * (x * x + y * y)) * np.sin(4.0 * z)


@register("custom", reference=_CUSTOM, aliases=("cf_15",))
def cf_f15(theta, phi):
    """(x^2 + y^2) exp(-3 z^2)"""
    x, y, z = spherical_to_xyz(theta, phi)
    return (x * x + y * y) * np.exp(-3.0 * z * z)
