"""Normalized spiral evaluator.

Computes position and heading along the canonical Euler spiral: curvature 0,
heading 0 and position at the origin for arclength 0, curvature ``k * s`` at
arclength ``s``.  Positions come from the Fresnel integrals

    C(z) = ∫₀ᶻ cos(π u² / 2) du,    S(z) = ∫₀ᶻ sin(π u² / 2) du

as computed by :func:`scipy.special.fresnel` (CEPHES rational approximations).

Precision: about 1e-15 relative error below ``|z| = 36974``.  Past that
argument only the leading asymptotic term is kept, so both integrals are
known to within ``1 / (π z)`` ≈ 8.6e-6 of 0.5, i.e. up to
``8.6e-6 * sqrt(π / |k|)`` metres on the spiral.  Segments that would be
evaluated there are treated as constant curvature instead (see
:func:`roadgeom.geometry.models.curvature_profile`).
"""

from __future__ import annotations

import math

from scipy import special

SATURATION_ARGUMENT = 36974.0
"""Fresnel argument beyond which C and S are only approximated asymptotically."""


def fresnel(z: float) -> tuple[float, float]:
    """Return ``(C(z), S(z))``, the normalized Fresnel cosine and sine integrals.

    Both are odd functions of *z*.
    """
    ss, cc = special.fresnel(z)
    return float(cc), float(ss)


def spiral_scale(k: float) -> float:
    """Length scale ``sqrt(π / |k|)`` mapping spiral arclength to the Fresnel argument."""
    return math.sqrt(math.pi / abs(k))


def evaluate(s: float, k: float) -> tuple[float, float, float]:
    """Evaluate the canonical spiral with curvature rate *k* at arclength *s*.

    Args:
        s: Arclength along the canonical spiral (any sign).
        k: Curvature rate of change, 1/m².  ``0`` gives the straight line
            along the x-axis.

    Returns:
        ``(x, y, heading)`` with heading ``k * s² / 2`` in radians.
    """
    if k == 0.0:
        return s, 0.0, 0.0

    a = spiral_scale(k)
    cc, ss = fresnel(s / a)
    x = cc * a
    y = ss * a
    if k < 0.0:
        y = -y

    return x, y, 0.5 * k * s * s
