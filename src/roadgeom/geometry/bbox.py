"""Analytic bounding box of a segment whose heading is quadratic in arclength.

With ``u = s - s0`` the heading is

    a(u) = hdg0 + curv_start * u + c_dot * u² / 2

so ``dx/ds = cos(a)`` vanishes where ``a = π/2 + nπ`` and ``dy/ds = sin(a)``
vanishes where ``a = nπ``.  Each condition is a quadratic in ``u`` with up to
two real roots.  The box is the min/max over those roots and the endpoints.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import TYPE_CHECKING

from roadgeom.geometry.models import Box2D, Point2D

if TYPE_CHECKING:
    from roadgeom.geometry.spiral import Spiral

_logger = logging.getLogger(__name__)


class ExtremumRoot(Enum):
    """Closed-form root formulas: coordinate axis and quadratic-formula branch."""

    X_PLUS = ("x", 1.0)
    X_MINUS = ("x", -1.0)
    Y_PLUS = ("y", 1.0)
    Y_MINUS = ("y", -1.0)

    @property
    def axis(self) -> str:
        return self.value[0]

    @property
    def branch(self) -> float:
        return self.value[1]

    def target_heading(self, n: int) -> float:
        """Heading at which this axis' coordinate is stationary, for period *n*."""
        if self.axis == "x":
            return 0.5 * math.pi + n * math.pi
        return n * math.pi


# ---------------------------------------------------------------------------
# Root formulas
# ---------------------------------------------------------------------------


def extremum_offset(
    root: ExtremumRoot, n: int, hdg0: float, curv_start: float, c_dot: float
) -> float | None:
    """Arclength offset ``u`` (from ``s0``) where the heading hits ``root.target_heading(n)``.

    Returns None when the formula has no real solution: a negative
    discriminant, or a heading that never changes.  With ``c_dot == 0`` the
    heading is linear and only the ``PLUS`` branches carry the single root.
    """
    delta = root.target_heading(n) - hdg0

    if c_dot == 0.0:
        if curv_start == 0.0 or root.branch < 0:
            return None
        return delta / curv_start

    disc = curv_start * curv_start + 2.0 * c_dot * delta
    if disc < 0.0:
        return None
    return (root.branch * math.sqrt(disc) - curv_start) / c_dot


def heading_range(hdg0: float, curv_start: float, c_dot: float, length: float) -> tuple[float, float]:
    """Return ``(min, max)`` of the heading over ``u ∈ [0, length]``."""

    def heading(u: float) -> float:
        return hdg0 + curv_start * u + 0.5 * c_dot * u * u

    values = [heading(0.0), heading(length)]
    if c_dot != 0.0:
        u_vertex = -curv_start / c_dot
        if 0.0 < u_vertex < length:
            values.append(heading(u_vertex))
    return min(values), max(values)


def _period_range(root: ExtremumRoot, a_min: float, a_max: float, padding: int) -> range:
    """Integers ``n`` whose target heading can fall within ``[a_min, a_max]``."""
    shift = 0.5 * math.pi if root.axis == "x" else 0.0
    n_lo = math.floor((a_min - shift) / math.pi) - padding
    n_hi = math.ceil((a_max - shift) / math.pi) + padding
    return range(n_lo, n_hi + 1)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extremum_arclengths(
    s0: float,
    length: float,
    hdg0: float,
    curv_start: float,
    c_dot: float,
    padding: int = 1,
) -> list[float]:
    """Return the segment endpoints plus every interior arclength where x or y is stationary."""
    a_min, a_max = heading_range(hdg0, curv_start, c_dot, length)

    candidates = [s0, s0 + length]
    for root in ExtremumRoot:
        for n in _period_range(root, a_min, a_max, padding):
            u = extremum_offset(root, n, hdg0, curv_start, c_dot)
            if u is None or not math.isfinite(u) or u < 0.0 or u > length:
                continue
            candidates.append(s0 + u)
    return candidates


def compute_bbox(geometry: Spiral, padding: int = 1) -> Box2D:
    """Bounding box of *geometry*'s centerline over ``[s0, s0 + length]``.

    Args:
        geometry: Segment providing its start pose, curvature terms and
            ``get_point``.
        padding: Extra periods ``n`` searched on each side of the swept
            heading range, covering rounding at the boundaries.
    """
    s_values = extremum_arclengths(
        geometry.s0,
        geometry.length,
        geometry.hdg0,
        geometry.start_curvature,
        geometry.c_dot,
        padding,
    )
    _logger.debug("bbox: %d candidate arclengths for segment at s0=%g", len(s_values), geometry.s0)

    points = [geometry.get_point(s, 0.0) for s in s_values]
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Box2D(min=Point2D(min(xs), min(ys)), max=Point2D(max(xs), max(ys)))
