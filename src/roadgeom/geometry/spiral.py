"""Euler spiral (clothoid) road-geometry segment.

A segment is described by its start pose ``(s0, x0, y0, hdg0)``, its
arclength ``length`` and the curvature at both ends.  Curvature varies
linearly in between.  Points are computed by embedding the segment in the
canonical spiral of the same curvature rate (see
:mod:`roadgeom.geometry.fresnel`) at the arclength whose canonical curvature
equals ``curv_start``, then rotating and translating onto the start pose.
Only differences of canonical-spiral state are used, so the evaluator's
absolute error at large parameters cancels to first order.

Segments with equal end curvatures, or with a curvature change too small for
the evaluator to resolve, skip the embedding and use the direct line/arc
formulas.
"""

from __future__ import annotations

import logging
import math

from pydantic import ValidationError

from roadgeom.config.settings import GeometrySettings
from roadgeom.geometry.base import InvalidGeometryError
from roadgeom.geometry.bbox import compute_bbox
from roadgeom.geometry.fresnel import evaluate
from roadgeom.geometry.models import (
    Box2D,
    ConstantCurvature,
    CurvatureProfile,
    LinearCurvature,
    Point2D,
    SpiralParams,
    curvature_profile,
)

_logger = logging.getLogger(__name__)


class Spiral:
    """Immutable spiral segment exposing point and bounding-box queries.

    Args:
        s0: Arclength at which the segment begins.
        x0: X coordinate at ``s0``.
        y0: Y coordinate at ``s0``.
        hdg0: Heading at ``s0`` in radians.
        length: Arclength extent, must be > 0.
        curv_start: Signed curvature at ``s0``.
        curv_end: Signed curvature at ``s0 + length``.
        settings: Evaluation settings; defaults to :class:`GeometrySettings()`.

    Raises:
        InvalidGeometryError: If ``length <= 0`` or any value is not finite.
    """

    def __init__(
        self,
        s0: float,
        x0: float,
        y0: float,
        hdg0: float,
        length: float,
        curv_start: float,
        curv_end: float,
        settings: GeometrySettings | None = None,
    ) -> None:
        try:
            params = SpiralParams(
                s0=s0,
                x0=x0,
                y0=y0,
                hdg0=hdg0,
                length=length,
                curv_start=curv_start,
                curv_end=curv_end,
            )
        except ValidationError as exc:
            raise InvalidGeometryError(f"Invalid spiral segment: {exc}") from exc

        self._params = params
        self._settings = settings or GeometrySettings()
        self._curvature: CurvatureProfile = curvature_profile(
            params.curv_start, params.curv_end, params.length
        )

        if isinstance(self._curvature, LinearCurvature):
            lin = self._curvature
            # Canonical-spiral state at the segment start.
            self._start_state = evaluate(lin.s_start, lin.c_dot)
            _logger.debug(
                "spiral at s0=%g: linear curvature, c_dot=%g, s_start=%g",
                params.s0,
                lin.c_dot,
                lin.s_start,
            )
        else:
            self._start_state = (0.0, 0.0, 0.0)
            _logger.debug(
                "spiral at s0=%g: constant curvature %g", params.s0, self._curvature.curvature
            )

    @classmethod
    def from_params(cls, params: SpiralParams, settings: GeometrySettings | None = None) -> Spiral:
        """Build from :class:`SpiralParams`, e.g. the result of ``SpiralParams.from_record``."""
        return cls(**params.model_dump(), settings=settings)

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def params(self) -> SpiralParams:
        return self._params

    @property
    def curvature(self) -> CurvatureProfile:
        """Curvature variant chosen at construction."""
        return self._curvature

    @property
    def s0(self) -> float:
        return self._params.s0

    @property
    def origin(self) -> Point2D:
        return Point2D(self._params.x0, self._params.y0)

    @property
    def hdg0(self) -> float:
        return self._params.hdg0

    @property
    def length(self) -> float:
        return self._params.length

    @property
    def curv_start(self) -> float:
        return self._params.curv_start

    @property
    def curv_end(self) -> float:
        return self._params.curv_end

    @property
    def start_curvature(self) -> float:
        """Curvature at ``s0`` as evaluated; the mean curvature for a constant fallback."""
        if isinstance(self._curvature, ConstantCurvature):
            return self._curvature.curvature
        return self._params.curv_start

    @property
    def c_dot(self) -> float:
        """Curvature rate of change; 0.0 for constant curvature."""
        if isinstance(self._curvature, LinearCurvature):
            return self._curvature.c_dot
        return 0.0

    @property
    def s_start(self) -> float | None:
        """Canonical-spiral arclength at ``s0``; None for constant curvature."""
        if isinstance(self._curvature, LinearCurvature):
            return self._curvature.s_start
        return None

    @property
    def s_end(self) -> float | None:
        """Canonical-spiral arclength at ``s0 + length``; None for constant curvature."""
        if isinstance(self._curvature, LinearCurvature):
            return self._curvature.s_end
        return None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_point(self, s: float, t: float = 0.0) -> Point2D:
        """Point at road arclength *s*, offset *t* to the left of the travel direction.

        *s* outside ``[s0, s0 + length]`` extrapolates the same curve.
        """
        dx, dy, a, rot = self._local_state(s)

        dx -= t * math.sin(a)
        dy += t * math.cos(a)

        cos_r = math.cos(rot)
        sin_r = math.sin(rot)
        return Point2D(
            x=cos_r * dx - sin_r * dy + self._params.x0,
            y=sin_r * dx + cos_r * dy + self._params.y0,
        )

    def get_bbox(self) -> Box2D:
        """Tight axis-aligned bounding box of the centerline over the segment."""
        return compute_bbox(self, self._settings.bbox_padding)

    def get_heading(self, s: float) -> float:
        """Heading in radians at road arclength *s*."""
        u = s - self._params.s0
        return self._params.hdg0 + self.start_curvature * u + 0.5 * self.c_dot * u * u

    def get_curvature(self, s: float) -> float:
        """Signed curvature at road arclength *s*."""
        return self.start_curvature + self.c_dot * (s - self._params.s0)

    def get_grad(self, s: float) -> Point2D:
        """Unit tangent at road arclength *s*."""
        hdg = self.get_heading(s)
        return Point2D(math.cos(hdg), math.sin(hdg))

    def end_pose(self) -> tuple[Point2D, float]:
        """Return ``(point, heading)`` at ``s0 + length``."""
        s_end = self._params.s0 + self._params.length
        return self.get_point(s_end), self.get_heading(s_end)

    def sample(self, step: float | None = None, t: float = 0.0) -> list[Point2D]:
        """Uniformly spaced points over ``[s0, s0 + length]``, both ends included.

        The spacing is the largest value not exceeding *step* that divides the
        segment evenly; *step* defaults to ``settings.sample_step``.

        Raises:
            ValueError: If *step* is not a positive finite number.
        """
        if step is None:
            step = self._settings.sample_step
        if not (math.isfinite(step) and step > 0):
            raise ValueError(f"step must be a positive finite number, got {step!r}")

        n = max(1, math.ceil(self._params.length / step))
        s0 = self._params.s0
        return [self.get_point(s0 + self._params.length * i / n, t) for i in range(n + 1)]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _local_state(self, s: float) -> tuple[float, float, float, float]:
        """Displacement from the start, local heading and frame rotation at *s*.

        Returns ``(dx, dy, a, rot)``: ``(dx, dy)`` and ``a`` live in a frame
        that ``rot`` turns onto the road's coordinate system.
        """
        u = s - self._params.s0
        curvature = self._curvature

        if isinstance(curvature, ConstantCurvature):
            k = curvature.curvature
            if k == 0.0:
                return u, 0.0, 0.0, self._params.hdg0
            a = k * u
            half = math.sin(0.5 * a)
            return math.sin(a) / k, 2.0 * half * half / k, a, self._params.hdg0

        x0_spiral, y0_spiral, a0_spiral = self._start_state
        xs, ys, a = evaluate(u + curvature.s_start, curvature.c_dot)
        return xs - x0_spiral, ys - y0_spiral, a, self._params.hdg0 - a0_spiral

    def __repr__(self) -> str:
        p = self._params
        return (
            f"Spiral(s0={p.s0}, x0={p.x0}, y0={p.y0}, hdg0={p.hdg0}, length={p.length}, "
            f"curv_start={p.curv_start}, curv_end={p.curv_end})"
        )
