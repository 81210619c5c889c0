"""Road-geometry data structures: points, boxes, segment parameters and curvature variants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from roadgeom.geometry.fresnel import SATURATION_ARGUMENT, spiral_scale

_logger = logging.getLogger(__name__)

# Attribute names of a spiral record as they appear in the road description.
_RECORD_KEYS = {
    "s": "s0",
    "x": "x0",
    "y": "y0",
    "hdg": "hdg0",
    "length": "length",
    "curvStart": "curv_start",
    "curvEnd": "curv_end",
}


@dataclass(frozen=True)
class Point2D:
    """A point (or vector) in the road's planar coordinate system, metres."""

    x: float
    y: float


@dataclass(frozen=True)
class Box2D:
    """Axis-aligned rectangle spanned by its ``min`` and ``max`` corners."""

    min: Point2D
    max: Point2D

    def contains(self, pt: Point2D, tol: float = 0.0) -> bool:
        """Return True if *pt* lies inside the box, widened by *tol* on every side."""
        return (
            self.min.x - tol <= pt.x <= self.max.x + tol
            and self.min.y - tol <= pt.y <= self.max.y + tol
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


class SpiralParams(BaseModel):
    """Validated construction input of a spiral segment.

    Rejects non-finite values and non-positive lengths at construction, so a
    bad record never reaches the evaluation code.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    s0: float
    """Arclength at which the segment begins, in the parent road's coordinates."""

    x0: float
    y0: float

    hdg0: float
    """Heading at ``s0`` in radians."""

    length: float = Field(gt=0)

    curv_start: float
    """Signed curvature at ``s0`` (positive turns left)."""

    curv_end: float
    """Signed curvature at ``s0 + length``."""

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> SpiralParams:
        """Build from a parsed ``<geometry>``/``<spiral>`` attribute mapping.

        Keys follow the road description's attribute names (``s``, ``x``,
        ``y``, ``hdg``, ``length``, ``curvStart``, ``curvEnd``); string values
        are coerced to floats by validation.
        """
        missing = [k for k in _RECORD_KEYS if k not in record]
        if missing:
            raise ValueError(f"Spiral record is missing attributes: {', '.join(missing)}")
        return cls(**{field: record[key] for key, field in _RECORD_KEYS.items()})


# ---------------------------------------------------------------------------
# Curvature variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConstantCurvature:
    """Curvature does not change along the segment: a straight line or circular arc."""

    curvature: float
    kind: Literal["constant"] = "constant"


@dataclass(frozen=True)
class LinearCurvature:
    """Curvature changes linearly from ``curv_start`` to ``curv_end``.

    ``s_start`` / ``s_end`` are the canonical-spiral arclengths whose curvature
    equals the segment's boundary curvatures.
    """

    curv_start: float
    curv_end: float
    c_dot: float
    """Curvature rate of change, 1/m²."""

    s_start: float
    s_end: float
    kind: Literal["linear"] = "linear"

    @classmethod
    def between(cls, curv_start: float, curv_end: float, length: float) -> LinearCurvature:
        c_dot = (curv_end - curv_start) / length
        return cls(
            curv_start=curv_start,
            curv_end=curv_end,
            c_dot=c_dot,
            s_start=curv_start / c_dot,
            s_end=curv_end / c_dot,
        )


CurvatureProfile = ConstantCurvature | LinearCurvature


def curvature_profile(curv_start: float, curv_end: float, length: float) -> CurvatureProfile:
    """Pick the curvature variant for a segment; equal end curvatures never divide by zero.

    A spiral whose embedding reaches past the Fresnel saturation argument has
    a curvature change the evaluator cannot resolve.  It is returned as
    constant curvature at the mean of both ends, the arc that is the limit of
    the spiral as the rate goes to zero.
    """
    # A curvature difference too small to survive the division is also constant.
    if curv_start == curv_end or (curv_end - curv_start) / length == 0.0:
        return ConstantCurvature(curvature=curv_start)

    linear = LinearCurvature.between(curv_start, curv_end, length)
    reach = max(abs(linear.s_start), abs(linear.s_end)) / spiral_scale(linear.c_dot)
    if reach > SATURATION_ARGUMENT:
        mean = 0.5 * (curv_start + curv_end)
        _logger.warning(
            "curvature %g -> %g over %g m reaches Fresnel argument %.0f beyond %.0f; "
            "evaluating as constant curvature %g",
            curv_start,
            curv_end,
            length,
            reach,
            SATURATION_ARGUMENT,
            mean,
        )
        return ConstantCurvature(curvature=mean)
    return linear
