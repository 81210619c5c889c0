"""Shared contract of road-geometry kinds."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from roadgeom.geometry.models import Box2D, Point2D


class InvalidGeometryError(ValueError):
    """Raised when a geometry record cannot describe a valid segment."""


@runtime_checkable
class RoadGeometry(Protocol):
    """
    Responsibilities:
      • Map (arclength, lateral offset) to a planar point.
      • Bound the centerline over the segment's arclength range.
    Arclength ``s`` is measured in the parent road's coordinates, starting at ``s0``.
    """

    s0: float
    length: float

    def get_point(self, s: float, t: float = 0.0) -> Point2D: ...
    def get_bbox(self) -> Box2D: ...
