"""Road-geometry segments: normalized spiral evaluation, points and bounding boxes."""

from roadgeom.geometry.base import InvalidGeometryError, RoadGeometry
from roadgeom.geometry.bbox import ExtremumRoot, compute_bbox
from roadgeom.geometry.fresnel import evaluate, fresnel
from roadgeom.geometry.models import (
    Box2D,
    ConstantCurvature,
    LinearCurvature,
    Point2D,
    SpiralParams,
)
from roadgeom.geometry.spiral import Spiral

__all__ = [
    "Box2D",
    "ConstantCurvature",
    "ExtremumRoot",
    "InvalidGeometryError",
    "LinearCurvature",
    "Point2D",
    "RoadGeometry",
    "Spiral",
    "SpiralParams",
    "compute_bbox",
    "evaluate",
    "fresnel",
]
