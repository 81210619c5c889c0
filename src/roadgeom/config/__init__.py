"""Runtime configuration for road-geometry evaluation."""

from roadgeom.config.settings import GeometrySettings, configure_logging

__all__ = ["GeometrySettings", "configure_logging"]
