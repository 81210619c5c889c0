"""Geometry settings loaded from the environment (and an optional ``.env`` file).

Recognised variables:

* ``ROADGEOM_BBOX_PADDING`` — extra heading periods searched on each side of
  the swept range when locating bounding-box extrema.
* ``ROADGEOM_SAMPLE_STEP`` — default arclength step for uniform sampling, metres.
* ``ROADGEOM_LOG_LEVEL`` — level applied by :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

_ENV_PREFIX = "ROADGEOM_"


class GeometrySettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    bbox_padding: int = Field(default=1, ge=0)
    sample_step: float = Field(default=1.0, gt=0, allow_inf_nan=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> GeometrySettings:
        """Build settings from ``ROADGEOM_*`` variables; unset ones keep their defaults.

        Raises:
            ValueError: If a variable holds a value the model rejects.
        """
        load_dotenv(dotenv_path)
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = os.environ.get(_ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()
        return cls(**values)


def configure_logging(settings: GeometrySettings | None = None) -> None:
    """Apply the configured log level to the ``roadgeom`` logger hierarchy."""
    settings = settings or GeometrySettings()
    logger = logging.getLogger("roadgeom")
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
