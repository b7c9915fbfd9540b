"""Pydantic models for exposure metadata.

This module defines the raw row shape decoded from the CSV input and the
validated exposure record handed back to callers.
"""

import logging
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..validation.patterns import COMPILED_PATTERNS

logger = logging.getLogger(__name__)


class RawRow(BaseModel):
    """
    One CSV row decoded into column types, before domain validation.

    Attributes:
        lens_name: Lens model name
        focal_length: Focal length in millimeters
        date: Capture date, kept as written
        iso: ISO sensitivity
        aperture: Aperture f-number
        shutter_speed: Shutter speed text, e.g. "1/250" or '2"'
        exposure_compensation: Compensation text, e.g. "1 1/3" (optional)
    """

    lens_name: str = Field(..., description="Lens model name")
    focal_length: float = Field(..., description="Focal length in mm")
    date: str = Field(..., description="Capture date text")
    iso: int = Field(..., description="ISO sensitivity")
    aperture: float = Field(..., description="Aperture f-number")
    shutter_speed: str = Field(..., description="Shutter speed text")
    exposure_compensation: Optional[str] = Field(None, description="Exposure compensation text")

    @field_validator('exposure_compensation', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        """Treat an empty cell as no compensation recorded."""
        if v == "":
            return None
        return v


class ExposureRecord(BaseModel):
    """
    Validated exposure settings of a single photograph.

    The shutter speed always contains a 1/N or N" notation and the
    exposure compensation, when present, is already resolved to stops.

    Attributes:
        lens_name: Lens model name
        focal_length: Focal length in millimeters
        date: Capture date, kept as written
        iso: ISO sensitivity
        aperture: Aperture f-number
        shutter_speed: Shutter speed text
        exposure_compensation: Exposure compensation in stops (optional)
    """

    model_config = ConfigDict(frozen=True)

    lens_name: str = Field(..., description="Lens model name")
    focal_length: float = Field(..., description="Focal length in mm")
    date: str = Field(..., description="Capture date text")
    iso: int = Field(..., description="ISO sensitivity")
    aperture: float = Field(..., description="Aperture f-number")
    shutter_speed: str = Field(..., description="Shutter speed text")
    exposure_compensation: Optional[float] = Field(None, description="Exposure compensation in stops")

    @property
    def shutter_speed_seconds(self) -> Optional[float]:
        """
        Shutter speed as decimal seconds.

        Returns:
            1/N for "1/N", N for 'N"', or None if neither can be derived

        Example:
            >>> record.shutter_speed  # "1/250"
            >>> record.shutter_speed_seconds
            0.004
        """
        fraction_pattern, seconds_pattern = COMPILED_PATTERNS['shutter_speed']

        match = fraction_pattern.search(self.shutter_speed)
        if match:
            denominator = int(match.group(1))
            return 1 / denominator if denominator else None

        match = seconds_pattern.search(self.shutter_speed)
        if match:
            return float(match.group(1))

        return None

    @property
    def taken_at(self) -> Optional[datetime]:
        """Capture date interpreted as a datetime, or None if unreadable."""
        if not self.date:
            return None

        try:
            return date_parser.parse(self.date)
        except (ValueError, OverflowError):
            logger.warning(f"Could not parse date: {self.date}")
            return None
