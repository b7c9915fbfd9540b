"""Exposure record building.

This module turns a decoded CSV row into a validated exposure record.
"""

import logging
from typing import Optional

from ..models.schema import ExposureRecord, RawRow
from ..normalization.normalizer import ExposureCompensationParser
from ..validation.validator import ShutterSpeedValidator

logger = logging.getLogger(__name__)


class ExposureRecordBuilder:
    """
    Builds ExposureRecord instances from raw rows.

    The shutter speed is validated first, then the exposure compensation
    is parsed; the first failure is raised. Lens name, focal length, date,
    ISO and aperture are copied as they are.
    """

    def __init__(
        self,
        validator: Optional[ShutterSpeedValidator] = None,
        parser: Optional[ExposureCompensationParser] = None
    ):
        """
        Initialize the builder.

        Args:
            validator: Shutter speed validator (default: new instance)
            parser: Exposure compensation parser (default: new instance)
        """
        self.validator = validator or ShutterSpeedValidator()
        self.parser = parser or ExposureCompensationParser()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def build(self, raw: RawRow) -> ExposureRecord:
        """
        Build a validated record from one raw row.

        Args:
            raw: Decoded CSV row

        Returns:
            Validated ExposureRecord

        Raises:
            InvalidShutterSpeed: If the shutter speed does not follow the pattern
            InvalidExposureCompensation: If the compensation has too many terms
            ExposureCompensationParseError: If a compensation term is not a number
        """
        shutter_speed = self.validator.validate(raw.shutter_speed)
        exposure_compensation = self.parser.parse(raw.exposure_compensation)

        record = ExposureRecord(
            lens_name=raw.lens_name,
            focal_length=raw.focal_length,
            date=raw.date,
            iso=raw.iso,
            aperture=raw.aperture,
            shutter_speed=shutter_speed,
            exposure_compensation=exposure_compensation,
        )

        self.logger.debug(f"Built record: {record.lens_name} {record.shutter_speed}")
        return record
