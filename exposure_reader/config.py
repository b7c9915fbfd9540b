"""Configuration settings for the exposure metadata reader.

This module centralizes configuration values and settings
for easy maintenance and extension.
"""

from typing import Tuple


class Config:
    """Application configuration."""

    # Application info
    APP_NAME = "Exposure Metadata Reader"
    VERSION = "1.0.0"

    # Logging
    LOGGER_NAME = "exposure_reader"
    LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # CSV input
    CSV_ENCODING = "utf-8-sig"  # strips a leading BOM, plain UTF-8 reads unchanged
    COLUMNS: Tuple[str, ...] = (
        "lens_name",
        "focal_length",
        "date",
        "iso",
        "aperture",
        "shutter_speed",
        "exposure_compensation",
    )

    # Exposure compensation notation, e.g. "1 1/3"
    COMPENSATION_SEPARATOR = " "
    MAX_COMPENSATION_TERMS = 2
