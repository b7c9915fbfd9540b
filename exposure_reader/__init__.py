"""Exposure metadata reader.

Reads CSV logs of photographic exposure settings into validated records.
"""

from .building.builder import ExposureRecordBuilder
from .exceptions import (
    ExposureCompensationParseError,
    FailedToParse,
    InvalidCSV,
    InvalidExposureCompensation,
    InvalidShutterSpeed,
    MetadataError,
)
from .models.schema import ExposureRecord, RawRow
from .normalization.normalizer import ExposureCompensationParser
from .reader import MetadataReader, read_metadata
from .utils.logger import setup_logger
from .validation.validator import ShutterSpeedValidator

__version__ = "1.0.0"

__all__ = [
    "read_metadata",
    "MetadataReader",
    "ExposureRecord",
    "RawRow",
    "ExposureRecordBuilder",
    "ShutterSpeedValidator",
    "ExposureCompensationParser",
    "MetadataError",
    "InvalidCSV",
    "FailedToParse",
    "InvalidShutterSpeed",
    "ExposureCompensationParseError",
    "InvalidExposureCompensation",
    "setup_logger",
]
