"""Data models for exposure metadata."""

from .schema import RawRow, ExposureRecord

__all__ = ["RawRow", "ExposureRecord"]
