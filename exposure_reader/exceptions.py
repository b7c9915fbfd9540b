"""Exception classes for exposure metadata reading.

Every failure of a read is one of the classes below. Each keeps the raw
text or the wrapped error it was raised for, so callers can branch on the
kind and still build a readable diagnostic.
"""

from pathlib import Path
from typing import Optional, Union


class MetadataError(Exception):
    """Base class for all read errors."""
    pass


class InvalidCSV(MetadataError):
    """The CSV source could not be opened or its header could not be read."""

    def __init__(self, path: Union[str, Path], source: Exception):
        self.path = path
        self.source = source
        super().__init__(f"Failed to read CSV {path}: {source!r}")


class FailedToParse(MetadataError):
    """A row could not be decoded into the expected column types."""

    def __init__(self, row_number: Optional[int], source: Exception):
        self.row_number = row_number
        self.source = source
        location = f" {row_number}" if row_number is not None else ""
        super().__init__(f"Failed to deserialize the row{location}: {source!r}")


class InvalidShutterSpeed(MetadataError):
    """Shutter speed text does not contain a 1/N or N\" notation."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"The Shutter speed is incorrect: {text} does not follow the pattern"
        )


class ExposureCompensationParseError(MetadataError):
    """A term of the exposure compensation is not a number or fraction."""

    def __init__(self, value: str, source: Exception):
        self.value = value
        self.source = source
        super().__init__(
            f'Wrong format for exposure compensation "{value}": {source!r}'
        )


class InvalidExposureCompensation(MetadataError):
    """Exposure compensation has more terms than the notation allows."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f'The format of the exposure compensation "{value}" is wrong'
        )
