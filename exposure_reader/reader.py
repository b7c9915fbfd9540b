"""
Exposure metadata reader.

This module provides the read operation that turns an exposure CSV file
into a list of validated records. It coordinates:
1. Opening the CSV file and iterating its rows
2. Decoding each row into column types
3. Building a validated record per row

The read is all-or-nothing: the first failing row aborts it and no
records are returned.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from .building.builder import ExposureRecordBuilder
from .exceptions import FailedToParse
from .models.schema import ExposureRecord, RawRow
from .utils.io_handler import CSVRowSource


class MetadataReader:
    """
    Reads exposure records from CSV files.
    """

    def __init__(self, builder: Optional[ExposureRecordBuilder] = None):
        """
        Initialize the reader.

        Args:
            builder: Record builder (default: new instance)
        """
        self.builder = builder or ExposureRecordBuilder()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def read(self, input_path: Union[str, Path]) -> List[ExposureRecord]:
        """
        Read all exposure records from a CSV file.

        Args:
            input_path: Path to the CSV file

        Returns:
            Records in file order

        Raises:
            InvalidCSV: If the file cannot be opened or read
            FailedToParse: If a row cannot be decoded
            InvalidShutterSpeed: If a row has an invalid shutter speed
            InvalidExposureCompensation: If a row's compensation has too many terms
            ExposureCompensationParseError: If a row's compensation is not numeric
        """
        self.logger.debug(f"Reading exposure metadata from {input_path}")

        with CSVRowSource(input_path) as rows:
            records = self.read_rows(rows)

        self.logger.info(f"Loaded {len(records)} exposure records from {input_path}")
        return records

    def read_rows(self, rows: Iterable[Mapping[str, Any]]) -> List[ExposureRecord]:
        """
        Build records from already-split rows.

        Args:
            rows: Mappings of column name to cell value, in input order

        Returns:
            Records in input order
        """
        records = []

        for row_number, row in enumerate(rows, start=1):
            raw = self.decode_row(row, row_number)
            records.append(self.builder.build(raw))

        return records

    def decode_row(self, row: Mapping[str, Any], row_number: Optional[int] = None) -> RawRow:
        """
        Decode one row into column types.

        Args:
            row: Mapping of column name to cell value
            row_number: 1-based data row number, for error messages

        Returns:
            Decoded RawRow

        Raises:
            FailedToParse: If a column is missing or has the wrong type
        """
        try:
            return RawRow.model_validate(dict(row))
        except ValidationError as e:
            raise FailedToParse(row_number, e) from e


def read_metadata(input_path: Union[str, Path]) -> List[ExposureRecord]:
    """
    Read all exposure records from a CSV file with a default reader.

    Args:
        input_path: Path to the CSV file

    Returns:
        Records in file order
    """
    return MetadataReader().read(input_path)
