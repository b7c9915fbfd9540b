"""Input handling utilities.

This module handles reading exposure CSV files:
- Opening the file for the duration of a read
- Reading the header row
- Iterating data rows as column-name mappings
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from ..config import Config
from ..exceptions import FailedToParse, InvalidCSV

logger = logging.getLogger(__name__)


class CSVRowSource:
    """
    Yields raw CSV rows keyed by header name.

    Use as a context manager; the file is closed when the block exits,
    whether it completed or raised.

    Example:
        >>> with CSVRowSource(Path("exposures.csv")) as rows:
        ...     for row in rows:
        ...         print(row["lens_name"])
    """

    def __init__(self, file_path: Union[str, Path], encoding: str = Config.CSV_ENCODING):
        """
        Initialize the row source.

        Args:
            file_path: Path to the CSV file
            encoding: File encoding (default: utf-8-sig)
        """
        self.file_path = Path(file_path)
        self.encoding = encoding
        self.fieldnames: Optional[list] = None
        self._file = None
        self._reader: Optional[csv.DictReader] = None
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def __enter__(self) -> "CSVRowSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def open(self):
        """
        Open the file and read its header row.

        Raises:
            InvalidCSV: If the file cannot be opened or the header cannot be read
        """
        try:
            self._file = open(self.file_path, 'r', encoding=self.encoding, newline='')
        except OSError as e:
            raise InvalidCSV(self.file_path, e) from e

        try:
            self._reader = csv.DictReader(self._file)
            self.fieldnames = self._reader.fieldnames
        except (csv.Error, UnicodeDecodeError) as e:
            self.close()
            raise InvalidCSV(self.file_path, e) from e

        if self.fieldnames:
            missing = [c for c in Config.COLUMNS if c not in self.fieldnames]
            if missing:
                self.logger.warning(f"{self.file_path} is missing columns: {', '.join(missing)}")

        self.logger.debug(f"Opened {self.file_path} with columns {self.fieldnames}")

    def close(self):
        """Close the underlying file if it is open."""
        if self._file is not None:
            self._file.close()
            self._file = None
            self._reader = None

    @property
    def closed(self) -> bool:
        """Whether the underlying file is closed."""
        return self._file is None

    def __iter__(self) -> Iterator[Dict[str, Optional[str]]]:
        """
        Iterate data rows.

        Yields:
            Mapping of header name to cell text; cells missing at the end
            of a short row are None

        Raises:
            FailedToParse: If a row cannot be read or has more cells than the header
        """
        if self._reader is None:
            raise RuntimeError("CSVRowSource must be opened before iterating")

        row_number = 0
        while True:
            row_number += 1
            try:
                row = next(self._reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                raise FailedToParse(row_number, e) from e

            if None in row:
                extra = len(row[None])
                raise FailedToParse(
                    row_number,
                    ValueError(f"found {len(self.fieldnames) + extra} fields, "
                               f"header has {len(self.fieldnames)}")
                )

            yield row
