"""Tests for CSV input handling."""

import pytest
from exposure_reader.exceptions import FailedToParse, InvalidCSV
from exposure_reader.utils.io_handler import CSVRowSource


class TestCSVRowSource:
    """Test suite for CSVRowSource class."""

    def test_rows_keyed_by_header(self, tmp_path):
        """Test rows are yielded as header-keyed mappings."""
        path = tmp_path / "rows.csv"
        path.write_text("lens_name,iso\nFE 35mm,100\nFE 85mm,200\n", encoding="utf-8")

        with CSVRowSource(path) as source:
            rows = list(source)

        assert source.fieldnames == ["lens_name", "iso"]
        assert rows == [
            {"lens_name": "FE 35mm", "iso": "100"},
            {"lens_name": "FE 85mm", "iso": "200"},
        ]

    def test_closed_after_block(self, tmp_path):
        """Test the file is closed on leaving the block."""
        path = tmp_path / "rows.csv"
        path.write_text("lens_name\nFE 35mm\n", encoding="utf-8")

        with CSVRowSource(path) as source:
            assert source.closed is False

        assert source.closed is True

    def test_closed_after_error(self, tmp_path):
        """Test the file is closed when the block raises."""
        path = tmp_path / "rows.csv"
        path.write_text("lens_name\nFE 35mm,extra\n", encoding="utf-8")

        with pytest.raises(FailedToParse):
            with CSVRowSource(path) as source:
                list(source)

        assert source.closed is True

    def test_missing_file(self, tmp_path):
        """Test opening a missing file raises InvalidCSV."""
        with pytest.raises(InvalidCSV):
            with CSVRowSource(tmp_path / "missing.csv"):
                pass

    def test_undecodable_header(self, tmp_path):
        """Test a header that is not valid text raises InvalidCSV."""
        path = tmp_path / "binary.csv"
        path.write_bytes(b"\xff\xfe\xfa\x00lens\n")

        source = CSVRowSource(path)
        with pytest.raises(InvalidCSV) as exc_info:
            source.open()

        assert isinstance(exc_info.value.source, UnicodeDecodeError)
        assert source.closed is True

    def test_iterate_before_open(self, tmp_path):
        """Test iterating an unopened source."""
        with pytest.raises(RuntimeError):
            list(CSVRowSource(tmp_path / "rows.csv"))
