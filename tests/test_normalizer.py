"""Tests for exposure compensation normalization module."""

import pytest
from fractions import Fraction
from exposure_reader.exceptions import (
    ExposureCompensationParseError,
    InvalidExposureCompensation,
)
from exposure_reader.normalization.normalizer import ExposureCompensationParser


class TestExposureCompensationParser:
    """Test suite for ExposureCompensationParser class."""

    @pytest.fixture
    def parser(self):
        """Fixture to provide ExposureCompensationParser instance."""
        return ExposureCompensationParser()

    def test_parse_none(self, parser):
        """Test that a missing compensation stays missing."""
        assert parser.parse(None) is None

    def test_parse_single_terms(self, parser):
        """Test integer, decimal and fraction terms."""
        test_cases = [
            ("0", 0.0),
            ("1", 1.0),
            ("-2", -2.0),
            ("0.7", 0.7),
            ("1/3", 1 / 3),
            ("-2/3", -2 / 3),
            ("+1/2", 0.5),
        ]

        for input_str, expected in test_cases:
            assert parser.parse(input_str) == pytest.approx(expected)

    def test_parse_compound_positive(self, parser):
        """Test whole stops followed by a fraction."""
        assert parser.parse("1 1/3") == pytest.approx(4 / 3)
        assert parser.parse("2 2/3") == pytest.approx(8 / 3)

    def test_parse_compound_negative(self, parser):
        """A negative first term makes the following term subtract."""
        assert parser.parse("-1 1/3") == pytest.approx(-4 / 3)
        assert parser.parse("-2 2/3") == pytest.approx(-8 / 3)

    def test_parse_leading_zero_adds(self, parser):
        """A zero accumulator always adds the next term, even for -0."""
        assert parser.parse("0 1/3") == pytest.approx(1 / 3)
        assert parser.parse("-0 1/3") == pytest.approx(1 / 3)

    def test_parse_too_many_terms(self, parser):
        """Test more than two terms is rejected."""
        with pytest.raises(InvalidExposureCompensation) as exc_info:
            parser.parse("1 2 3")

        assert exc_info.value.value == "1 2 3"

    def test_parse_double_space_counts_as_extra_term(self, parser):
        """Terms are split on single spaces, so two spaces yield an empty term."""
        with pytest.raises(InvalidExposureCompensation):
            parser.parse("1  1/3")

    def test_parse_invalid_term(self, parser):
        """Test non-numeric terms."""
        invalid_inputs = ["abc", "1 abc", "1/x", "", "1 ", "1/3/4"]

        for invalid_input in invalid_inputs:
            with pytest.raises(ExposureCompensationParseError) as exc_info:
                parser.parse(invalid_input)
            assert exc_info.value.value == invalid_input
            assert isinstance(exc_info.value.source, ValueError)

    def test_parse_zero_denominator(self, parser):
        """Test fractions with a zero denominator."""
        with pytest.raises(ExposureCompensationParseError) as exc_info:
            parser.parse("1/0")

        assert isinstance(exc_info.value.source, ZeroDivisionError)

    def test_parse_term_exact(self, parser):
        """Test single terms are parsed exactly."""
        assert parser.parse_term("1/3") == Fraction(1, 3)
        assert parser.parse_term("0.5") == Fraction(1, 2)
        assert parser.parse_term("-3") == Fraction(-3)

    def test_custom_max_terms(self):
        """Test a parser configured for a single term."""
        parser = ExposureCompensationParser(max_terms=1)

        assert parser.parse("1/3") == pytest.approx(1 / 3)
        with pytest.raises(InvalidExposureCompensation):
            parser.parse("1 1/3")

    def test_parse_term_too_large_for_float(self, parser):
        """Terms beyond the float range are reported as parse errors."""
        value = "1" + "0" * 400

        with pytest.raises(ExposureCompensationParseError) as exc_info:
            parser.parse(value)

        assert exc_info.value.value == value
        assert isinstance(exc_info.value.source, OverflowError)

    def test_parse_term_with_trailing_newline(self, parser):
        """Whitespace around a term is not stripped, a newline included."""
        for invalid_input in ["1/3\n", "1 1/3\n", "-1\n"]:
            with pytest.raises(ExposureCompensationParseError):
                parser.parse(invalid_input)
