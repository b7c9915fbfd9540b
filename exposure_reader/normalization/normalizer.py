"""Exposure compensation normalization.

This module turns exposure compensation text such as ``"1/3"``,
``"1 1/3"`` or ``"-1 2/3"`` into a single signed float.
"""

import logging
from fractions import Fraction
from typing import List, Optional

from ..config import Config
from ..exceptions import ExposureCompensationParseError, InvalidExposureCompensation
from ..validation.patterns import COMPILED_PATTERNS

logger = logging.getLogger(__name__)


class ExposureCompensationParser:
    """
    Parses exposure compensation notation into stops.

    Handles:
    - Integers and decimals ("0", "-2", "0.7")
    - Fractions ("1/3", "-2/3")
    - Compound values of two terms ("1 1/3", "-1 2/3")

    Terms are summed into an accumulator starting at 0.0. While the
    accumulator is negative every following term is subtracted, so the
    sign of a leading whole number carries over to the fraction after it.
    A leading zero term, signed or not, leaves the accumulator at 0.0 and
    the next term is added.
    """

    def __init__(
        self,
        separator: str = Config.COMPENSATION_SEPARATOR,
        max_terms: int = Config.MAX_COMPENSATION_TERMS
    ):
        """
        Initialize the parser.

        Args:
            separator: Text that separates terms (default: a single space)
            max_terms: Maximum number of terms allowed (default: 2)
        """
        self.separator = separator
        self.max_terms = max_terms
        self.term_patterns = COMPILED_PATTERNS['fraction_term']
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def parse(self, value: Optional[str]) -> Optional[float]:
        """
        Parse exposure compensation text.

        Args:
            value: Raw exposure compensation text, or None if not recorded

        Returns:
            Exposure compensation in stops, or None if not recorded

        Raises:
            InvalidExposureCompensation: If there are too many terms
            ExposureCompensationParseError: If a term is not a number
        """
        if value is None:
            return None

        parts = value.split(self.separator)
        if len(parts) > self.max_terms:
            raise InvalidExposureCompensation(value)

        terms: List[float] = []
        for part in parts:
            try:
                terms.append(float(self.parse_term(part)))
            except (ValueError, ZeroDivisionError, OverflowError) as e:
                raise ExposureCompensationParseError(value, e) from e

        total = 0.0
        for term in terms:
            if total >= 0.0:
                total += term
            else:
                total -= term

        self.logger.debug(f"Normalized exposure compensation: {value!r} -> {total}")
        return total

    def parse_term(self, token: str) -> Fraction:
        """
        Parse a single integer, decimal or fraction term.

        Args:
            token: One term of an exposure compensation, e.g. "1/3"

        Returns:
            Exact value of the term

        Raises:
            ValueError: If the token is not an integer, decimal or fraction
            ZeroDivisionError: If the fraction has a zero denominator
        """
        if not any(pattern.fullmatch(token) for pattern in self.term_patterns):
            raise ValueError(f"Invalid fraction term: {token!r}")

        return Fraction(token)
