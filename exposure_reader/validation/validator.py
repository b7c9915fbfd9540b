"""Shutter speed validation.

Camera logs write shutter speeds either as a fraction of a second
(``1/250``) or as whole seconds followed by a double quote (``2"``).
The check is a substring search: any text that contains one of the two
notations is accepted, including ``x1/250y``.
"""

import logging

from .patterns import COMPILED_PATTERNS
from ..exceptions import InvalidShutterSpeed

logger = logging.getLogger(__name__)


class ShutterSpeedValidator:
    """
    Validates raw shutter speed text.
    """

    def __init__(self):
        """Initialize the validator."""
        self.patterns = COMPILED_PATTERNS['shutter_speed']
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def is_valid(self, text: str) -> bool:
        """
        Check whether the text contains a shutter speed notation.

        Args:
            text: Raw shutter speed text

        Returns:
            True if any pattern matches somewhere in the text
        """
        for pattern in self.patterns:
            if pattern.search(text):
                return True

        self.logger.debug(f"No shutter speed pattern found in {text!r}")
        return False

    def validate(self, text: str) -> str:
        """
        Validate shutter speed text.

        Args:
            text: Raw shutter speed text

        Returns:
            The text, unchanged

        Raises:
            InvalidShutterSpeed: If the text does not follow either notation
        """
        if not self.is_valid(text):
            raise InvalidShutterSpeed(text)
        return text
