"""Regex patterns for exposure notations.

This module contains the regex patterns used to recognise shutter speeds
and exposure compensation terms as they are written in camera logs.
"""

import re
from typing import Dict, List

# Shutter speed patterns - searched, not anchored, so "x1/250y" matches
SHUTTER_SPEED_PATTERNS = [
    # Fraction of a second, e.g. 1/250
    r'1/(\d+)',
    # Whole seconds with a trailing double quote, e.g. 2"
    r'(\d+)"',
]

# Exposure compensation term patterns - matched against the whole token
FRACTION_TERM_PATTERNS = [
    # Integer or decimal, e.g. 1, -2, 0.7, .3
    r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)',
    # Fraction, e.g. 1/3, -2/3
    r'[+-]?\d+/\d+',
]


def compile_patterns() -> Dict[str, List[re.Pattern]]:
    """
    Compile all regex patterns for efficient reuse.

    Returns:
        Dictionary mapping notation names to compiled regex patterns
    """
    compiled = {}

    compiled['shutter_speed'] = [re.compile(p) for p in SHUTTER_SPEED_PATTERNS]
    compiled['fraction_term'] = [re.compile(p) for p in FRACTION_TERM_PATTERNS]

    return compiled


# Precompile patterns for performance
COMPILED_PATTERNS = compile_patterns()
