"""
Core Utilities.

Shared utility functions used across the backend.
"""

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int_prefix(value: str) -> int | None:
    """
    Parse the leading integer of a string, ignoring any trailing text.

    "12" and "12abc" both give 12. Input without leading digits, or with
    more digits than int() will convert, gives None, which never matches
    a blog id.

    Args:
        value: Raw path segment or user input

    Returns:
        Parsed integer, or None
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Over the interpreter's int string conversion limit
        return None
