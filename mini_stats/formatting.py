"""
Formatting utilities.
"""

import re
from typing import List

import humanfriendly

from mini_stats.exceptions import InvalidArgumentError

WHITESPACE_RE = re.compile(r"\s+")

PLAIN_DECIMAL_RE = re.compile(r"-?\d+(\.\d+)?")


def format_size(value: int) -> str:
    """
    Format a value in bytes to human-friendly representation.
    """
    return humanfriendly.format_size(value, binary=True)


def round_to(value: float, decimal_places: int) -> str:
    """
    Render a number with fixed count of decimal places.
    """
    if decimal_places < 0:
        raise InvalidArgumentError(
            f"Decimal places must be non-negative, got {decimal_places}"
        )
    return f"{value:.{decimal_places}f}"


def split_at_decimal(value: float) -> List[int]:
    """
    Split a number into integer and fractional parts as they are written.

    Leading zeros of the fractional part are lost, e.g. 1.05 gives [1, 5].
    """
    text = str(value)
    if PLAIN_DECIMAL_RE.fullmatch(text) is None:
        raise InvalidArgumentError(f"{text} is not a plain decimal number")
    return [int(part) for part in text.split(".")]


def condense_whitespace(text: str) -> str:
    """
    Replace each run of whitespaces and newlines with a single space.
    """
    return WHITESPACE_RE.sub(" ", text).strip()
