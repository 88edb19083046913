"""
Formatting helpers for system statistics indicators.
"""

from .cli import cli as main
from .colors import (
    Color,
    ColorCategory,
    battery_color,
    category_color,
    parse_hex_color,
    to_hex_string,
    usage_color,
)
from .formatting import condense_whitespace, format_size, round_to, split_at_decimal
from .geometry import Path, Point
from .units import ByteQuantity, Unit, readable_rate, readable_size
from .version import __version__
