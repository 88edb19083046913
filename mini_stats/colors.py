"""
Color selection for usage and battery indicators and hex color conversions.

Domain logic works with abstract color categories only. Presentation code maps
a category to an actual color with the palette from the config.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from mini_stats.exceptions import ConfigurationError, InvalidArgumentError

HEX_COLOR_RE = re.compile(r"(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")

UINT32_MAX = 0xFFFFFFFF


class ColorCategory(Enum):
    """
    Indicator color category.
    """

    DEFAULT = "default"
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Color:
    """
    RGBA color with channels in range [0, 1].
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidArgumentError(
                    f"Color channel {name} must be in range [0, 1], got {value}"
                )


@dataclass(frozen=True)
class UsageThresholds:
    """
    Bounds of usage ratio ranges. Both ranges are inclusive on both ends,
    the warning range takes precedence on the shared bound.
    """

    warning_from: float = 0.6
    critical_from: float = 0.8
    ceiling: float = 1.0

    @classmethod
    def from_config(cls, config: Mapping) -> "UsageThresholds":
        """
        Build thresholds from "colors.usage" config section.
        """
        return cls(**_thresholds_args(cls, config))


@dataclass(frozen=True)
class BatteryThresholds:
    """
    Bounds of battery level ranges.
    """

    warning_from: float = 0.2
    normal_from: float = 0.4
    ceiling: float = 1.0

    @classmethod
    def from_config(cls, config: Mapping) -> "BatteryThresholds":
        """
        Build thresholds from "colors.battery" config section.
        """
        return cls(**_thresholds_args(cls, config))


USAGE = UsageThresholds()
BATTERY = BatteryThresholds()


def _thresholds_args(cls, config: Mapping) -> dict:
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"{cls.__name__} config must be a mapping, got {config!r}"
        )
    unknown = set(config) - set(cls.__dataclass_fields__)
    if unknown:
        raise ConfigurationError(
            f"Unknown {cls.__name__} parameters: {', '.join(sorted(unknown))}"
        )
    try:
        return {key: float(value) for key, value in config.items()}
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {cls.__name__} value: {e}") from e


def usage_color(
    ratio: float,
    reversed: bool = False,  # pylint: disable=redefined-builtin
    color: bool = False,
    thresholds: UsageThresholds = USAGE,
) -> ColorCategory:
    """
    Return color category for usage ratio.

    With `reversed` set, high values are good (e.g. free space) and values outside
    of the warning and critical ranges are critical.
    """
    if not color:
        return ColorCategory.DEFAULT

    if thresholds.warning_from <= ratio <= thresholds.critical_from:
        return ColorCategory.WARNING

    if thresholds.critical_from < ratio <= thresholds.ceiling:
        return ColorCategory.NORMAL if reversed else ColorCategory.CRITICAL

    return ColorCategory.CRITICAL if reversed else ColorCategory.NORMAL


def battery_color(
    level: float, color: bool = False, thresholds: BatteryThresholds = BATTERY
) -> ColorCategory:
    """
    Return color category for battery charge level.

    Low levels are reported as critical even if coloring is disabled.
    """
    if thresholds.warning_from <= level <= thresholds.normal_from:
        return ColorCategory.WARNING if color else ColorCategory.DEFAULT

    if thresholds.normal_from < level <= thresholds.ceiling:
        if level == thresholds.ceiling or not color:
            return ColorCategory.DEFAULT
        return ColorCategory.NORMAL

    return ColorCategory.CRITICAL


def parse_hex_color(text: str, alpha: float = 1.0) -> Color:
    """
    Parse color from hex string like "#ff8000".

    Leading hex digits are taken into account, the rest of the string is ignored.
    A string without hex digits results in black. Alpha out of range [0, 1] raises
    InvalidArgumentError.
    """
    text = text.strip()
    if text.startswith("#"):
        text = text[1:].lstrip()

    digits = HEX_COLOR_RE.match(text).group(1)  # type: ignore[union-attr]
    value = min(int(digits, 16), UINT32_MAX) if digits else 0

    return Color(
        red=((value >> 16) & 0xFF) / 255.0,
        green=((value >> 8) & 0xFF) / 255.0,
        blue=(value & 0xFF) / 255.0,
        alpha=alpha,
    )


def to_hex_string(color: Color) -> str:
    """
    Format color as "#rrggbb" string. Alpha channel is dropped.
    """
    rgb = (
        _to_byte(color.red) << 16 | _to_byte(color.green) << 8 | _to_byte(color.blue)
    )
    return f"#{rgb:06x}"


def category_color(category: ColorCategory, palette: Mapping[str, str]) -> Color:
    """
    Return actual color of the category from the palette of hex strings.
    """
    if not isinstance(palette, Mapping):
        raise ConfigurationError(f"Palette must be a mapping, got {palette!r}")

    value = palette.get(category.value)
    if value is None:
        raise ConfigurationError(
            f'Palette has no color for category "{category.value}"'
        )
    if not isinstance(value, str):
        raise ConfigurationError(
            f'Palette color of category "{category.value}" must be a hex string, got {value!r}'
        )

    return parse_hex_color(value)


def _to_byte(channel: float) -> int:
    # Channels are truncated, rounding only drops float noise like 58.99999999999999.
    return math.floor(round(channel * 255, 6))
