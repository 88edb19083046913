"""
Byte units conversion and human-readable representation of byte counts.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from mini_stats.exceptions import InvalidArgumentError


class Unit(Enum):
    """
    Byte units and their sizes in bytes.
    """

    BYTE = 1
    KILOBYTE = 1024
    MEGABYTE = 1024**2
    GIGABYTE = 1024**3


@dataclass(frozen=True)
class ByteQuantity:
    """
    Immutable count of bytes with derived values in larger units.
    """

    bytes: int

    def __post_init__(self) -> None:
        # bool is a subclass of int, but True bytes makes no sense.
        if not isinstance(self.bytes, int) or isinstance(self.bytes, bool):
            raise InvalidArgumentError(
                f"Byte count must be an integer, got {self.bytes!r}"
            )
        if self.bytes < 0:
            raise InvalidArgumentError(
                f"Byte count must be non-negative, got {self.bytes}"
            )

    @property
    def kilobytes(self) -> float:
        return self.bytes / 1024

    @property
    def megabytes(self) -> float:
        return self.kilobytes / 1024

    @property
    def gigabytes(self) -> float:
        return self.megabytes / 1024

    def in_units(self, unit: Unit) -> float:
        """
        Return the quantity expressed in the specified unit.
        """
        return self.bytes / unit.value

    def readable_rate(self) -> Tuple[float, str]:
        """
        Return transfer rate as a pair of value rounded to 2 decimal places and unit label.

        Rates below 1 KB/s are reported as zero.
        """
        if self.bytes < Unit.KILOBYTE.value:
            return 0.0, "KB/s"
        if self.bytes < Unit.MEGABYTE.value:
            return _round2(self.kilobytes), "KB/s"
        if self.bytes < Unit.GIGABYTE.value:
            return _round2(self.megabytes), "MB/s"
        return _round2(self.gigabytes), "GB/s"

    def readable_size(self) -> str:
        """
        Return size as a string with unit suffix, e.g. "12 KB" or "1.50 GB".
        """
        if self.bytes < Unit.KILOBYTE.value:
            return "0 KB"
        if self.bytes < Unit.MEGABYTE.value:
            return f"{self.kilobytes:.0f} KB"
        if self.bytes < Unit.GIGABYTE.value:
            return f"{self.megabytes:.2f} MB"
        return f"{self.gigabytes:.2f} GB"


def _round2(value: float) -> float:
    return float(f"{value:.2f}")


def readable_rate(bytes_: int) -> Tuple[float, str]:
    """
    Return human-readable transfer rate for the byte count.
    """
    return ByteQuantity(bytes_).readable_rate()


def readable_size(bytes_: int) -> str:
    """
    Return human-readable size for the byte count.
    """
    return ByteQuantity(bytes_).readable_size()
