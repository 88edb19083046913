"""
Unit tests for units module.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from mini_stats.exceptions import InvalidArgumentError
from mini_stats.units import ByteQuantity, Unit, readable_rate, readable_size

KB = 1024
MB = 1024**2
GB = 1024**3
INT64_MAX = 2**63 - 1

UNIT_ORDER = {"KB": 0, "MB": 1, "GB": 2}

TEST_COUNT = 200


class TestByteQuantity:
    """
    Tests for ByteQuantity class.
    """

    def test_derived_units(self) -> None:
        quantity = ByteQuantity(3 * GB)
        assert quantity.kilobytes == 3 * MB
        assert quantity.megabytes == 3 * KB
        assert quantity.gigabytes == 3.0

    def test_in_units(self) -> None:
        quantity = ByteQuantity(1536)
        assert quantity.in_units(Unit.BYTE) == 1536
        assert quantity.in_units(Unit.KILOBYTE) == 1.5

    def test_immutable(self) -> None:
        quantity = ByteQuantity(1)
        with pytest.raises(AttributeError):
            quantity.bytes = 2  # type: ignore[misc]

    @pytest.mark.parametrize("value", [-1, -KB, True, 1.5, "1024"])
    def test_invalid_byte_count(self, value) -> None:
        with pytest.raises(InvalidArgumentError):
            ByteQuantity(value)

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            readable_size(-1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, (0.0, "KB/s")),
        (1023, (0.0, "KB/s")),
        (KB, (1.0, "KB/s")),
        (2048, (2.0, "KB/s")),
        (1536, (1.5, "KB/s")),
        (1234567, (1.18, "MB/s")),
        (MB - 1, (1024.0, "KB/s")),
        (MB, (1.0, "MB/s")),
        (GB - 1, (1024.0, "MB/s")),
        (GB, (1.0, "GB/s")),
        (5 * GB + 512 * MB, (5.5, "GB/s")),
    ],
)
def test_readable_rate(value: int, expected: tuple) -> None:
    assert readable_rate(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0 KB"),
        (1023, "0 KB"),
        (KB, "1 KB"),
        (1536, "2 KB"),
        (10 * KB + 100, "10 KB"),
        (MB, "1.00 MB"),
        (1234567, "1.18 MB"),
        (GB, "1.00 GB"),
        (3 * GB + 256 * MB, "3.25 GB"),
        (INT64_MAX, "8589934592.00 GB"),
    ],
)
def test_readable_size(value: int, expected: str) -> None:
    assert readable_size(value) == expected


@settings(max_examples=TEST_COUNT, deadline=None)
@given(value=st.integers(min_value=0, max_value=KB - 1))
def test_sub_kilobyte_values_collapse_to_zero(value: int) -> None:
    assert readable_rate(value) == (0.0, "KB/s")
    assert readable_size(value) == "0 KB"


@settings(max_examples=TEST_COUNT, deadline=None)
@given(
    values=st.lists(
        st.integers(min_value=0, max_value=INT64_MAX), min_size=2, max_size=2
    )
)
def test_unit_is_monotonic(values) -> None:
    smaller, bigger = sorted(values)

    def _rate_unit(value):
        return UNIT_ORDER[readable_rate(value)[1].split("/")[0]]

    def _size_unit(value):
        return UNIT_ORDER[readable_size(value).split()[1]]

    assert _rate_unit(smaller) <= _rate_unit(bigger)
    assert _size_unit(smaller) <= _size_unit(bigger)


@settings(max_examples=TEST_COUNT, deadline=None)
@given(value=st.integers(min_value=0, max_value=INT64_MAX))
def test_formatting_is_pure(value: int) -> None:
    quantity = ByteQuantity(value)
    assert quantity.readable_rate() == readable_rate(value)
    assert quantity.readable_size() == readable_size(value)
    assert readable_size(value) == readable_size(value)
