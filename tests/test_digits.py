"""Test decimal conversion of long integers."""
import pytest

from smart_calculator.common.digits import CHUNK_DIGITS, format_decimal, parse_decimal


@pytest.mark.parametrize("value", [0, 7, -7, 10**CHUNK_DIGITS, -(10**CHUNK_DIGITS) + 1, 123456789])
def test_format_small_values(value: int) -> None:
    """Values below the int/str limit render exactly like str()."""
    assert format_decimal(value) == str(value)


def test_format_beyond_conversion_limit() -> None:
    """Values with more than 4300 digits are rendered, zero padding included."""
    assert format_decimal(10**5000) == "1" + "0" * 5000
    assert format_decimal(-(10**5000 + 7)) == "-1" + "0" * 4999 + "7"


def test_parse_beyond_conversion_limit() -> None:
    assert parse_decimal("2" + "0" * 6000) == 2 * 10**6000


def test_round_trip_of_large_power() -> None:
    value = 3**20000
    assert parse_decimal(format_decimal(value)) == value
