"""Decimal conversion of integers of any size."""

# Python refuses int/str conversions beyond 4300 digits by default, so long
# values are converted in chunks that stay well under that limit
CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**CHUNK_DIGITS


def parse_decimal(digits: str) -> int:
    """
    Convert a run of decimal digits into an integer.

    :param str digits: Non-empty string of ASCII digits

    :return: Integer value
    :rtype: int
    """
    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start : start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_decimal(value: int) -> str:
    """
    Render an integer in decimal, whatever its number of digits.

    :param int value: Integer to render

    :return: Decimal text, with a leading "-" for negative values
    :rtype: str
    """
    if value < 0:
        return "-" + format_decimal(-value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(f"{low:0{CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))
