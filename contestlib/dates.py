"""Conversions between Gregorian dates and Julian day numbers."""

from __future__ import annotations

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def date_to_int(month: int, day: int, year: int) -> int:
    """Return the Julian day number of a Gregorian date."""
    k = _div(month - 14, 12)
    return (
        _div(1461 * (year + 4800 + k), 4)
        + _div(367 * (month - 2 - k * 12), 12)
        - _div(3 * _div(year + 4900 + k, 100), 4)
        + day
        - 32075
    )


def int_to_date(jd: int) -> tuple[int, int, int]:
    """Return ``(month, day, year)`` for a Julian day number."""
    x = jd + 68569
    n = _div(4 * x, 146097)
    x -= _div(146097 * n + 3, 4)
    i = _div(4000 * (x + 1), 1461001)
    x -= _div(1461 * i, 4) - 31
    j = _div(80 * x, 2447)
    day = x - _div(2447 * j, 80)
    x = _div(j, 11)
    month = j + 2 - 12 * x
    year = 100 * (n - 49) + i + x
    return month, day, year


def int_to_day(jd: int) -> str:
    """Return the three-letter weekday name for a Julian day number."""
    return DAY_NAMES[jd % 7]