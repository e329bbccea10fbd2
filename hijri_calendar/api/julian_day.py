"""Gregorian ↔ Julian Day conversion shared by the calendar converters."""
from __future__ import annotations

from math import floor
from typing import Tuple

__all__ = [
    "GREGORIAN_EPOCH",
    "gregorian_to_jd",
    "jd_to_gregorian",
    "leap_gregorian",
]

GREGORIAN_EPOCH = 1721425.5


def leap_gregorian(year: int) -> bool:
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def gregorian_to_jd(year: int, month: int, day: int) -> float:
    """Return the Julian Day at the start (midnight) of a proleptic Gregorian date."""

    if month <= 2:
        adjustment = 0
    elif leap_gregorian(year):
        adjustment = -1
    else:
        adjustment = -2

    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * (year - 1)
        + floor((year - 1) / 4)
        - floor((year - 1) / 100)
        + floor((year - 1) / 400)
        + floor((367 * month - 362) / 12)
        + adjustment
        + day
    )


def jd_to_gregorian(jd: float) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` for the civil day containing ``jd``."""

    wjd = floor(jd - 0.5) + 0.5
    depoch = wjd - GREGORIAN_EPOCH

    quadricent = floor(depoch / 146097)
    dqc = depoch % 146097
    cent = floor(dqc / 36524)
    dcent = dqc % 36524
    quad = floor(dcent / 1461)
    dquad = dcent % 1461
    yindex = floor(dquad / 365)

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    # The last day of a leap cycle lands on index 4 and belongs to the year in progress.
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_jd(year, 1, 1)
    if wjd < gregorian_to_jd(year, 3, 1):
        leapadj = 0
    else:
        leapadj = 1 if leap_gregorian(year) else 2

    month = floor(((yearday + leapadj) * 12 + 373) / 367)
    day = wjd - gregorian_to_jd(year, month, 1) + 1

    return int(year), int(month), int(day)
