"""Gregorian ↔ Hijri conversion helpers built on the Julian Day count."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from math import ceil, floor
from typing import Iterable, Tuple, Union

from .julian_day import gregorian_to_jd, jd_to_gregorian

__all__ = [
    "ISLAMIC_EPOCH",
    "GregorianDate",
    "HijriDate",
    "coerce_gregorian",
    "coerce_hijri",
    "convert_from_gregorian",
    "convert_to_gregorian",
    "gregorian_to_hijri",
    "hijri_to_gregorian",
    "hijri_to_jd",
    "jd_to_hijri",
]

ISLAMIC_EPOCH = 1948439.5


@dataclass(frozen=True)
class HijriDate:
    """Immutable Hijri (tabular Islamic) date with an optional time of day.

    Values are not range checked: out of range months or days are accepted
    and simply extrapolated by the conversion arithmetic.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_gregorian(self) -> "GregorianDate":
        return convert_to_gregorian(self.year, self.month, self.day, self.hour, self.minute)


@dataclass(frozen=True)
class GregorianDate:
    """Immutable proleptic Gregorian date with an optional time of day."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_hijri(self) -> HijriDate:
        return convert_from_gregorian(self.year, self.month, self.day, self.hour, self.minute)


def _split_date_string(value: str, calendar: str) -> Tuple[int, int, int]:
    tokens = value.strip().replace("/", "-").split("-")
    if len(tokens) != 3:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}")
    try:
        return tuple(int(part) for part in tokens)  # type: ignore[return-value]
    except ValueError as exc:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}") from exc


def coerce_gregorian(
    value: Union[str, date, datetime, GregorianDate, Iterable[int]]
) -> Tuple[int, int, int]:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, (date, GregorianDate)):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Gregorian")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a date, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_hijri(value: Union[str, HijriDate, Iterable[int]]) -> Tuple[int, int, int]:
    if isinstance(value, HijriDate):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Hijri")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a HijriDate, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def hijri_to_jd(year: int, month: int, day: int) -> float:
    """Return the Julian Day at the start of a tabular Hijri date.

    Months alternate between 30 and 29 days and eleven years out of every
    thirty receive a 30th day in Dhu al-Hijjah.
    """

    return (
        day
        + ceil(29.5 * (month - 1))
        + (year - 1) * 354
        + floor((3 + 11 * year) / 30)
        + ISLAMIC_EPOCH
        - 1
    )


def jd_to_hijri(jd: float) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` of the Hijri day containing ``jd``."""

    jd = floor(jd - 0.5) + 0.5
    year = floor((30 * (jd - ISLAMIC_EPOCH) + 10646) / 10631)
    month = min(12, ceil((jd - (29 + hijri_to_jd(year, 1, 1))) / 29.5) + 1)
    day = jd - hijri_to_jd(year, month, 1) + 1
    return int(year), int(month), int(day)


def convert_from_gregorian(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0
) -> HijriDate:
    """Convert a Gregorian date to Hijri; the time of day is carried over as is."""

    hy, hm, hd = jd_to_hijri(gregorian_to_jd(year, month, day))
    return HijriDate(hy, hm, hd, hour, minute)


def convert_to_gregorian(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0
) -> GregorianDate:
    """Convert a Hijri date to Gregorian; the time of day is carried over as is."""

    gy, gm, gd = jd_to_gregorian(hijri_to_jd(year, month, day))
    return GregorianDate(gy, gm, gd, hour, minute)


def gregorian_to_hijri(
    value: Union[str, date, datetime, GregorianDate, Iterable[int]]
) -> HijriDate:
    hour = minute = 0
    if isinstance(value, (datetime, GregorianDate)):
        hour, minute = value.hour, value.minute
    gy, gm, gd = coerce_gregorian(value)
    return convert_from_gregorian(gy, gm, gd, hour, minute)


def hijri_to_gregorian(value: Union[str, HijriDate, Iterable[int]]) -> date:
    hy, hm, hd = coerce_hijri(value)
    return convert_to_gregorian(hy, hm, hd).to_date()
