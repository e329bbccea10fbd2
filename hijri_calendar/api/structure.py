"""Calendar type description of the Hijri calendar for date pickers and display."""
from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Tuple

from . import strings
from .converter import GregorianDate, HijriDate, convert_from_gregorian, convert_to_gregorian
from .formatter import FormatOptions, format_date, hijri_date_array
from .julian_day import gregorian_to_jd, jd_to_gregorian
from .reference import DateArray, GregorianReferenceCalendar, ReferenceCalendar, TimezoneLike
from .settings import HijriSettings, get_settings
from .strings import NameProvider

__all__ = [
    "CalendarType",
    "HijriCalendarType",
    "MAX_YEAR",
    "MIN_YEAR",
    "days_in_month",
    "next_month",
    "prev_month",
    "weekday_of",
]

MIN_YEAR = 1317
MAX_YEAR = 1473
MAX_DAYS = 30
NUM_WEEKDAYS = 7


class CalendarType(Protocol):
    """Operations every calendar type offers to pickers and date display."""

    def get_days(self) -> List[int]:
        ...

    def get_months(self) -> Dict[int, str]:
        ...

    def get_min_year(self) -> int:
        ...

    def get_max_year(self) -> int:
        ...

    def convert_to_gregorian(
        self, year: int, month: int, day: int, hour: int = 0, minute: int = 0
    ) -> GregorianDate:
        ...

    def convert_from_gregorian(
        self, year: int, month: int, day: int, hour: int = 0, minute: int = 0
    ) -> HijriDate:
        ...

    def timestamp_to_date_array(self, timestamp: float, timezone: TimezoneLike = None) -> DateArray:
        ...

    def timestamp_to_date_string(
        self,
        timestamp: float,
        template: Optional[str] = None,
        timezone: TimezoneLike = None,
        fix_day: bool = True,
        fix_hour: bool = True,
    ) -> str:
        ...


def days_in_month(year: int, month: int) -> int:
    """Length of a Hijri month, read off the day before the next month starts."""

    next_mon, next_year = next_month(year, month)
    first = convert_to_gregorian(next_year, next_mon, 1)
    previous = jd_to_gregorian(gregorian_to_jd(first.year, first.month, first.day) - 1)
    return convert_from_gregorian(*previous).day


def next_month(year: int, month: int) -> Tuple[int, int]:
    """Return ``(month, year)`` of the month after ``month``."""

    if month == 12:
        return 1, year + 1
    return month + 1, year


def prev_month(year: int, month: int) -> Tuple[int, int]:
    """Return ``(month, year)`` of the month before ``month``."""

    if month == 1:
        return 12, year - 1
    return month - 1, year


def weekday_of(
    year: int,
    month: int,
    day: int,
    reference: Optional[ReferenceCalendar] = None,
) -> int:
    """Weekday index (Sunday = 0) of a Hijri date."""

    reference = reference or GregorianReferenceCalendar()
    gregorian = convert_to_gregorian(year, month, day)
    return reference.day_of_week(gregorian.year, gregorian.month, gregorian.day)


class HijriCalendarType:
    """Hijri implementation of :class:`CalendarType`."""

    name = "hijri"

    def __init__(
        self,
        settings: Optional[HijriSettings] = None,
        reference: Optional[ReferenceCalendar] = None,
        get_string: NameProvider = strings.get_string,
    ) -> None:
        self.settings = settings or get_settings()
        self.reference = reference or GregorianReferenceCalendar()
        self.get_string = get_string

    @property
    def algorithm(self) -> int:
        return self.settings.algorithm

    def get_days(self) -> List[int]:
        # Every day any month can have, since the picker cannot know the month.
        return list(range(1, MAX_DAYS + 1))

    def get_months(self) -> Dict[int, str]:
        return {month: self.get_string(f"month{month}") for month in range(1, 13)}

    def get_weekdays(self) -> List[Dict[str, str]]:
        return [
            {
                "shortname": self.get_string(f"wday{index}"),
                "fullname": self.get_string(f"weekday{index}"),
            }
            for index in range(NUM_WEEKDAYS)
        ]

    def get_min_year(self) -> int:
        return MIN_YEAR

    def get_max_year(self) -> int:
        return MAX_YEAR

    def get_num_weekdays(self) -> int:
        return NUM_WEEKDAYS

    def get_starting_weekday(self) -> int:
        return self.settings.start_weekday

    def get_num_days_in_month(self, year: int, month: int) -> int:
        return days_in_month(year, month)

    def get_next_month(self, year: int, month: int) -> Tuple[int, int]:
        return next_month(year, month)

    def get_prev_month(self, year: int, month: int) -> Tuple[int, int]:
        return prev_month(year, month)

    def get_weekday(self, year: int, month: int, day: int) -> int:
        return weekday_of(year, month, day, self.reference)

    def convert_to_gregorian(
        self, year: int, month: int, day: int, hour: int = 0, minute: int = 0
    ) -> GregorianDate:
        return convert_to_gregorian(year, month, day, hour, minute)

    def convert_from_gregorian(
        self, year: int, month: int, day: int, hour: int = 0, minute: int = 0
    ) -> HijriDate:
        return convert_from_gregorian(year, month, day, hour, minute)

    def timestamp_to_date_array(self, timestamp: float, timezone: TimezoneLike = None) -> DateArray:
        gregorian = self.reference.to_date_array(timestamp, timezone)
        return hijri_date_array(gregorian, self.get_string)

    def timestamp_to_date_string(
        self,
        timestamp: float,
        template: Optional[str] = None,
        timezone: TimezoneLike = None,
        fix_day: bool = True,
        fix_hour: bool = True,
    ) -> str:
        options = FormatOptions.from_settings(self.settings, fix_day=fix_day, fix_hour=fix_hour)
        return format_date(
            timestamp,
            template,
            options,
            timezone=timezone,
            reference=self.reference,
            get_string=self.get_string,
        )
