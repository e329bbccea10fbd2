"""Gregorian reference calendar used to break timestamps into civil fields."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Any, Dict, Protocol, Union
from zoneinfo import ZoneInfo

try:  # pragma: no cover - frappe is unavailable during tests
    from frappe.utils import get_system_timezone  # type: ignore
except ImportError:  # pragma: no cover - UTC is used outside a Frappe site
    get_system_timezone = None  # type: ignore

__all__ = [
    "DateArray",
    "GregorianReferenceCalendar",
    "ReferenceCalendar",
    "TimezoneLike",
    "resolve_timezone",
]

DateArray = Dict[str, Any]
TimezoneLike = Union[None, int, float, str, tzinfo]

# Legacy marker for "use the user's timezone".
_USER_TIMEZONE = 99


class ReferenceCalendar(Protocol):
    """Host calendar capability consumed by the Hijri formatter."""

    def to_date_array(self, timestamp: float, timezone: TimezoneLike = None) -> DateArray:
        ...

    def render_generic_tokens(self, template: str, date_array: DateArray) -> str:
        ...

    def day_of_week(self, year: int, month: int, day: int) -> int:
        ...


def _named_timezone(name: str) -> tzinfo:
    if name.upper() in {"UTC", "GMT"}:
        return dt_timezone.utc
    return ZoneInfo(name)


def resolve_timezone(value: TimezoneLike = None) -> tzinfo:
    """Resolve ``value`` to a ``tzinfo``.

    ``None`` (or the legacy ``99``) selects the site timezone inside Frappe and
    UTC elsewhere; numbers are fixed offsets in hours; strings are IANA names.
    """

    if isinstance(value, tzinfo):
        return value
    if isinstance(value, str):
        value = value.strip() or None
    if value is not None:
        try:
            hours = float(value)
        except ValueError:
            return _named_timezone(value)  # type: ignore[arg-type]
        if hours != _USER_TIMEZONE:
            return dt_timezone(timedelta(hours=hours))
    if get_system_timezone is not None:
        return _named_timezone(get_system_timezone())
    return dt_timezone.utc


class GregorianReferenceCalendar:
    """``datetime`` backed implementation of :class:`ReferenceCalendar`."""

    def to_date_array(self, timestamp: float, timezone: TimezoneLike = None) -> DateArray:
        tz = resolve_timezone(timezone)
        moment = datetime.fromtimestamp(timestamp, tz)
        return {
            "seconds": moment.second,
            "minutes": moment.minute,
            "hours": moment.hour,
            "mday": moment.day,
            "wday": (moment.weekday() + 1) % 7,
            "mon": moment.month,
            "year": moment.year,
            "yday": moment.timetuple().tm_yday - 1,
            "weekday": moment.strftime("%A"),
            "month": moment.strftime("%B"),
            "timestamp": timestamp,
            "tzinfo": tz,
        }

    def render_generic_tokens(self, template: str, date_array: DateArray) -> str:
        moment = datetime(
            date_array["year"],
            date_array["mon"],
            date_array["mday"],
            date_array["hours"],
            date_array["minutes"],
            date_array["seconds"],
            tzinfo=date_array.get("tzinfo"),
        )
        return moment.strftime(template)

    def day_of_week(self, year: int, month: int, day: int) -> int:
        """Weekday index with Sunday as 0."""

        return (date(year, month, day).weekday() + 1) % 7
