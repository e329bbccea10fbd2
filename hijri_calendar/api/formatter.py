"""strftime-style rendering of timestamps as Hijri dates.

Only the calendar specific directives are handled here:

    %a, %A  weekday name
    %b, %B  Hijri month name
    %d      day of the month, zero padded unless ``fix_day`` is set
    %m      zero padded month number
    %y      two digit year
    %Y      full year
    %p, %P  AM/PM and am/pm

Everything else (``%H``, ``%M``, ``%j``, ``%Z`` ...) is left for the
reference calendar to render from the Gregorian fields of the timestamp.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from . import strings
from .converter import convert_from_gregorian
from .reference import DateArray, GregorianReferenceCalendar, ReferenceCalendar, TimezoneLike
from .settings import HijriSettings, get_settings
from .strings import NameProvider

__all__ = [
    "DEFAULT_TEMPLATE",
    "FormatOptions",
    "format_date",
    "hijri_date_array",
    "substitute_hijri_tokens",
]

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "%A, %d %B %Y, %I:%M %p"

_TOKEN_PATTERN = re.compile(r"%%|%[aAbBdmyYpP]")
_HOUR_PATTERN = re.compile(r"%%|%I")


@dataclass(frozen=True)
class FormatOptions:
    """Explicit formatting configuration.

    ``fix_day`` drops the leading zero of ``%d``; ``fix_hour`` drops the
    leading zero of ``%I``.
    """

    fix_day: bool = True
    fix_hour: bool = True
    start_weekday: int = 0

    @classmethod
    def from_settings(
        cls,
        settings: Optional[HijriSettings] = None,
        *,
        fix_day: bool = True,
        fix_hour: bool = True,
    ) -> "FormatOptions":
        settings = settings or get_settings()
        return cls(
            fix_day=fix_day and not settings.no_fix_day,
            fix_hour=fix_hour,
            start_weekday=settings.start_weekday,
        )


def hijri_date_array(gregorian: DateArray, get_string: NameProvider = strings.get_string) -> DateArray:
    """Replace the calendar fields of a Gregorian date array with Hijri ones."""

    hijri = convert_from_gregorian(
        gregorian["year"], gregorian["mon"], gregorian["mday"],
        gregorian["hours"], gregorian["minutes"],
    )
    date_array = dict(gregorian)
    date_array.update(
        year=hijri.year,
        mon=hijri.month,
        mday=hijri.day,
        yday=None,
        month=get_string(f"month{hijri.month}"),
        weekday=get_string(f"weekday{gregorian['wday']}"),
    )
    return date_array


def substitute_hijri_tokens(
    template: str,
    date_array: DateArray,
    *,
    fix_day: bool = True,
    get_string: NameProvider = strings.get_string,
) -> str:
    """Render the Hijri directives of ``template``; other directives are left untouched."""

    before_noon = date_array["hours"] < 12
    meridiem = get_string("am") if before_noon else get_string("pm")
    day = date_array["mday"]

    values = {
        "%a": date_array["weekday"],
        "%A": date_array["weekday"],
        "%b": date_array["month"],
        "%B": date_array["month"],
        "%d": str(day) if fix_day else f"{day:02d}",
        "%m": f"{date_array['mon']:02d}",
        "%y": f"{date_array['year'] % 100:02d}",
        "%Y": str(date_array["year"]),
        "%p": meridiem.upper(),
        "%P": meridiem,
        "%%": "%%",
    }
    return _TOKEN_PATTERN.sub(lambda match: values[match.group(0)], template)


def format_date(
    timestamp: float,
    template: Optional[str] = None,
    options: Optional[FormatOptions] = None,
    *,
    timezone: TimezoneLike = None,
    reference: Optional[ReferenceCalendar] = None,
    get_string: NameProvider = strings.get_string,
) -> str:
    """Format a UTC timestamp as a Hijri date string."""

    options = options or FormatOptions.from_settings()
    reference = reference or GregorianReferenceCalendar()
    template = template or DEFAULT_TEMPLATE

    gregorian = reference.to_date_array(timestamp, timezone)
    hijri = hijri_date_array(gregorian, get_string)
    rendered = substitute_hijri_tokens(template, hijri, fix_day=options.fix_day, get_string=get_string)
    if options.fix_hour:
        hour = str(gregorian["hours"] % 12 or 12)
        rendered = _HOUR_PATTERN.sub(lambda match: hour if match.group(0) == "%I" else "%%", rendered)

    logger.debug("Delegating %r to %s", rendered, type(reference).__name__)
    return reference.render_generic_tokens(rendered, gregorian)
