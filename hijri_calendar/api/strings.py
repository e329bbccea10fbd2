"""Localized month, weekday and meridiem names for the Hijri calendar."""
from __future__ import annotations

from typing import Dict, Protocol

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - names are returned untranslated
    frappe = None  # type: ignore

__all__ = [
    "BUNDLE",
    "NameProvider",
    "get_string",
]

BUNDLE = "hijri_calendar"

_STRINGS: Dict[str, str] = {
    "name": "Hijri",
    "pluginname": "Hijri calendar",
    "month1": "Muharram",
    "month2": "Safar",
    "month3": "Rabi' al-Awwal",
    "month4": "Rabi' al-Thani",
    "month5": "Jumada al-Ula",
    "month6": "Jumada al-Akhirah",
    "month7": "Rajab",
    "month8": "Sha'ban",
    "month9": "Ramadan",
    "month10": "Shawwal",
    "month11": "Dhu al-Qi'dah",
    "month12": "Dhu al-Hijjah",
    "weekday0": "Sunday",
    "weekday1": "Monday",
    "weekday2": "Tuesday",
    "weekday3": "Wednesday",
    "weekday4": "Thursday",
    "weekday5": "Friday",
    "weekday6": "Saturday",
    "wday0": "Sun",
    "wday1": "Mon",
    "wday2": "Tue",
    "wday3": "Wed",
    "wday4": "Thu",
    "wday5": "Fri",
    "wday6": "Sat",
    "am": "am",
    "pm": "pm",
    "am_caps": "AM",
    "pm_caps": "PM",
}


class NameProvider(Protocol):
    def __call__(self, key: str, bundle: str = BUNDLE) -> str:
        ...


def get_string(key: str, bundle: str = BUNDLE) -> str:
    """Return the display string for ``key``.

    The English source text is looked up first and, inside a Frappe site,
    handed to ``frappe._`` so the site's translations apply. Unknown keys
    raise ``KeyError``.
    """

    if bundle != BUNDLE:
        raise KeyError(f"Unknown string bundle: {bundle!r}")
    source = _STRINGS[key]
    if frappe:
        return frappe._(source)  # type: ignore[attr-defined]
    return source
