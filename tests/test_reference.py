from datetime import datetime, timedelta, timezone

import pytest

from hijri_calendar.api import reference
from hijri_calendar.api.reference import GregorianReferenceCalendar, resolve_timezone

TIMESTAMP = datetime(2023, 7, 19, 15, 5, 30, tzinfo=timezone.utc).timestamp()


@pytest.mark.parametrize("value", [None, "", "UTC", "gmt", 99, "99"])
def test_resolve_timezone_defaults_to_utc(value):
    assert resolve_timezone(value) == timezone.utc


def test_resolve_timezone_offsets():
    assert resolve_timezone(3) == timezone(timedelta(hours=3))
    assert resolve_timezone("5.5") == timezone(timedelta(hours=5, minutes=30))
    assert resolve_timezone(-4.0) == timezone(timedelta(hours=-4))
    custom = timezone(timedelta(hours=1))
    assert resolve_timezone(custom) is custom


def test_resolve_timezone_uses_site_timezone(monkeypatch):
    monkeypatch.setattr(reference, "get_system_timezone", lambda: "UTC")
    assert resolve_timezone(None) is timezone.utc


def test_to_date_array_fields():
    array = GregorianReferenceCalendar().to_date_array(TIMESTAMP)
    assert array["year"] == 2023
    assert array["mon"] == 7
    assert array["mday"] == 19
    assert (array["hours"], array["minutes"], array["seconds"]) == (15, 5, 30)
    assert array["wday"] == 3
    assert array["yday"] == 199
    assert array["weekday"] == "Wednesday"
    assert array["month"] == "July"
    assert array["timestamp"] == TIMESTAMP


def test_to_date_array_applies_timezone():
    array = GregorianReferenceCalendar().to_date_array(TIMESTAMP, 10)
    assert (array["mday"], array["hours"], array["wday"]) == (20, 1, 4)


def test_render_generic_tokens():
    calendar = GregorianReferenceCalendar()
    array = calendar.to_date_array(TIMESTAMP)
    assert calendar.render_generic_tokens("%H:%M:%S %j", array) == "15:05:30 200"


@pytest.mark.parametrize(
    "ymd,weekday",
    [((2000, 1, 1), 6), ((2023, 7, 19), 3), ((2024, 7, 7), 0)],
)
def test_day_of_week_starts_on_sunday(ymd, weekday):
    assert GregorianReferenceCalendar().day_of_week(*ymd) == weekday
