from datetime import date, datetime

import pytest

from hijri_calendar.api.converter import (
    ISLAMIC_EPOCH,
    GregorianDate,
    HijriDate,
    coerce_gregorian,
    coerce_hijri,
    convert_from_gregorian,
    convert_to_gregorian,
    gregorian_to_hijri,
    hijri_to_gregorian,
    hijri_to_jd,
    jd_to_hijri,
)
from hijri_calendar.api.julian_day import gregorian_to_jd


@pytest.mark.parametrize(
    "value,expected",
    [
        (date(2000, 1, 1), "1420-09-24"),
        ("2023-07-19", "1445-01-01"),
        ((2023, 7, 18), "1444-12-29"),
        ("2024/07/08", "1446-01-01"),
    ],
)
def test_gregorian_to_hijri_known_values(value, expected):
    assert gregorian_to_hijri(value).isoformat() == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (HijriDate(1445, 1, 1), date(2023, 7, 19)),
        ("1420-09-24", date(2000, 1, 1)),
        ((1, 1, 1), date(622, 7, 19)),
    ],
)
def test_hijri_to_gregorian_known_values(value, expected):
    assert hijri_to_gregorian(value) == expected


def test_epoch_is_day_one():
    assert hijri_to_jd(1, 1, 1) == ISLAMIC_EPOCH
    assert jd_to_hijri(ISLAMIC_EPOCH) == (1, 1, 1)


def test_hijri_year_lengths_follow_thirty_year_cycle():
    lengths = [hijri_to_jd(year + 1, 1, 1) - hijri_to_jd(year, 1, 1) for year in range(1, 31)]
    assert set(lengths) == {354, 355}
    assert lengths.count(355) == 11


@pytest.mark.parametrize("year", [1, 622, 1317, 1400, 1445, 1473, 2000])
def test_hijri_roundtrip_through_julian_day(year):
    for month in range(1, 13):
        for day in (1, 15, 29):
            assert jd_to_hijri(hijri_to_jd(year, month, day)) == (year, month, day)


def test_gregorian_roundtrip_over_supported_range():
    for year in range(1899, 2078, 7):
        for month in range(1, 13):
            for day in (1, 14, 28):
                hijri = convert_from_gregorian(year, month, day)
                back = convert_to_gregorian(hijri.year, hijri.month, hijri.day)
                assert (back.year, back.month, back.day) == (year, month, day)


def test_consecutive_gregorian_days_stay_consecutive():
    start = gregorian_to_jd(2023, 1, 1)
    previous = jd_to_hijri(start)
    for offset in range(1, 800):
        current = jd_to_hijri(start + offset)
        assert hijri_to_jd(*current) - hijri_to_jd(*previous) == 1
        previous = current


def test_time_of_day_is_carried_through():
    hijri = convert_from_gregorian(2023, 7, 19, 15, 45)
    assert hijri == HijriDate(1445, 1, 1, 15, 45)
    assert convert_to_gregorian(1445, 1, 1, 8, 30) == GregorianDate(2023, 7, 19, 8, 30)
    assert gregorian_to_hijri(datetime(2023, 7, 19, 23, 59)).hour == 23


def test_out_of_range_values_are_extrapolated():
    assert convert_to_gregorian(1445, 13, 1).to_date() == date(2024, 7, 7)
    assert convert_to_gregorian(1445, 1, 35).to_date() == date(2023, 8, 22)


def test_dataclass_helpers():
    hijri = HijriDate(1445, 1, 1)
    assert hijri.to_gregorian().to_date() == date(2023, 7, 19)
    assert GregorianDate(2023, 7, 19).to_hijri() == hijri
    assert hijri.isoformat("/") == "1445/01/01"


def test_coerce_helpers_accept_various_inputs():
    assert coerce_gregorian("2024/03/20") == (2024, 3, 20)
    assert coerce_gregorian(datetime(2024, 3, 20, 10, 0)) == (2024, 3, 20)
    assert coerce_gregorian(GregorianDate(2022, 11, 5)) == (2022, 11, 5)
    assert coerce_hijri("1445/09/01") == (1445, 9, 1)
    assert coerce_hijri([1445, "9", 1]) == (1445, 9, 1)
    assert coerce_hijri(HijriDate(1402, 12, 30)) == (1402, 12, 30)


@pytest.mark.parametrize("value", ["1445-09", "1445-09-xx", ""])
def test_coerce_rejects_malformed_strings(value):
    with pytest.raises(ValueError):
        coerce_hijri(value)


@pytest.mark.parametrize("value", [42, (1, 2), None])
def test_coerce_rejects_other_types(value):
    with pytest.raises(TypeError):
        coerce_gregorian(value)
