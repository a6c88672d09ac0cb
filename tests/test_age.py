"""
Tests for the age calculator
"""
from datetime import date, datetime, timedelta

import pytest
from core.age import calculate_age, max_birth_date, parse_dob

TODAY = date(2024, 3, 15)


def test_age_on_eighteenth_birthday():
    """Exactly 18 years before today is 18"""
    assert calculate_age(date(2006, 3, 15), TODAY) == 18


def test_age_day_after_birthday():
    """18 years and one day is still 18"""
    assert calculate_age(date(2006, 3, 14), TODAY) == 18


def test_age_day_before_birthday():
    """One day short of 18 years is 17"""
    assert calculate_age(date(2006, 3, 16), TODAY) == 17


def test_age_birthday_later_in_year():
    assert calculate_age(date(1990, 12, 1), TODAY) == 33
    assert calculate_age(date(1990, 1, 1), TODAY) == 34


def test_age_leap_day_birthday():
    """Leap-day births turn a year older on Mar 1 in non-leap years"""
    dob = date(2004, 2, 29)
    assert calculate_age(dob, date(2023, 2, 28)) == 18
    assert calculate_age(dob, date(2023, 3, 1)) == 19
    assert calculate_age(dob, date(2024, 2, 29)) == 20


@pytest.mark.parametrize(
    "days_after_anniversary, expected",
    [(-1, 17), (0, 18), (1, 18), (364, 18)],
)
def test_age_counts_completed_anniversaries(days_after_anniversary, expected):
    dob = date(2000, 7, 10)
    anniversary = date(2018, 7, 10)
    assert calculate_age(dob, anniversary + timedelta(days=days_after_anniversary)) == expected


def test_age_accepts_backend_strings():
    assert calculate_age("2006-03-15T00:00:00.000Z", TODAY) == 18
    assert calculate_age("2006-03-16", TODAY) == 17


def test_parse_dob_variants():
    assert parse_dob(date(1990, 1, 2)) == date(1990, 1, 2)
    assert parse_dob(datetime(1990, 1, 2, 13, 45)) == date(1990, 1, 2)
    assert parse_dob("1990-01-02T00:00:00.000Z") == date(1990, 1, 2)
    with pytest.raises(ValueError):
        parse_dob(19900102)
    with pytest.raises(ValueError):
        parse_dob(None)


def test_max_birth_date_is_eighteen_years_back():
    bound = max_birth_date(TODAY)
    assert bound == date(2006, 3, 15)
    assert calculate_age(bound, TODAY) == 18
    assert calculate_age(bound + timedelta(days=1), TODAY) == 17


def test_max_birth_date_on_leap_day():
    bound = max_birth_date(date(2024, 2, 29))
    assert bound == date(2006, 2, 28)
    assert calculate_age(bound, date(2024, 2, 29)) == 18
