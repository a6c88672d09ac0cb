from datetime import date, datetime
from typing import Optional, Union
from utils.constants import MIN_AGE


def parse_dob(value: Union[date, datetime, str]) -> date:
    """ Normalise a date of birth coming from the backend or a form input to a plain date. """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        # backend sends e.g. "1990-05-01T00:00:00.000Z"; keep the calendar date only
        return date.fromisoformat(value.strip().split("T")[0])
    raise ValueError(f"Unsupported date of birth value: {value!r}")


def calculate_age(dob: Union[date, datetime, str], today: Optional[date] = None) -> int:
    """
    Whole years between ``dob`` and ``today``.

    The year difference is reduced by one while this year's birthday has not
    happened yet, so the age goes up on the anniversary itself.
    """
    birth = parse_dob(dob)
    today = today or date.today()

    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def max_birth_date(today: Optional[date] = None, min_age: int = MIN_AGE) -> date:
    """ Latest date of birth that still gives ``min_age`` today (upper bound of the date input). """
    today = today or date.today()
    try:
        return today.replace(year=today.year - min_age)
    except ValueError:
        # Feb 29 in a non-leap target year
        return today.replace(year=today.year - min_age, day=28)
