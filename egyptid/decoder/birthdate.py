from datetime import date

from egyptid.models.errors import InvalidCentury, InvalidDate
from egyptid.models.national_id import BirthDate

CENTURY_OFFSETS = {
    2: 1900,
    3: 2000,
}


def decode_birthdate(digits: str) -> BirthDate:
    """
    Decodes the leading 7 digits (CYYMMDD) of a National ID.

    Day overflow for the month (30 February, 31 April, 29 February
    outside leap years) is rejected instead of rolled into the next month.
    """
    century = int(digits[0])
    year = int(digits[1:3])
    month = int(digits[3:5])
    day = int(digits[5:7])

    if century not in CENTURY_OFFSETS:
        raise InvalidCentury(century)
    year += CENTURY_OFFSETS[century]

    if month < 1 or month > 12 or day < 1 or day > 31:
        raise InvalidDate(day, month, year)

    try:
        date(year, month, day)
    except ValueError:
        raise InvalidDate(day, month, year) from None

    return BirthDate(year=year, month=month, day=day)
