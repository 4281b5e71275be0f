from datetime import date

import pytest
from egyptid.decoder.extractor import extract_info
from egyptid.models.errors import InvalidGovernorate
from egyptid.models.national_id import BirthDate
from egyptid.presentation.age import calculate_age
from egyptid.presentation.formatter import render, render_error, render_info
from tests.fixtures.national_ids import CANONICAL_ID, BAD_GOVERNORATE_ID

BIRTH = BirthDate(year=1999, month=2, day=15)


@pytest.mark.parametrize("today,expected", [
    (date(2026, 2, 14), 26),   # day before birthday
    (date(2026, 2, 15), 27),   # birthday
    (date(2026, 1, 30), 26),   # earlier month
    (date(2026, 3, 1), 27),    # later month
    (date(1999, 2, 15), 0),
])
def test_calculate_age(today, expected):
    assert calculate_age(BIRTH, today) == expected


def test_calculate_age_defaults_to_today():
    today = date.today()
    assert calculate_age(BIRTH) == calculate_age(BIRTH, today)


def test_leap_day_birthday_counts_from_march_first():
    leap = BirthDate(year=2000, month=2, day=29)

    assert calculate_age(leap, date(2025, 2, 28)) == 24
    assert calculate_age(leap, date(2025, 3, 1)) == 25


def test_render_info_lines():
    info = extract_info(CANONICAL_ID)

    assert render_info(info, today=date(2026, 10, 19)) == [
        "Gender: Female",
        "Birth Date: 15-2-1999",
        "Governorate: Cairo",
        "Age: 27 years",
    ]


def test_render_error():
    assert render_error(InvalidGovernorate("99")) == "Error: Invalid Governorate Code: 99"


def test_render_end_to_end():
    assert render(CANONICAL_ID, today=date(2026, 2, 14))[-1] == "Age: 26 years"
    assert render(BAD_GOVERNORATE_ID) == ["Error: Invalid Governorate Code: 99"]
    assert render("abc") == ["Error: The ID must be 14 digits and contain only numbers."]
