import pytest
from egyptid.decoder.extractor import EgyptianID, extract_info, try_extract
from egyptid.models.errors import (
    InvalidCentury,
    InvalidDate,
    InvalidFormat,
    InvalidGovernorate,
)
from egyptid.models.national_id import BirthDate, ExtractedInfo, Gender
from tests.fixtures.national_ids import (
    CANONICAL_ID,
    FOREIGN_MALE_ID,
    BAD_CENTURY_ID,
    BAD_MONTH_ID,
    BAD_GOVERNORATE_ID,
)


def test_canonical_vector():
    info = extract_info(CANONICAL_ID)

    assert info == ExtractedInfo(
        birthdate=BirthDate(year=1999, month=2, day=15),
        governorate="Cairo",
        gender=Gender.FEMALE,
    )
    assert info.to_dict() == {
        "birthdate": {"year": 1999, "month": 2, "day": 15},
        "governorate": "Cairo",
        "gender": "Female",
    }


def test_twenty_first_century_foreign_male():
    info = extract_info(FOREIGN_MALE_ID)

    assert info.birthdate == BirthDate(year=2012, month=12, day=31)
    assert info.governorate == "Foreign"
    assert info.gender == "Male"


def test_unknown_governorate():
    with pytest.raises(InvalidGovernorate) as exc:
        extract_info(BAD_GOVERNORATE_ID)
    assert exc.value.code == "99"


def test_month_thirteen():
    with pytest.raises(InvalidDate):
        extract_info(BAD_MONTH_ID)


def test_bad_century():
    with pytest.raises(InvalidCentury):
        extract_info(BAD_CENTURY_ID)


def test_date_checked_before_governorate():
    """Bad month and bad governorate together: the date error wins."""
    with pytest.raises(InvalidDate):
        extract_info("29913159912305")


def test_check_digit_is_not_validated():
    for last in "0123456789":
        assert extract_info(CANONICAL_ID[:13] + last).governorate == "Cairo"


def test_egyptian_id_properties():
    national_id = EgyptianID(CANONICAL_ID)

    assert national_id.id == CANONICAL_ID
    assert national_id.birthdate == BirthDate(1999, 2, 15)
    assert national_id.governorate == "Cairo"
    assert national_id.gender is Gender.FEMALE


def test_egyptian_id_validates_on_construction():
    with pytest.raises(InvalidFormat):
        EgyptianID("not-an-id")


def test_egyptian_id_field_errors_are_lazy():
    # Format is fine; only the governorate property fails
    national_id = EgyptianID(BAD_GOVERNORATE_ID)

    assert national_id.birthdate.year == 1999
    with pytest.raises(InvalidGovernorate):
        national_id.governorate


def test_try_extract_success():
    result = try_extract(CANONICAL_ID)

    assert result.ok
    assert result.info.governorate == "Cairo"
    assert result.error_kind is None


@pytest.mark.parametrize("national_id,kind", [
    ("12345", "InvalidFormat"),
    (BAD_CENTURY_ID, "InvalidCentury"),
    (BAD_MONTH_ID, "InvalidDate"),
    (BAD_GOVERNORATE_ID, "InvalidGovernorate"),
])
def test_try_extract_failure(national_id, kind):
    result = try_extract(national_id)

    assert not result.ok
    assert result.info is None
    assert result.error_kind == kind
    assert result.to_dict()["error"]["kind"] == kind
