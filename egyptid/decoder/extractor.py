"""
National ID Extraction
----------------------
Layout of the 14 digits (0-indexed):

    [0]     century (2 = 1900s, 3 = 2000s)
    [1-2]   year of birth
    [3-4]   month of birth
    [5-6]   day of birth
    [7-8]   governorate code
    [9-11]  sequence number
    [12]    gender (even = Female, odd = Male)
    [13]    check digit (not verified)

Checks run in a fixed order: format, birth date, governorate.
The first failure aborts the whole extraction.
"""
from egyptid.decoder.birthdate import decode_birthdate
from egyptid.decoder.validators import validate_format
from egyptid.decoder.gender import decode_gender
from egyptid.decoder.governorates import lookup_governorate
from egyptid.models.decode_result import DecodeResult
from egyptid.models.errors import InvalidIDError
from egyptid.models.national_id import BirthDate, ExtractedInfo, Gender

BIRTHDATE_SLICE = slice(0, 7)
GOVERNORATE_SLICE = slice(7, 9)
GENDER_INDEX = 12


class EgyptianID:
    """
    A National ID that has passed the format check.
    Field properties decode lazily and may still raise.
    """

    def __init__(self, national_id: str):
        self._id = validate_format(national_id)

    @property
    def id(self) -> str:
        return self._id

    @property
    def birthdate(self) -> BirthDate:
        return decode_birthdate(self._id[BIRTHDATE_SLICE])

    @property
    def governorate(self) -> str:
        return lookup_governorate(self._id[GOVERNORATE_SLICE])

    @property
    def gender(self) -> Gender:
        return decode_gender(int(self._id[GENDER_INDEX]))

    def extract_info(self) -> ExtractedInfo:
        return ExtractedInfo(
            birthdate=self.birthdate,
            governorate=self.governorate,
            gender=self.gender,
        )

    def __repr__(self) -> str:
        return f"EgyptianID({self._id!r})"


def extract_info(national_id: str) -> ExtractedInfo:
    return EgyptianID(national_id).extract_info()


def try_extract(national_id: str) -> DecodeResult:
    """Same as extract_info, but reports failures as a value."""
    try:
        return DecodeResult.success(extract_info(national_id))
    except InvalidIDError as e:
        return DecodeResult.failure(e.kind, e.message)
