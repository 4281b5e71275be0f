"""
Text rendering for decoded IDs.

Output lines match what the web form shows:
    Gender: Female
    Birth Date: 15-2-1999
    Governorate: Cairo
    Age: 27 years
"""
from datetime import date
from typing import List, Optional

from egyptid.decoder.extractor import try_extract
from egyptid.models.errors import InvalidIDError
from egyptid.models.national_id import ExtractedInfo
from egyptid.presentation.age import calculate_age


def format_birthdate(info: ExtractedInfo) -> str:
    b = info.birthdate
    return f"{b.day}-{b.month}-{b.year}"


def render_info(info: ExtractedInfo, today: Optional[date] = None) -> List[str]:
    age = calculate_age(info.birthdate, today)
    return [
        f"Gender: {info.gender.value}",
        f"Birth Date: {format_birthdate(info)}",
        f"Governorate: {info.governorate}",
        f"Age: {age} years",
    ]


def render_error(error) -> str:
    message = error.message if isinstance(error, InvalidIDError) else str(error)
    return f"Error: {message}"


def render(national_id: str, today: Optional[date] = None) -> List[str]:
    result = try_extract(national_id)
    if not result.ok:
        return [f"Error: {result.error_message}"]
    return render_info(result.info, today)
