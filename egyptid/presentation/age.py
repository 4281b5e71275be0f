from datetime import date
from typing import Optional

from egyptid.models.national_id import BirthDate


def calculate_age(birthdate: BirthDate, today: Optional[date] = None) -> int:
    """Whole years lived, counting the birthday itself as the rollover day."""
    today = today or date.today()
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age
