from dataclasses import dataclass
from datetime import date
from enum import Enum


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True)
class BirthDate:
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_dict(self) -> dict:
        return {"day": self.day, "month": self.month, "year": self.year}


@dataclass(frozen=True)
class ExtractedInfo:
    """
    Everything a National ID tells us about its holder.
    Built fresh per decode; never mutated.
    """
    birthdate: BirthDate
    governorate: str
    gender: Gender

    def to_dict(self) -> dict:
        return {
            "birthdate": self.birthdate.to_dict(),
            "governorate": self.governorate,
            "gender": self.gender.value,
        }
