from typing import Optional


class InvalidIDError(ValueError):
    """
    Base class for every National ID validation failure.

    All failures are terminal: the input is wrong and retrying
    the same string will fail the same way.
    """

    kind = "InvalidID"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class InvalidFormat(InvalidIDError):
    kind = "InvalidFormat"

    def __init__(self, message: str = "The ID must be 14 digits and contain only numbers."):
        super().__init__(message)


class InvalidCentury(InvalidIDError):
    kind = "InvalidCentury"

    def __init__(self, century: int):
        super().__init__(f"Invalid Century: {century}")
        self.century = century


class InvalidDate(InvalidIDError):
    kind = "InvalidDate"

    def __init__(self, day: int, month: int, year: Optional[int]):
        super().__init__(f"Invalid Date of Birth: {day}-{month}-{year}")
        self.day = day
        self.month = month
        self.year = year


class InvalidGovernorate(InvalidIDError):
    kind = "InvalidGovernorate"

    def __init__(self, code: str):
        super().__init__(f"Invalid Governorate Code: {code}")
        self.code = code
