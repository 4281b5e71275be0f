import re

from egyptid.models.errors import InvalidFormat

# ASCII only: \d would also accept Arabic-Indic digits.
NATIONAL_ID_REGEX = re.compile(r"[0-9]{14}")


def validate_format(candidate) -> str:
    if not isinstance(candidate, str) or not NATIONAL_ID_REGEX.fullmatch(candidate):
        raise InvalidFormat()
    return candidate
