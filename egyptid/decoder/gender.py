from egyptid.models.national_id import Gender


def decode_gender(digit: int) -> Gender:
    # 13th digit: even for females, odd for males
    return Gender.FEMALE if digit % 2 == 0 else Gender.MALE
