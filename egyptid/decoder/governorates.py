"""
Governorate Codes
-----------------
Digits 8-9 of a National ID name the governorate of birth.
"""
from types import MappingProxyType

from egyptid.models.errors import InvalidGovernorate

GOVERNORATES = MappingProxyType({
    "01": "Cairo",
    "02": "Alexandria",
    "03": "Port Said",
    "04": "Suez",
    "11": "Damietta",
    "12": "Dakahlia",
    "13": "Al Sharqia",
    "14": "Kaliobeya",
    "15": "Kafr El-Sheikh",
    "16": "Al Gharbia",
    "17": "Al Monoufia",
    "18": "Al Beheira",
    "19": "Ismailia",
    "21": "Giza",
    "22": "Beni Suef",
    "23": "Fayoum",
    "24": "Al Menia",
    "25": "Assiut",
    "26": "Sohag",
    "27": "Qena",
    "28": "Aswan",
    "29": "Luxor",
    "31": "Red Sea",
    "32": "New Valley",
    "33": "Matrouh",
    "34": "North Sinai",
    "35": "South Sinai",
    "88": "Foreign",
})


def lookup_governorate(code: str) -> str:
    """Returns the display name for a 2-digit governorate code."""
    try:
        return GOVERNORATES[code]
    except KeyError:
        raise InvalidGovernorate(code) from None
