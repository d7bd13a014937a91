"""
License Plate Grammar

Classifies plate strings against the two Brazilian plate formats.
"""

import re
from typing import NamedTuple


# Brazilian license plate formats
# Old (pre-2018):   ABC1234  -> 3 letters + 4 digits
# Mercosul:         ABC1D23  -> 3 letters + digit + letter + 2 digits

OLD_FORMAT_PATTERN = re.compile(r'^[A-Z]{3}[0-9]{4}$')
MERCOSUL_FORMAT_PATTERN = re.compile(r'^[A-Z]{3}[0-9][A-Z][0-9]{2}$')

_NON_PLATE_CHARS = re.compile(r'[^A-Z0-9]')


class PlateClassification(NamedTuple):
    """Which grammar a plate string matches (at most one)"""
    is_old_format: bool
    is_mercosul_format: bool

    @property
    def is_valid(self) -> bool:
        return self.is_old_format or self.is_mercosul_format


def clean_plate(plate_text: str) -> str:
    """
    Uppercase plate text and drop everything but A-Z and 0-9.

    Args:
        plate_text: Raw plate text (typed or recognized)

    Returns:
        Cleaned plate string, possibly empty
    """
    if not plate_text:
        return ""
    return _NON_PLATE_CHARS.sub('', plate_text.upper())


def classify_plate(plate_text: str) -> PlateClassification:
    """
    Classify plate text into the old or Mercosul grammar.

    Args:
        plate_text: Raw plate text

    Returns:
        PlateClassification with one flag per grammar
    """
    plate = clean_plate(plate_text)
    return PlateClassification(
        is_old_format=bool(OLD_FORMAT_PATTERN.match(plate)),
        is_mercosul_format=bool(MERCOSUL_FORMAT_PATTERN.match(plate)),
    )


def is_valid_brazilian_plate(plate_text: str) -> bool:
    """Check if plate text matches either Brazilian format"""
    return classify_plate(plate_text).is_valid
