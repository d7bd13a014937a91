"""
Plate Result Builder

Turns a plate string into a LicensePlateResult.
"""

from typing import Optional

from placa.plates.formatter import get_format_label
from placa.plates.grammar import classify_plate, clean_plate
from placa.schemas import LicensePlateResult


def build_plate_result(
    plate_text: Optional[str],
    confidence: float = 1.0,
    state: Optional[str] = None,
) -> LicensePlateResult:
    """
    Clean, classify and label a plate string.

    Args:
        plate_text: Plate text from a user or a recognition service
        confidence: Score to attach (1.0 for trusted input)
        state: Region code, when a service reports one

    Returns:
        LicensePlateResult (the empty result when nothing plate-like remains)
    """
    plate = clean_plate(plate_text or "")
    if not plate:
        return LicensePlateResult.empty()

    return LicensePlateResult(
        plate=plate,
        confidence=confidence,
        is_valid=classify_plate(plate).is_valid,
        format=get_format_label(plate),
        state=state or None,
    )
