"""
License Plate Display

Human-readable rendering and format labels for Brazilian plates.
"""

from placa.plates.grammar import classify_plate, clean_plate
from placa.schemas import PlateFormat


def format_plate_display(plate_text: str) -> str:
    """
    Format plate for human-readable display.

    Old plates get a dash after the letters (ABC-1234). Mercosul plates are
    shown as one block (ABC1D23). Anything else comes back cleaned but
    otherwise untouched.

    Args:
        plate_text: Raw plate text

    Returns:
        Formatted plate string
    """
    plate = clean_plate(plate_text)
    classification = classify_plate(plate)

    if classification.is_old_format:
        return f"{plate[:3]}-{plate[3:]}"

    if classification.is_mercosul_format:
        return f"{plate[:3]}{plate[3]}{plate[4]}{plate[5:]}"

    return plate


def get_format_label(plate_text: str) -> str:
    """
    Label describing which format a plate belongs to.

    Empty input (or input with nothing plate-like left after cleaning)
    is "Unknown format"; text that matches no grammar is "Invalid format".
    """
    plate = clean_plate(plate_text)
    if not plate:
        return PlateFormat.UNKNOWN.value

    classification = classify_plate(plate)
    if classification.is_old_format:
        return PlateFormat.OLD.value
    if classification.is_mercosul_format:
        return PlateFormat.MERCOSUL.value

    return PlateFormat.INVALID.value
