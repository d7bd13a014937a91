"""
Placa Plate Text Library

Pure text functions for Brazilian license plates: grammar checks,
display formatting and extraction from OCR text. No I/O happens here.
"""

from placa.plates.grammar import (
    PlateClassification,
    classify_plate,
    clean_plate,
    is_valid_brazilian_plate,
)
from placa.plates.formatter import format_plate_display, get_format_label
from placa.plates.result import build_plate_result
from placa.plates.extract import (
    candidate_tokens,
    extract_plate_from_text,
    normalize_text,
    plate_result_from_text,
)

__all__ = [
    'PlateClassification',
    'classify_plate',
    'clean_plate',
    'is_valid_brazilian_plate',
    'format_plate_display',
    'get_format_label',
    'build_plate_result',
    'candidate_tokens',
    'extract_plate_from_text',
    'normalize_text',
    'plate_result_from_text',
]
