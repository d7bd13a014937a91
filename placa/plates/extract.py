"""
Plate Text Extraction

Finds the most likely Brazilian plate inside a block of OCR text.
OCR services return whole-image text ("PLACA: ABC-1234 BRASIL"), so the
plate has to be dug out before it can be validated.
"""

import logging
import re
from typing import List, Optional

from placa.plates.grammar import MERCOSUL_FORMAT_PATTERN, OLD_FORMAT_PATTERN
from placa.plates.result import build_plate_result
from placa.schemas import LicensePlateResult

logger = logging.getLogger(__name__)


# Ordered by priority, first pattern with any match wins.
# Tight patterns beat loose ones even when the loose match comes first.
EXTRACTION_PATTERNS = [
    re.compile(r'[A-Z]{3}[0-9][A-Z][0-9]{2}'),          # Mercosul: ABC1D23
    re.compile(r'[A-Z]{3}[0-9]{4}'),                    # Old: ABC1234
    re.compile(r'[A-Z]{3}\s*-?\s*[0-9][A-Z][0-9]{2}'),  # Mercosul: ABC - 1D23
    re.compile(r'[A-Z]{3}\s*-?\s*[0-9]{4}'),            # Old: ABC - 1234
]

_LINE_BREAKS = re.compile(r'[\r\n]+')
_WHITESPACE = re.compile(r'\s+')
_SEPARATORS = re.compile(r'[\s\-]')
_ALPHANUMERIC_RUN = re.compile(r'[A-Z0-9]+')


def normalize_text(text: str) -> str:
    """Collapse line breaks and whitespace to single spaces and uppercase"""
    if not text:
        return ""
    text = _LINE_BREAKS.sub(' ', text)
    text = _WHITESPACE.sub(' ', text)
    return text.upper()


def candidate_tokens(text: str) -> List[str]:
    """Maximal alphanumeric runs of the normalized text, in order"""
    return _ALPHANUMERIC_RUN.findall(normalize_text(text))


def extract_plate_from_text(text: Optional[str]) -> Optional[str]:
    """
    Extract the most probable plate from recognized text.

    Steps:
    1. Normalize line breaks, whitespace and case
    2. Search the whole text with each pattern in priority order
    3. Fall back to 7-character alphanumeric tokens

    Args:
        text: Raw text returned by an OCR service

    Returns:
        Plate candidate without separators, or None
    """
    if not text:
        return None

    normalized = normalize_text(text)
    logger.debug("Normalized OCR text: %r", normalized)

    for pattern in EXTRACTION_PATTERNS:
        match = pattern.search(normalized)
        if match:
            plate = _SEPARATORS.sub('', match.group(0))
            logger.debug("Pattern %s matched %r", pattern.pattern, plate)
            return plate

    for token in _ALPHANUMERIC_RUN.findall(normalized):
        if MERCOSUL_FORMAT_PATTERN.match(token) or OLD_FORMAT_PATTERN.match(token):
            logger.debug("Token fallback matched %r", token)
            return token

    logger.debug("No plate pattern found in text")
    return None


def plate_result_from_text(text: Optional[str]) -> LicensePlateResult:
    """
    Extract a plate from free text and validate it.

    Returns the empty result when no candidate is found.
    """
    plate = extract_plate_from_text(text)
    if plate is None:
        return LicensePlateResult.empty()
    return build_plate_result(plate, confidence=1.0)
