"""
Manual Plate Provider

Validates plates typed in by a user. No recognition service is involved.
"""

from typing import Optional

from placa.plates.result import build_plate_result
from placa.providers.base import RecognitionProvider
from placa.schemas import LicensePlateResult


class ManualPlateProvider(RecognitionProvider):
    """
    Trusts user-typed text.

    The text is cleaned and classified; confidence is always 1.0 and no
    state is reported.
    """

    name = "manual"
    accepts_text = True

    def read_plate(self, payload: Optional[str]) -> LicensePlateResult:
        if payload is None:
            return LicensePlateResult.empty()
        if isinstance(payload, (bytes, bytearray)):
            payload = bytes(payload).decode('utf-8', errors='ignore')
        return build_plate_result(payload, confidence=1.0)

    def is_configured(self) -> bool:
        return True
