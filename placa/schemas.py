"""
Placa Schema Definitions

The result value shared by every recognition provider.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


COUNTRY = "Brasil"


class PlateFormat(str, Enum):
    """Display label for a classified plate"""
    OLD = "Old format"
    MERCOSUL = "Mercosul format"
    UNKNOWN = "Unknown format"
    INVALID = "Invalid format"


@dataclass(frozen=True)
class LicensePlateResult:
    """
    Outcome of one recognition request.

    ``plate`` holds only uppercase letters and digits and is empty when no
    plate was found. ``is_valid`` is true only for the two Brazilian grammars.
    """
    plate: str
    confidence: float  # 0.0 - 1.0, 1.0 for trusted input
    is_valid: bool
    format: str
    country: str = COUNTRY
    state: Optional[str] = None

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be 0.0-1.0, got {self.confidence}")

    @classmethod
    def empty(cls) -> "LicensePlateResult":
        """Result for requests where no plate-shaped text was found"""
        return cls(
            plate="",
            confidence=0.0,
            is_valid=False,
            format=PlateFormat.UNKNOWN.value,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served over HTTP"""
        return {
            "plate": self.plate,
            "confidence": self.confidence,
            "country": self.country,
            "state": self.state or "",
            "isValid": self.is_valid,
            "format": self.format,
        }
