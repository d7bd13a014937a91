"""
Placa Configuration

Credentials and request limits for the recognition services.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class PlacaConfig:
    """Configuration for plate recognition"""

    # Service credentials (optional, a missing key just disables the service)
    ocr_space_api_key: Optional[str] = None
    plate_recognizer_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"

    # Outbound calls
    request_timeout: float = 30.0  # seconds, per call
    ocr_language: str = "eng"
    camera_id: str = "placa-ocr"

    # Fallback thresholds
    min_confidence_plate_recognizer: float = 0.7
    min_confidence_ocr_space: float = 0.8

    def __post_init__(self):
        if self.request_timeout <= 0:
            raise ValueError(f"Request timeout must be positive, got {self.request_timeout}")
        for name in ("min_confidence_plate_recognizer", "min_confidence_ocr_space"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be 0.0-1.0, got {value}")

    @classmethod
    def from_env(cls) -> "PlacaConfig":
        """Create config from environment variables (and a local .env file)"""
        load_dotenv()
        return cls(
            ocr_space_api_key=os.getenv("OCR_SPACE_API_KEY") or None,
            plate_recognizer_api_key=os.getenv("PLATE_RECOGNIZER_API_KEY") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_model=os.getenv("PLACA_OPENAI_MODEL", "gpt-4o"),
            request_timeout=float(os.getenv("PLACA_REQUEST_TIMEOUT", "30")),
            ocr_language=os.getenv("PLACA_OCR_LANGUAGE", "eng"),
            camera_id=os.getenv("PLACA_CAMERA_ID", "placa-ocr"),
            min_confidence_plate_recognizer=float(
                os.getenv("PLACA_MIN_CONFIDENCE_PLATE_RECOGNIZER", "0.7")
            ),
            min_confidence_ocr_space=float(
                os.getenv("PLACA_MIN_CONFIDENCE_OCR_SPACE", "0.8")
            ),
        )
