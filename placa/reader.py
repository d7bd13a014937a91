"""
Placa Plate Reader

Calling layer that chains recognition providers: the specialized plate
service first, then general OCR, then a vision model. Providers know
nothing about each other; all fallback policy lives here.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from placa.config import PlacaConfig
from placa.exceptions import NoProviderConfiguredError, PlateRecognitionError
from placa.plates.formatter import format_plate_display
from placa.plates.grammar import is_valid_brazilian_plate
from placa.providers.base import ImagePayload, RecognitionProvider
from placa.providers.manual import ManualPlateProvider
from placa.providers.ocr_space import OCRSpaceProvider
from placa.providers.openai_vision import OpenAIVisionProvider
from placa.providers.plate_recognizer import PlateRecognizerProvider
from placa.schemas import LicensePlateResult

logger = logging.getLogger(__name__)


@dataclass
class ReaderStep:
    """One provider in the chain and the confidence it must reach"""
    provider: RecognitionProvider
    min_confidence: float = 0.0

    def accepts(self, result: LicensePlateResult) -> bool:
        return result.is_valid and result.confidence >= self.min_confidence


class PlateReader:
    """
    Reads plates by trying image providers in order.

    A result is accepted when it is valid and meets the step's confidence
    threshold. Unconfigured providers are skipped without being called.
    """

    def __init__(self, steps: List[ReaderStep], manual: Optional[ManualPlateProvider] = None):
        self.steps = steps
        self.manual = manual or ManualPlateProvider()

    @classmethod
    def from_config(cls, config: PlacaConfig) -> "PlateReader":
        """Build the default chain: Plate Recognizer, OCR.Space, OpenAI"""
        return cls([
            ReaderStep(
                PlateRecognizerProvider(
                    api_key=config.plate_recognizer_api_key,
                    timeout=config.request_timeout,
                    camera_id=config.camera_id,
                ),
                min_confidence=config.min_confidence_plate_recognizer,
            ),
            ReaderStep(
                OCRSpaceProvider(
                    api_key=config.ocr_space_api_key,
                    timeout=config.request_timeout,
                    language=config.ocr_language,
                ),
                min_confidence=config.min_confidence_ocr_space,
            ),
            ReaderStep(
                OpenAIVisionProvider(
                    api_key=config.openai_api_key,
                    model=config.openai_model,
                    timeout=config.request_timeout,
                ),
            ),
        ])

    @property
    def configured_providers(self) -> List[str]:
        return [step.provider.name for step in self.steps if step.provider.is_configured()]

    def get_provider(self, name: str) -> RecognitionProvider:
        """Look up a provider in the chain (or the manual one) by name"""
        if name == self.manual.name:
            return self.manual
        for step in self.steps:
            if step.provider.name == name:
                return step.provider
        raise KeyError(f"Unknown provider: {name}")

    def read_plate(self, image: ImagePayload) -> LicensePlateResult:
        """
        Read a plate from an image using the first provider that delivers.

        Args:
            image: Raw image bytes or base64 text (data URL prefix allowed)

        Returns:
            The first accepted result, otherwise the last result obtained

        Raises:
            NoProviderConfiguredError: if no image provider is configured
            PlateRecognitionError: if every configured provider failed
        """
        configured = [step for step in self.steps if step.provider.is_configured()]
        if not configured:
            raise NoProviderConfiguredError("No recognition provider is configured")

        last_result: Optional[LicensePlateResult] = None
        errors: List[PlateRecognitionError] = []

        for step in configured:
            provider = step.provider
            logger.info("Reading plate with %s", provider.name)
            try:
                result = provider.read_plate(image)
            except PlateRecognitionError as e:
                logger.warning("%s failed, trying next provider: %s", provider.name, e)
                errors.append(e)
                continue

            if step.accepts(result):
                logger.info("%s returned %s (confidence %.2f)", provider.name, result.plate, result.confidence)
                return result

            logger.info(
                "%s result rejected (valid=%s, confidence %.2f < %.2f)",
                provider.name, result.is_valid, result.confidence, step.min_confidence,
            )
            last_result = result

        if last_result is not None:
            return last_result

        raise PlateRecognitionError(
            "reader",
            "all recognition providers failed",
            original_error=errors[-1] if errors else None,
        )

    def read_plate_text(self, text: Optional[str]) -> LicensePlateResult:
        """Validate a plate typed in by a user"""
        return self.manual.read_plate(text)

    def validate_plate(self, plate: str) -> Dict[str, Any]:
        """Validity and display form of a plate string"""
        return {
            "isValid": is_valid_brazilian_plate(plate),
            "formattedPlate": format_plate_display(plate),
            "plate": plate.upper(),
        }


_reader_instance = None
_reader_lock = threading.Lock()


def get_reader() -> PlateReader:
    """Get or create global reader instance"""
    global _reader_instance
    if _reader_instance is None:
        with _reader_lock:
            if _reader_instance is None:
                _reader_instance = PlateReader.from_config(PlacaConfig.from_env())
    return _reader_instance
