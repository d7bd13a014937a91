"""
Placa - Brazilian License Plate Recognition

This package reads and validates Brazilian vehicle plates (old and Mercosul
formats) from typed text or from images sent to external recognition
services, and reconciles everything into one LicensePlateResult.
"""

from placa.schemas import LicensePlateResult, PlateFormat
from placa.exceptions import (
    PlacaError,
    PlateRecognitionError,
    ImagePayloadError,
    NoProviderConfiguredError,
)
from placa.config import PlacaConfig
from placa.plates import (
    classify_plate,
    extract_plate_from_text,
    format_plate_display,
    get_format_label,
    is_valid_brazilian_plate,
)
from placa.providers import (
    RecognitionProvider,
    ManualPlateProvider,
    OCRSpaceProvider,
    PlateRecognizerProvider,
    OpenAIVisionProvider,
)
from placa.reader import PlateReader, ReaderStep

__version__ = "1.0.0"

__all__ = [
    "LicensePlateResult",
    "PlateFormat",
    "PlacaError",
    "PlateRecognitionError",
    "ImagePayloadError",
    "NoProviderConfiguredError",
    "PlacaConfig",
    "classify_plate",
    "extract_plate_from_text",
    "format_plate_display",
    "get_format_label",
    "is_valid_brazilian_plate",
    "RecognitionProvider",
    "ManualPlateProvider",
    "OCRSpaceProvider",
    "PlateRecognizerProvider",
    "OpenAIVisionProvider",
    "PlateReader",
    "ReaderStep",
]
