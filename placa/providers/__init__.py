"""
Placa Recognition Providers

Interchangeable sources of plate results, all implementing
RecognitionProvider.
"""

from placa.providers.base import (
    ImagePayload,
    RecognitionProvider,
    image_to_base64,
    image_to_bytes,
    strip_data_url,
)
from placa.providers.manual import ManualPlateProvider
from placa.providers.ocr_space import OCRSpaceProvider
from placa.providers.plate_recognizer import PlateRecognizerProvider
from placa.providers.openai_vision import OpenAIVisionProvider

__all__ = [
    'ImagePayload',
    'RecognitionProvider',
    'image_to_base64',
    'image_to_bytes',
    'strip_data_url',
    'ManualPlateProvider',
    'OCRSpaceProvider',
    'PlateRecognizerProvider',
    'OpenAIVisionProvider',
]
