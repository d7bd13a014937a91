"""
Base Recognition Provider Interface

Abstract class for all plate recognition sources, plus helpers for the
image payloads they receive.
"""

import base64
import binascii
import re
from abc import ABC, abstractmethod
from typing import Union

from placa.exceptions import ImagePayloadError
from placa.schemas import LicensePlateResult


ImagePayload = Union[str, bytes]

_DATA_URL_PREFIX = re.compile(r'^data:image/[A-Za-z0-9.+-]+;base64,')
_WHITESPACE = re.compile(r'\s+')


def strip_data_url(payload: str) -> str:
    """Remove an optional ``data:image/<type>;base64,`` prefix"""
    return _DATA_URL_PREFIX.sub('', payload.strip(), count=1)


def image_to_bytes(payload: ImagePayload) -> bytes:
    """
    Decode an image payload into raw bytes.

    Args:
        payload: Raw image bytes, or base64 text with or without a data URL prefix

    Returns:
        Image bytes

    Raises:
        ImagePayloadError: if the text is not valid base64
    """
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)

    data = _WHITESPACE.sub('', strip_data_url(payload))
    if not data:
        raise ImagePayloadError("Image payload is empty")
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImagePayloadError(f"Image payload is not valid base64: {e}") from e


def image_to_base64(payload: ImagePayload) -> str:
    """Bare base64 text for an image payload (no data URL prefix)"""
    if isinstance(payload, (bytes, bytearray)):
        return base64.b64encode(bytes(payload)).decode('ascii')
    # Round-trip so malformed text fails here rather than upstream
    return base64.b64encode(image_to_bytes(payload)).decode('ascii')


class RecognitionProvider(ABC):
    """
    Abstract base class for all plate recognition providers.

    Providers turn an image or typed text into a LicensePlateResult.
    They hold only static configuration, so one instance can serve
    concurrent calls.
    """

    name: str = "provider"
    accepts_image: bool = False
    accepts_text: bool = False

    @abstractmethod
    def read_plate(self, payload: ImagePayload) -> LicensePlateResult:
        """
        Read a plate from the provider's input.

        Args:
            payload: Image payload for image providers, typed text for text providers

        Returns:
            LicensePlateResult (empty when no plate was found)

        Raises:
            PlateRecognitionError: on transport or upstream failures
        """
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """True if the provider holds the credential it needs"""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', configured={self.is_configured()})"
