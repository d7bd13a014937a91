"""
Placa Exceptions

Errors raised when a plate cannot be read because of the outside world.
Plain "no plate found" outcomes are not errors and never raise.
"""

from typing import Optional, Any


class PlacaError(Exception):
    """Base exception for all placa errors"""
    def __init__(self, message: str, *args: Any):
        super().__init__(message, *args)
        self.message = message


class PlateRecognitionError(PlacaError):
    """Raised when a recognition service is unreachable or answers with garbage"""
    def __init__(
        self,
        provider: str,
        message: str = "image processing failed",
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        full_message = f"[{provider}] {message}"
        if status_code is not None:
            full_message += f" (HTTP {status_code})"
        if original_error:
            full_message += f": {original_error}"
        super().__init__(full_message)
        self.provider = provider
        self.status_code = status_code
        self.original_error = original_error


class ImagePayloadError(PlacaError):
    """Raised when an image payload is not valid base64"""
    pass


class NoProviderConfiguredError(PlacaError):
    """Raised when no recognition provider holds the credential it needs"""
    pass
