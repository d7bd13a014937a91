"""
OCR.Space Provider

General-purpose OCR service. It returns all text found in the image, so the
plate is extracted locally before validation.
"""

import logging
from typing import Any, Dict, Optional

import requests

from placa.exceptions import PlateRecognitionError
from placa.plates.extract import extract_plate_from_text
from placa.providers.base import ImagePayload, RecognitionProvider, image_to_base64
from placa.providers.manual import ManualPlateProvider
from placa.schemas import LicensePlateResult

logger = logging.getLogger(__name__)


OCR_SPACE_URL = "https://api.ocr.space/parse/image"


class OCRSpaceProvider(RecognitionProvider):
    """
    Reads plates through the OCR.Space parse endpoint.

    Once a candidate is isolated from the OCR text it goes through the
    manual validation path, so confidence is reported as 1.0.
    """

    name = "ocr_space"
    accepts_image = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        language: str = "eng",
        endpoint: str = OCR_SPACE_URL,
    ):
        """
        Args:
            api_key: OCR.Space API key (None leaves the provider unconfigured)
            timeout: Seconds to wait for the service
            language: OCR language code sent to the service
            endpoint: Parse endpoint URL
        """
        self.api_key = api_key or ""
        self.timeout = timeout
        self.language = language
        self.endpoint = endpoint
        self._validator = ManualPlateProvider()

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def read_plate(self, payload: ImagePayload) -> LicensePlateResult:
        if not self.is_configured():
            raise PlateRecognitionError(self.name, "API key not configured")

        data = self._post(image_to_base64(payload))

        parsed_results = data.get('ParsedResults') or []
        if data.get('IsErroredOnProcessing') or not parsed_results:
            logger.info("OCR.Space returned no usable text: %s", data.get('ErrorMessage'))
            return LicensePlateResult.empty()

        if not isinstance(parsed_results, list) or not isinstance(parsed_results[0], dict):
            raise PlateRecognitionError(self.name, "malformed response body")

        text = parsed_results[0].get('ParsedText') or ""
        if not isinstance(text, str):
            raise PlateRecognitionError(self.name, "malformed response body")
        logger.debug("OCR.Space extracted text: %r", text)

        plate = extract_plate_from_text(text)
        if plate is None:
            logger.info("No plate pattern found in OCR.Space text")
            return LicensePlateResult.empty()

        return self._validator.read_plate(plate)

    def _post(self, image_base64: str) -> Dict[str, Any]:
        """Send the multipart parse request and return the decoded body"""
        form = {
            'apikey': (None, self.api_key),
            'base64Image': (None, f"data:image/jpeg;base64,{image_base64}"),
            'language': (None, self.language),
            'isOverlayRequired': (None, 'true'),
            'detectOrientation': (None, 'true'),
            'scale': (None, 'true'),
            'OCREngine': (None, '2'),
            'isTable': (None, 'false'),
            'filetype': (None, 'jpg'),
        }

        try:
            response = requests.post(self.endpoint, files=form, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise PlateRecognitionError(self.name, original_error=e) from e

        if not response.ok:
            raise PlateRecognitionError(self.name, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise PlateRecognitionError(self.name, "malformed response body", original_error=e) from e

        if not isinstance(data, dict):
            raise PlateRecognitionError(self.name, "malformed response body")

        logger.debug("OCR.Space response: %s", data)
        return data
