"""
Plate Recognizer Provider

Specialized plate recognition service. It isolates the plate and scores it
itself, so no text extraction pass is needed.
"""

import logging
import math
from typing import Any, Dict, Optional

import requests

from placa.exceptions import PlateRecognitionError
from placa.plates.result import build_plate_result
from placa.providers.base import ImagePayload, RecognitionProvider, image_to_bytes
from placa.schemas import LicensePlateResult

logger = logging.getLogger(__name__)


PLATE_RECOGNIZER_URL = "https://api.platerecognizer.com/v1/plate-reader/"


class PlateRecognizerProvider(RecognitionProvider):
    """
    Reads plates through the Plate Recognizer plate-reader endpoint.

    The top-ranked result is used as-is: its score becomes the confidence
    and its region code becomes the state.
    """

    name = "plate_recognizer"
    accepts_image = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        camera_id: str = "placa-ocr",
        regions: str = "br",
        endpoint: str = PLATE_RECOGNIZER_URL,
    ):
        self.api_key = api_key or ""
        self.timeout = timeout
        self.camera_id = camera_id
        self.regions = regions
        self.endpoint = endpoint

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def read_plate(self, payload: ImagePayload) -> LicensePlateResult:
        if not self.is_configured():
            raise PlateRecognitionError(self.name, "API key not configured")

        data = self._post(image_to_bytes(payload))

        results = data.get('results') or []
        if not isinstance(results, list):
            raise PlateRecognitionError(self.name, "malformed response body")
        if not results:
            logger.info("Plate Recognizer found no plate")
            return LicensePlateResult.empty()

        top = results[0]
        if not isinstance(top, dict):
            raise PlateRecognitionError(self.name, "malformed response body")

        plate_text = str(top.get('plate') or "").upper()
        try:
            confidence = float(top.get('score') or 0.0)
        except (TypeError, ValueError) as e:
            raise PlateRecognitionError(self.name, "malformed score", original_error=e) from e
        if not math.isfinite(confidence):
            raise PlateRecognitionError(self.name, f"malformed score: {confidence}")
        region = top.get('region') or {}
        code = region.get('code') if isinstance(region, dict) else None
        state = str(code) if code else None

        logger.debug("Plate Recognizer plate=%r score=%s region=%r", plate_text, confidence, state)
        return build_plate_result(plate_text, confidence=min(max(confidence, 0.0), 1.0), state=state)

    def _post(self, image: bytes) -> Dict[str, Any]:
        """Upload the image and return the decoded body"""
        headers = {"Authorization": f"Token {self.api_key}"}
        files = {'upload': ('image.jpg', image, 'image/jpeg')}
        form = {'regions': self.regions, 'camera_id': self.camera_id}

        try:
            response = requests.post(
                self.endpoint,
                headers=headers,
                files=files,
                data=form,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise PlateRecognitionError(self.name, original_error=e) from e

        if not response.ok:
            raise PlateRecognitionError(
                self.name,
                f"API error: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise PlateRecognitionError(self.name, "malformed response body", original_error=e) from e

        if not isinstance(data, dict):
            raise PlateRecognitionError(self.name, "malformed response body")

        logger.debug("Plate Recognizer response: %s", data)
        return data
