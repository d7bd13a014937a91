"""
OpenAI Vision Provider

Asks a vision-capable chat model to read the plate and answer in JSON.
The answer is re-validated locally; the model's own validity claims are
not trusted.
"""

import json
import logging
import math
from typing import Any, Optional

import openai

from placa.exceptions import PlateRecognitionError
from placa.plates.result import build_plate_result
from placa.providers.base import ImagePayload, RecognitionProvider, image_to_base64
from placa.schemas import LicensePlateResult

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an expert in reading Brazilian vehicle license plates.
Look at the image and extract ONLY the vehicle's plate.
Answer in JSON with exactly this shape:
{
  "plate": "ABC1234",
  "confidence": 0.95,
  "state": "SP"
}

Brazilian formats:
- Old: ABC1234 (3 letters + 4 digits)
- Mercosul: ABC1D23 (3 letters + 1 digit + 1 letter + 2 digits)

If you cannot find a plate, answer with "plate": "" and "confidence": 0."""


class OpenAIVisionProvider(RecognitionProvider):
    """Reads plates with an OpenAI vision model"""

    name = "openai_vision"
    accepts_image = True

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o",
        timeout: float = 30.0,
        max_tokens: int = 300,
        client: Optional[Any] = None,
    ):
        """
        Args:
            api_key: OpenAI API key (None leaves the provider unconfigured)
            model: Vision-capable chat model
            timeout: Seconds to wait for the API
            max_tokens: Completion budget for the JSON answer
            client: Pre-built OpenAI client; built from api_key when omitted
        """
        self.api_key = api_key or ""
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        if client is None and self.api_key:
            client = openai.OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        self.client = client

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def read_plate(self, payload: ImagePayload) -> LicensePlateResult:
        if not self.is_configured():
            raise PlateRecognitionError(self.name, "API key not configured")

        image_base64 = image_to_base64(payload)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "text",
                                "text": "Identify the vehicle plate in this image and return only the requested JSON.",
                            },
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"},
                            },
                        ],
                    },
                ],
                response_format={"type": "json_object"},
                max_tokens=self.max_tokens,
            )
        except openai.OpenAIError as e:
            raise PlateRecognitionError(self.name, original_error=e) from e

        if not response.choices:
            raise PlateRecognitionError(self.name, "malformed JSON answer")
        content = response.choices[0].message.content or "{}"
        logger.debug("OpenAI vision answer: %s", content)

        try:
            answer = json.loads(content)
        except ValueError as e:
            raise PlateRecognitionError(self.name, "malformed JSON answer", original_error=e) from e
        if not isinstance(answer, dict):
            raise PlateRecognitionError(self.name, "malformed JSON answer")

        try:
            confidence = float(answer.get("confidence") or 0.0)
        except (TypeError, ValueError):
            confidence = 0.0
        if not math.isfinite(confidence):
            confidence = 0.0
        confidence = max(0.0, min(1.0, confidence))

        result = build_plate_result(
            str(answer.get("plate") or ""),
            confidence=confidence,
            state=answer.get("state") or None,
        )
        if not result.plate:
            return LicensePlateResult.empty()
        return result
