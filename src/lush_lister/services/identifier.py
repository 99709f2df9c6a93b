from __future__ import annotations

import base64
import json
import logging
from typing import List, Optional

import requests

from lush_lister.config import IdentifierConfig
from lush_lister.exceptions import IdentificationError


logger = logging.getLogger(__name__)

PROMPT = (
    "You are a luxury goods and commercial product expert. Identify exactly what "
    "product is in this image. Provide 3 likely commercial product names (including "
    "brand and model if possible). Return the result as a JSON array of strings only."
)


class ProductIdentifier:
    """Thin client for Gemini's ``generateContent`` endpoint.

    - Sends the image inline with a fixed prompt and asks for a JSON array.
    - Any transport or decoding problem becomes ``IdentificationError``.
    """

    def __init__(self, config: IdentifierConfig | None = None) -> None:
        self.config = config or IdentifierConfig()

    def _url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/models/{self.config.model}:generateContent"

    def _body(self, image: bytes, mime_type: str) -> dict:
        return {
            "contents": [
                {
                    "parts": [
                        {"inline_data": {"mime_type": mime_type, "data": base64.b64encode(image).decode("ascii")}},
                        {"text": PROMPT},
                    ]
                }
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": {"type": "ARRAY", "items": {"type": "STRING"}},
            },
        }

    def identify(self, image: bytes, mime_type: Optional[str] = None) -> List[str]:
        if not self.config.api_key:
            raise IdentificationError("GEMINI_API_KEY is not configured")
        try:
            resp = requests.post(
                self._url(),
                params={"key": self.config.api_key},
                json=self._body(image, mime_type or "image/jpeg"),
                timeout=self.config.timeout_secs,
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Identification request failed: %s", e)
            raise IdentificationError("Identification failed. Try again.") from e
        return self._options(payload)

    def _options(self, payload: dict) -> List[str]:
        try:
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
            result = json.loads(text)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("Malformed identification response: %s", e)
            raise IdentificationError("Identification failed. Try again.") from e
        if not isinstance(result, list):
            return []
        return [str(x) for x in result if x][: self.config.max_options]
