"""Label reader using an OpenAI-compatible AI gateway."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx

from ....application.exceptions import LabelPayloadError, LabelReaderError
from ....application.label_payload import LabelPayload, parse_label_response

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are an expert at reading product labels and extracting information.
Extract the following information from product images:
1. Product name
2. Manufacturing date (MFG) in MM/YYYY format if present
3. Expiry date (EXP) in MM/YYYY format if present
4. "Best before" duration if mentioned (e.g., "best before 18 months")
5. Product category (e.g., Food, Beverage, Medicine, Cosmetics)

Return ONLY a valid JSON object with this exact structure:
{
  "productName": "name of the product",
  "manufacturingDate": "MM/YYYY or null",
  "expiryDate": "MM/YYYY or null",
  "bestBeforeDuration": "duration in text or null",
  "category": "category name"
}

If information is not visible or unclear, use null for that field."""


@dataclass(frozen=True, slots=True)
class GatewayConfig:
    """AI gateway configuration."""

    enabled: bool = False
    api_key: str = ""
    url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    model: str = "google/gemini-2.5-flash"
    timeout: float = 30.0
    max_tokens: int = 500


class GatewayLabelReader:
    """
    Label reader implementation over a chat-completions endpoint.

    Implements the LabelReader port.
    """

    USER_PROMPT: ClassVar[str] = "Please extract all product information from this image."

    def __init__(
        self,
        config: GatewayConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the reader.

        Args:
            config: Gateway configuration.
            transport: Optional httpx transport, used to stub the network.
        """
        self._config = config
        self._transport = transport

    def is_configured(self) -> bool:
        """Check if the gateway is properly configured."""
        return self._config.enabled and bool(self._config.api_key)

    async def read_label(self, image_data: str) -> LabelPayload:
        """
        Read label fields from an image data URL.

        Raises:
            LabelReaderError: If the reader is not configured, the request
                fails, or the reply cannot be decoded.
        """
        if not self.is_configured():
            msg = "AI gateway label reader is not configured"
            raise LabelReaderError(msg)

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._config.url,
                    json=self._build_request(image_data),
                    headers={
                        "Authorization": f"Bearer {self._config.api_key}",
                        "Content-Type": "application/json",
                    },
                )
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            msg = f"AI processing failed: {e.response.status_code}"
            logger.exception(msg)
            raise LabelReaderError(msg) from e
        except (httpx.HTTPError, ValueError) as e:
            msg = f"AI gateway request failed: {e}"
            logger.exception(msg)
            raise LabelReaderError(msg) from e

        content = self._extract_content(data)
        logger.debug("AI response: %s", content)

        try:
            return parse_label_response(content)
        except LabelPayloadError:
            logger.exception("Failed to parse AI response")
            raise

    def _build_request(self, image_data: str) -> dict[str, Any]:
        """Build the chat-completions request body."""
        return {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": self.USER_PROMPT},
                        {"type": "image_url", "image_url": {"url": image_data}},
                    ],
                },
            ],
            "max_tokens": self._config.max_tokens,
        }

    @staticmethod
    def _extract_content(data: Any) -> str:
        """Pull the first choice's message content out of the reply."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None

        if not content or not isinstance(content, str):
            msg = "No response from AI"
            raise LabelReaderError(msg)
        return content
