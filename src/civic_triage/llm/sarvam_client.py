"""
Sarvam AI client.

Sarvam serves an OpenAI-compatible chat-completions endpoint and
authenticates with an ``api-subscription-key`` header instead of a bearer
token. Default model is ``sarvam-m``.
"""

from typing import Dict, Optional

import httpx

from civic_triage.llm.base_client import BaseLLMClient


class SarvamClient(BaseLLMClient):
    """
    Sarvam-specific client.

    API Endpoints:
    - POST /v1/chat/completions
    """

    provider_name = "sarvam"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.sarvam.ai/v1",
        model: str = "sarvam-m",
        vision_model: Optional[str] = None,
        timeout: float = 30.0,
        max_tokens: int = 500,
        temperature: float = 0.1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            model=model,
            vision_model=vision_model,
            timeout=timeout,
            max_tokens=max_tokens,
            temperature=temperature,
            transport=transport,
        )

    def auth_headers(self) -> Dict[str, str]:
        return {"api-subscription-key": self.api_key or ""}
