from __future__ import annotations

from enum import Enum
from typing import Any, List

import httpx

from src.core.constants import AppSettings
from src.core.prompts import SOLVER_SYSTEM_PROMPT
from src.gemini.schemas import (
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    InlineData,
    Part,
)


class Endpoint(Enum):
    """Centralized API endpoint paths"""

    GENERATE_CONTENT = "/models/{model}:generateContent"


class GeminiError(Exception):
    """Base exception for Gemini client errors"""
    pass


class GeminiTransportError(GeminiError):
    """Raised when the upstream call fails or returns an unreadable body"""
    pass


class GeminiClient:
    """
    Client for the Gemini ``generateContent`` REST endpoint.

    Features:
    - Single attempt per call, no retries
    - Payload built from pydantic models with camelCase aliases
    - Transport and decoding failures wrapped in GeminiTransportError
    - Async context manager support
    """

    def __init__(
        self,
        api_key: str,
        model: str = AppSettings.GEMINI_MODEL.value,
        base_url: str = AppSettings.GEMINI_BASE_URL,
        api_version: str = AppSettings.API_VERSION,
        timeout: float | None = AppSettings.GEMINI_TIMEOUT,
        system_prompt: str = SOLVER_SYSTEM_PROMPT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version.strip("/")
        self.timeout = httpx.Timeout(timeout)
        self.system_prompt = system_prompt

        self._http_client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport
        )

    def build_url(self) -> str:
        path = Endpoint.GENERATE_CONTENT.value.format(model=self.model)
        return f"{self.base_url}/{self.api_version}{path}?key={self.api_key}"

    def build_payload(
        self,
        user_query: str | None,
        base64_image: str | None = None,
        mime_type: str | None = None,
    ) -> GenerateContentRequest:
        """Text part first, image part only when both image and type are given"""
        parts: List[Part] = [Part(text=user_query)]

        if base64_image and mime_type:
            parts.append(
                Part(inline_data=InlineData(mime_type=mime_type, data=base64_image))
            )

        return GenerateContentRequest(
            contents=[Content(parts=parts)],
            system_instruction=Content(parts=[Part(text=self.system_prompt)]),
        )

    async def generate_content(
        self, payload: GenerateContentRequest
    ) -> GenerateContentResponse:
        """
        POST the payload once and parse the upstream JSON.

        Non-2xx responses are not raised: their body usually carries an
        ``error`` object which the caller reports.

        Raises:
            GeminiTransportError: On network failure or a non-JSON body
        """
        try:
            response = await self._http_client.post(
                self.build_url(),
                json=payload.to_wire(),
                headers={"Content-Type": "application/json"},
            )
            raw_result = response.json()
        except httpx.HTTPError as e:
            raise GeminiTransportError(
                f"Request to Gemini failed: {type(e).__name__}") from e
        except ValueError as e:
            raise GeminiTransportError(
                "Gemini returned a non-JSON response") from e

        return GenerateContentResponse.model_validate(raw_result)

    async def aclose(self) -> None:
        """Close underlying HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> 'GeminiClient':
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
