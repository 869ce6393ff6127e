from dataclasses import dataclass, field
from typing import Any, Callable, Dict
import logging

from src.api.schemas import MessageResponse, SolveRequest, SolveResponse
from src.core.config import Settings
from src.core.constants import ERROR_MESSAGE_LIMIT, Messages
from src.core.prompts import UPSTREAM_ERROR_TEMPLATE
from src.gemini.client import GeminiClient

# Module-level logger for observability
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverResult:
    """Status code plus JSON body handed back to the caller."""
    status_code: int
    content: Dict[str, Any] = field(default_factory=dict)


def format_upstream_error(message: str) -> str:
    """Wrap the first characters of an upstream error in LaTeX markup."""
    return UPSTREAM_ERROR_TEMPLATE.format(message=message[:ERROR_MESSAGE_LIMIT])


class RequestForwarder:
    """Forwards one math problem to Gemini and maps the answer to a response.

    The client factory is only called once both the method and the key have
    been checked; those two paths never open a connection.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: Callable[[Settings], GeminiClient] | None = None,
    ):
        self.settings = settings
        self.client_factory = client_factory or (
            lambda s: GeminiClient(**s.gemini_config)
        )

    async def handle(self, method: str, body: bytes | str) -> SolverResult:
        if method.upper() != "POST":
            return SolverResult(
                405, MessageResponse(message=Messages.METHOD_NOT_ALLOWED).model_dump()
            )

        if not self.settings.has_api_key:
            logger.error("GEMINI_API_KEY is not set in environment variables.")
            return SolverResult(
                500, MessageResponse(message=Messages.API_KEY_MISSING).model_dump()
            )

        try:
            return await self._forward(body)
        except Exception:
            logger.exception("Backend processing failed")
            return SolverResult(
                500, MessageResponse(message=Messages.INTERNAL_ERROR).model_dump()
            )

    async def _forward(self, body: bytes | str) -> SolverResult:
        request = SolveRequest.model_validate_json(body)

        async with self.client_factory(self.settings) as client:
            payload = client.build_payload(
                request.userQuery, request.base64Image, request.mimeType
            )
            result = await client.generate_content(payload)

        solution = result.first_text
        if solution:
            return SolverResult(200, SolveResponse(solution=solution).model_dump())

        error_message = result.error_message or Messages.NO_CONTENT
        logger.error(
            "Gemini API Error: %s | candidates=%d",
            error_message,
            len(result.candidates),
        )
        return SolverResult(
            500, SolveResponse(solution=format_upstream_error(error_message)).model_dump()
        )
