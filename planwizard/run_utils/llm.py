import logging
from typing import Any, Optional

from openai import APIError, APIStatusError, AsyncOpenAI

from planwizard.config import RELAY_MAX_TOKENS, RELAY_MODEL

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response generated"


class ConfigurationError(Exception):
    """Raised when the relay cannot be built from the current configuration."""


class RelayError(Exception):
    """Raised when the completion provider does not return a usable response.

    ``status`` and ``body`` are kept for server-side logging only; they must
    not be echoed back to API callers.
    """

    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class PromptRelay:
    """Forwards a single prompt to the completion endpoint and unwraps the text."""

    def __init__(
        self,
        api_key: str,
        model: str = RELAY_MODEL,
        max_tokens: int = RELAY_MAX_TOKENS,
        client: Any = None,
    ):
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY not configured")
        self.model = model
        self.max_tokens = max_tokens
        # one attempt per request, transport default timeout
        self.client = client or AsyncOpenAI(api_key=api_key, max_retries=0)

    async def complete(self, prompt: str) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                max_completion_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIStatusError as e:
            body = e.response.text if e.response is not None else ""
            logger.error("Completion provider error %s: %s", e.status_code, body)
            raise RelayError(
                f"Completion provider error: {e.status_code}",
                status=e.status_code,
                body=body,
            ) from e
        except APIError as e:
            logger.error("Completion provider unreachable: %s", e)
            raise RelayError("Completion provider unreachable") from e

        return _first_text(resp)


def _first_text(resp: Any) -> str:
    for choice in getattr(resp, "choices", None) or []:
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None)
        if content:
            return content
    return NO_RESPONSE
