import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from planwizard.api.relay.relay_dto import CompletionRequest, CompletionResponse
from planwizard.run_utils.llm import ConfigurationError, PromptRelay, RelayError
from planwizard.utils.deps import get_prompt_relay

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate AI response"

router = APIRouter(
    tags=["Completion"],
    prefix="/api",
)


@router.post(
    "/completion",
    response_model=CompletionResponse,
    summary="Relay a single prompt to the completion provider",
)
async def complete(
    request: Request,
    relay: Optional[PromptRelay] = Depends(get_prompt_relay),
):
    try:
        body = CompletionRequest.model_validate(await request.json())
        if relay is None:
            raise ConfigurationError("OPENAI_API_KEY not configured")
        content = await relay.complete(body.prompt)
    except (ValueError, ValidationError, ConfigurationError, RelayError) as e:
        logger.error("Completion relay failed: %s", e)
        return _failure()
    except Exception:
        logger.exception("Unexpected error in completion relay")
        return _failure()
    return CompletionResponse(success=True, content=content)


def _failure() -> JSONResponse:
    return JSONResponse(
        {"success": False, "error": FAILURE_MESSAGE, "fallback": True},
        status_code=500,
    )
