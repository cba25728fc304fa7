"""Tests for the prompt relay."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest
from openai import APIConnectionError, APIStatusError

from planwizard.config import RELAY_MAX_TOKENS, RELAY_MODEL
from planwizard.run_utils.llm import NO_RESPONSE, ConfigurationError, PromptRelay, RelayError

URL = "https://api.openai.com/v1/chat/completions"


def _client(create: AsyncMock) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def _reply(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


def test_missing_credential_is_configuration_error():
    with pytest.raises(ConfigurationError):
        PromptRelay("")


def test_default_client_does_not_retry():
    relay = PromptRelay("sk-test")
    assert relay.client.max_retries == 0


@pytest.mark.asyncio
async def test_complete_sends_single_user_message():
    create = AsyncMock(return_value=_reply("hello"))
    relay = PromptRelay("sk-test", client=_client(create))

    assert await relay.complete("Say hello") == "hello"

    create.assert_awaited_once_with(
        model=RELAY_MODEL,
        max_completion_tokens=RELAY_MAX_TOKENS,
        messages=[{"role": "user", "content": "Say hello"}],
    )


@pytest.mark.asyncio
async def test_complete_returns_first_text_segment():
    relay = PromptRelay("sk-test", client=_client(AsyncMock(return_value=_reply(None, "second"))))
    assert await relay.complete("x") == "second"


@pytest.mark.asyncio
async def test_complete_without_text_returns_placeholder():
    relay = PromptRelay("sk-test", client=_client(AsyncMock(return_value=_reply())))
    assert await relay.complete("x") == NO_RESPONSE


@pytest.mark.asyncio
async def test_provider_status_error_becomes_relay_error():
    response = httpx.Response(
        529, request=httpx.Request("POST", URL), text='{"error": "overloaded"}'
    )
    error = APIStatusError("overloaded", response=response, body=None)
    relay = PromptRelay("sk-test", client=_client(AsyncMock(side_effect=error)))

    with pytest.raises(RelayError) as exc:
        await relay.complete("x")

    assert exc.value.status == 529
    assert "overloaded" in exc.value.body
    assert "overloaded" not in str(exc.value)


@pytest.mark.asyncio
async def test_connection_error_becomes_relay_error():
    error = APIConnectionError(request=httpx.Request("POST", URL))
    relay = PromptRelay("sk-test", client=_client(AsyncMock(side_effect=error)))

    with pytest.raises(RelayError) as exc:
        await relay.complete("x")

    assert exc.value.status is None
