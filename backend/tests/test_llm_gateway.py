"""Tests for the LiteLLM gateway and provider error classification."""

from types import SimpleNamespace

import pytest

from page_translator.core.translation.errors import (
    PaymentRequired,
    ProviderError,
    RateLimited,
)
from page_translator.core.translation.models import Message, PromptBundle, RequestKind
from page_translator.core.translation.pipeline import llm_gateway
from page_translator.core.translation.pipeline.llm_gateway import (
    LiteLLMGateway,
    classify_provider_failure,
)


class StatusError(Exception):
    def __init__(self, status_code, message="upstream said no"):
        super().__init__(message)
        self.status_code = status_code


class ResponseError(Exception):
    def __init__(self, status_code):
        super().__init__("wrapped")
        self.response = SimpleNamespace(status_code=status_code)


def completion(content, usage=None):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=usage,
    )


@pytest.fixture
def bundle():
    return PromptBundle(
        messages=[
            Message(role="system", content="Translate"),
            Message(role="user", content='[{"id":"a"}]'),
        ],
        model="google/gemini-2.5-flash",
        kind=RequestKind.BATCH,
    )


@pytest.fixture
def gateway():
    return LiteLLMGateway(api_key="secret", base_url="https://gateway.test/v1", timeout=30)


@pytest.fixture
def captured(monkeypatch):
    """Replace acompletion; returns the list of kwargs it was called with."""
    calls = []

    def install(result):
        async def fake_acompletion(**kwargs):
            calls.append(kwargs)
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(llm_gateway, "acompletion", fake_acompletion)
        return calls

    return install


class TestClassification:
    def test_rate_limited(self):
        error = classify_provider_failure(StatusError(429))
        assert isinstance(error, RateLimited)
        assert error.status_code == 429
        assert error.message == "Rate limits exceeded, please try again later."

    def test_payment_required(self):
        error = classify_provider_failure(StatusError(402))
        assert isinstance(error, PaymentRequired)
        assert error.status_code == 402

    @pytest.mark.parametrize("status", [400, 401, 500, 503, None])
    def test_everything_else_is_generic(self, status):
        error = classify_provider_failure(StatusError(status, "secret upstream detail"))

        assert isinstance(error, ProviderError)
        assert error.status_code == 500
        assert error.message == "AI gateway error"
        assert "secret upstream detail" not in error.message
        assert error.details["provider_message"] == "secret upstream detail"

    def test_status_from_wrapped_response(self):
        assert isinstance(classify_provider_failure(ResponseError(429)), RateLimited)

    def test_transport_failure_without_status(self):
        assert isinstance(classify_provider_failure(ConnectionError("reset")), ProviderError)


class TestLiteLLMGateway:
    @pytest.mark.asyncio
    async def test_call_returns_first_choice(self, gateway, bundle, captured):
        usage = SimpleNamespace(prompt_tokens=10, completion_tokens=5, total_tokens=15)
        calls = captured(completion('[{"id":"a"}]', usage))

        response = await gateway.call(bundle)

        assert response.content == '[{"id":"a"}]'
        assert response.model == "google/gemini-2.5-flash"
        assert response.usage.total_tokens == 15

        kwargs = calls[0]
        assert kwargs["model"] == "openai/google/gemini-2.5-flash"
        assert kwargs["api_key"] == "secret"
        assert kwargs["api_base"] == "https://gateway.test/v1"
        assert kwargs["timeout"] == 30
        assert kwargs["messages"] == bundle.to_openai_format()
        assert response.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_none_content_becomes_empty(self, gateway, bundle, captured):
        captured(completion(None))

        response = await gateway.call(bundle)
        assert response.content == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,expected",
        [(429, RateLimited), (402, PaymentRequired), (500, ProviderError)],
    )
    async def test_call_classifies_failures(self, gateway, bundle, captured, status, expected):
        captured(StatusError(status))

        with pytest.raises(expected):
            await gateway.call(bundle)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [429, 503])
    async def test_failed_call_is_attempted_once(self, gateway, bundle, captured, status):
        calls = captured(StatusError(status))

        with pytest.raises((RateLimited, ProviderError)):
            await gateway.call(bundle)

        assert len(calls) == 1
        assert calls[0]["num_retries"] == 0
        assert calls[0]["max_retries"] == 0

    @pytest.mark.asyncio
    async def test_missing_choices_is_provider_error(self, gateway, bundle, captured):
        captured(SimpleNamespace(choices=[], usage=None))

        with pytest.raises(ProviderError):
            await gateway.call(bundle)

    def test_model_routing(self):
        assert LiteLLMGateway.litellm_model("openai/gpt-5") == "openai/openai/gpt-5"
        assert LiteLLMGateway.litellm_model("google/gemini-2.5-flash") == (
            "openai/google/gemini-2.5-flash"
        )
