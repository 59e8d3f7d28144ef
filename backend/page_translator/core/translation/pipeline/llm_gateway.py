"""LLM Gateway for provider access.

This module provides an abstract gateway interface for the text-generation
provider, along with an implementation using LiteLLM against an
OpenAI-compatible chat completions endpoint.

Provider failures are classified here by HTTP status so the rest of the
pipeline only ever sees the translation error taxonomy.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Optional

from litellm import acompletion

from ..errors import PaymentRequired, ProviderCallError, ProviderError, RateLimited
from ..models.prompt import PromptBundle
from ..models.response import LLMResponse, TokenUsage
from page_translator.utils.text import preview_for_log

logger = logging.getLogger(__name__)


class LLMGateway(ABC):
    """Abstract gateway for the translation provider."""

    @abstractmethod
    async def call(self, bundle: PromptBundle) -> LLMResponse:
        """Make one chat completion call.

        Args:
            bundle: Prompt bundle with messages and model

        Returns:
            LLMResponse with the first choice's content

        Raises:
            RateLimited: Provider answered 429
            PaymentRequired: Provider answered 402
            ProviderError: Any other provider or transport failure
        """
        pass


def classify_provider_failure(exc: Exception) -> ProviderCallError:
    """Map a provider client exception to the pipeline error taxonomy.

    Args:
        exc: Exception raised by the provider client

    Returns:
        RateLimited, PaymentRequired or ProviderError
    """
    status = _status_code(exc)
    details = {"status_code": status, "provider_message": str(exc)}

    if status == 429:
        return RateLimited(details=details)
    if status == 402:
        return PaymentRequired(details=details)
    return ProviderError(details=details)


def _status_code(exc: Exception) -> Optional[int]:
    status = getattr(exc, "status_code", None)
    if status is None:
        response = getattr(exc, "response", None)
        status = getattr(response, "status_code", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


class LiteLLMGateway(LLMGateway):
    """Gateway to an OpenAI-compatible endpoint through LiteLLM."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: Optional[float] = None,
    ):
        """Initialize LiteLLM gateway.

        Args:
            api_key: Bearer credential for the endpoint
            base_url: Chat completions base URL
            timeout: Request timeout in seconds, owned by the client
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

        logger.info(f"[LLM Gateway] Initialized: base_url={base_url}, timeout={timeout}")

    @staticmethod
    def litellm_model(model: str) -> str:
        """Route a gateway model identifier through the OpenAI-compatible adapter.

        LiteLLM strips one leading ``openai/`` before sending, so the
        gateway always receives the identifier exactly as the caller gave
        it (``google/gemini-2.5-flash``, ``openai/gpt-5``).
        """
        return f"openai/{model}"

    async def call(self, bundle: PromptBundle) -> LLMResponse:
        """Make LLM API call using LiteLLM.

        Args:
            bundle: Prompt bundle

        Returns:
            LLMResponse with the reply text
        """
        start_time = time.time()

        kwargs: dict[str, Any] = {
            "model": self.litellm_model(bundle.model),
            "messages": bundle.to_openai_format(),
            "api_key": self._api_key,
            "api_base": self._base_url,
            # One attempt per call: litellm and the OpenAI client both retry
            # 429 and 5xx by default
            "num_retries": 0,
            "max_retries": 0,
        }
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        logger.debug(f"[LLM Gateway] Calling LiteLLM: model={kwargs['model']}, kind={bundle.kind.value}")

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            error = classify_provider_failure(e)
            logger.error(
                "AI gateway error: status=%s detail=%s",
                error.details.get("status_code"),
                preview_for_log(str(e)),
            )
            raise error from e

        try:
            content = response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            logger.error("AI gateway returned no choices: %s", preview_for_log(repr(response)))
            raise ProviderError(details={"provider_message": "missing choices"}) from e

        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=content,
            model=bundle.model,
            usage=TokenUsage(
                prompt_tokens=getattr(usage, "prompt_tokens", 0) or 0,
                completion_tokens=getattr(usage, "completion_tokens", 0) or 0,
                total_tokens=getattr(usage, "total_tokens", 0) or 0,
            ),
            latency_ms=int((time.time() - start_time) * 1000),
        )
