"""Main translation pipeline orchestrator.

This module provides the TranslationPipeline class that coordinates the
pipeline components for both translation paths:

- Page runs: sections are partitioned into batches and translated strictly
  one batch after another, producing a stream of progress events that ends
  in exactly one ``complete`` or ``error`` event.
- Single sections: one request, one reply, errors raised to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, List, Optional

from page_translator.core.section_classifier import (
    Section,
    SectionFieldClassifier,
    classifier as default_classifier,
)
from ..errors import ConfigurationError, ProviderCallError, ValidationError
from ..languages import get_language_name
from ..models.batch import partition_sections
from ..models.events import CompleteEvent, ErrorEvent, ProgressEvent, RunEvent
from .batch_translator import BatchTranslator
from .llm_gateway import LiteLLMGateway, LLMGateway
from .output_processor import OutputProcessor
from .prompt_engine import PromptEngine

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], Awaitable[bool]]

DEFAULT_BATCH_SIZE = 5
DEFAULT_MODEL = "google/gemini-2.5-flash"


@dataclass
class PipelineConfig:
    """Configuration for translation pipeline."""

    api_key: Optional[str]
    base_url: str
    default_model: str = DEFAULT_MODEL
    batch_size: int = DEFAULT_BATCH_SIZE
    timeout: Optional[float] = None


class TranslationPipeline:
    """Main orchestrator for the translation pipeline.

    Coordinates the flow:
    Sections -> Batches -> PromptEngine -> LLMGateway -> OutputProcessor -> Events

    The accumulated result of a page run is owned by that run alone; runs
    never share state, so one pipeline instance can serve many requests.
    """

    def __init__(
        self,
        config: PipelineConfig,
        gateway: Optional[LLMGateway] = None,
        field_classifier: Optional[SectionFieldClassifier] = None,
    ):
        """Initialize translation pipeline.

        Args:
            config: Pipeline configuration
            gateway: Provider gateway; built from config when omitted

        Raises:
            ConfigurationError: If the provider credential is missing
        """
        if not config.api_key:
            raise ConfigurationError("AI gateway API key is not configured")
        if config.batch_size <= 0:
            raise ConfigurationError(
                f"Translation batch size must be positive, got {config.batch_size}"
            )

        self.config = config
        self.gateway = gateway or LiteLLMGateway(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )
        self.classifier = field_classifier or default_classifier
        self.output_processor = OutputProcessor()
        self.batch_translator = BatchTranslator(
            self.gateway, self.output_processor, self.classifier
        )

    def resolve_model(self, model: Optional[str]) -> str:
        return model or self.config.default_model

    @staticmethod
    def validate_page_request(sections: Any, target_language: Any) -> None:
        """Reject page runs that cannot start.

        An empty section list is valid and completes immediately.

        Raises:
            ValidationError: If sections or target language are missing
        """
        if sections is None or not isinstance(sections, list):
            raise ValidationError("sections must be a list of page sections")
        _validate_language(target_language)

    async def translate_page_stream(
        self,
        sections: List[Section],
        target_language: str,
        model: Optional[str] = None,
        is_cancelled: Optional[CancelCheck] = None,
    ) -> AsyncIterator[RunEvent]:
        """Translate a page's sections batch by batch.

        A progress event is yielded before each batch's provider call,
        counting only sections from batches that already finished. After
        the last batch a complete event carries every section in page
        order. A fatal provider failure yields one error event and ends the
        run; no further batches are attempted.

        Args:
            sections: Page sections in display order
            target_language: Target language code
            model: Provider model identifier (default from config)
            is_cancelled: Checked at each batch boundary; a true result
                stops the run without further events

        Yields:
            ProgressEvent, then CompleteEvent or ErrorEvent

        Raises:
            ValidationError: If the request is missing required input
        """
        self.validate_page_request(sections, target_language)
        model = self.resolve_model(model)

        batches = partition_sections(sections, self.config.batch_size)
        translated: List[Section] = []
        fallbacks = 0
        tokens_used = 0

        logger.info(
            "Starting page translation: %s sections in %s batches to %s (%s)",
            len(sections),
            len(batches),
            get_language_name(target_language),
            model,
        )

        for batch in batches:
            if is_cancelled is not None and await is_cancelled():
                logger.info(
                    "Page translation cancelled before batch %s of %s",
                    batch.number,
                    batch.total,
                )
                return

            yield ProgressEvent(
                current_batch=batch.number,
                total_batches=batch.total,
                sections_translated=len(translated),
                total_sections=len(sections),
            )

            logger.info(f"Translating batch {batch.number} of {batch.total}")

            try:
                outcome = await self.batch_translator.translate(
                    batch, target_language, model
                )
            except ProviderCallError as e:
                logger.error(
                    "Page translation aborted at batch %s of %s: %s (%s)",
                    batch.number,
                    batch.total,
                    e.code,
                    e.details.get("status_code"),
                )
                yield ErrorEvent(message=e.message)
                return

            logger.info(
                "Batch %s of %s done: %s tokens in %sms%s",
                batch.number,
                batch.total,
                outcome.tokens_used,
                outcome.latency_ms,
                " (kept original text)" if outcome.fell_back else "",
            )
            if outcome.fell_back:
                fallbacks += 1
            tokens_used += outcome.tokens_used
            translated.extend(outcome.sections)

        logger.info(
            f"Successfully translated {len(translated)} sections, {tokens_used} tokens"
            + (f" ({fallbacks} batches kept original text)" if fallbacks else "")
        )
        yield CompleteEvent(sections=translated)

    async def translate_page(
        self,
        sections: List[Section],
        target_language: str,
        model: Optional[str] = None,
    ) -> List[RunEvent]:
        """Run a page translation and collect every event."""
        return [
            event
            async for event in self.translate_page_stream(
                sections, target_language, model
            )
        ]

    async def translate_section(
        self,
        section: Section,
        target_language: str,
        model: Optional[str] = None,
    ) -> Section:
        """Translate a single section.

        Unlike page runs there is no fallback: an unusable reply raises.

        Args:
            section: Section to translate
            target_language: Target language code
            model: Provider model identifier (default from config)

        Returns:
            Translated section with passthrough fields unchanged

        Raises:
            ValidationError: If the section or language is missing
            ProviderCallError: If the provider call fails
            ExtractionFailed: If the reply is not a JSON object
        """
        if not isinstance(section, dict) or not section:
            raise ValidationError("section must be a non-empty object")
        _validate_language(target_language)
        model = self.resolve_model(model)

        bundle = PromptEngine.build_for_section(section, target_language, model)
        response = await self.gateway.call(bundle)
        translated = self.output_processor.extract_section(response.content)

        logger.info(
            "Translated section %s to %s: %s tokens in %sms",
            section.get("id"),
            get_language_name(target_language),
            response.usage.total_tokens,
            response.latency_ms,
        )
        return self.classifier.merge(section, translated)


def _validate_language(target_language: Any) -> None:
    if not isinstance(target_language, str) or not target_language.strip():
        raise ValidationError("targetLanguage is required")


class PipelineFactory:
    """Factory for creating translation pipelines."""

    @staticmethod
    def create(
        api_key: Optional[str],
        base_url: str,
        **kwargs,
    ) -> TranslationPipeline:
        """Create a configured translation pipeline.

        Args:
            api_key: Provider credential
            base_url: Provider base URL
            **kwargs: Additional PipelineConfig fields

        Returns:
            Configured TranslationPipeline

        Raises:
            ConfigurationError: If the credential is missing
        """
        config = PipelineConfig(api_key=api_key, base_url=base_url, **kwargs)
        return TranslationPipeline(config)

    @staticmethod
    def from_settings(settings) -> TranslationPipeline:
        """Create a pipeline from application settings."""
        return PipelineFactory.create(
            api_key=settings.ai_gateway_api_key,
            base_url=settings.ai_gateway_url,
            default_model=settings.default_model,
            batch_size=settings.translation_batch_size,
            timeout=settings.request_timeout,
        )
