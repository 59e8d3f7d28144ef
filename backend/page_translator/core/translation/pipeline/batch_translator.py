"""Batch translator.

Runs one batch through request building, the provider call and extraction.
A batch always produces exactly as many sections as it received, in the
same order: when the reply cannot be used, the original sections stand in.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from page_translator.core.section_classifier import (
    Section,
    SectionFieldClassifier,
    classifier as default_classifier,
)
from ..errors import ExtractionFailed
from ..models.batch import Batch
from .llm_gateway import LLMGateway
from .output_processor import OutputProcessor
from .prompt_engine import PromptEngine

logger = logging.getLogger(__name__)


@dataclass
class BatchOutcome:
    """Sections produced for one batch."""

    batch: Batch
    sections: List[Section]
    fell_back: bool = False
    tokens_used: int = 0
    latency_ms: int = 0


class BatchTranslator:
    """Translate one batch with originals as the fallback."""

    def __init__(
        self,
        gateway: LLMGateway,
        output_processor: Optional[OutputProcessor] = None,
        field_classifier: Optional[SectionFieldClassifier] = None,
    ):
        self.gateway = gateway
        self.output_processor = output_processor or OutputProcessor()
        self.classifier = field_classifier or default_classifier

    async def translate(
        self,
        batch: Batch,
        target_language: str,
        model: str,
    ) -> BatchOutcome:
        """Translate a batch.

        Args:
            batch: Sections to translate
            target_language: Target language code
            model: Provider model identifier

        Returns:
            BatchOutcome with one section per input section

        Raises:
            ProviderCallError: The provider call failed; the run must stop
        """
        bundle = PromptEngine.build_for_batch(batch, target_language, model)
        logger.debug("Batch %s request: %s", batch.number, PromptEngine.preview(bundle))

        # Provider failures propagate: they are fatal to the run
        response = await self.gateway.call(bundle)

        try:
            translated = self.output_processor.extract_sections(response.content)
            sections = self._merge(batch, translated)
        except ExtractionFailed as e:
            logger.warning(
                "Batch %s of %s: %s, keeping %s original sections",
                batch.number,
                batch.total,
                e.message,
                len(batch),
            )
            return BatchOutcome(
                batch=batch,
                sections=list(batch.sections),
                fell_back=True,
                tokens_used=response.usage.total_tokens,
                latency_ms=response.latency_ms,
            )

        return BatchOutcome(
            batch=batch,
            sections=sections,
            tokens_used=response.usage.total_tokens,
            latency_ms=response.latency_ms,
        )

    def _merge(self, batch: Batch, translated: List[object]) -> List[Section]:
        """Pair translated entries with originals by position."""
        if len(translated) != len(batch):
            raise ExtractionFailed(
                raw_text="",
                message=(
                    f"AI response has {len(translated)} sections, "
                    f"expected {len(batch)}"
                ),
                details={"expected": len(batch), "received": len(translated)},
            )
        return [
            self.classifier.merge(original, candidate)
            for original, candidate in zip(batch.sections, translated)
        ]
