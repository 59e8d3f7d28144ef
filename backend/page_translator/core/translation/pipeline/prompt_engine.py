"""Prompt engine with strategy pattern.

This module provides the PromptEngine class that routes a translation
request to the strategy for its payload kind.
"""

from typing import Any, Dict, List, Type

from page_translator.core.section_classifier import Section
from ..models.batch import Batch
from ..models.prompt import PromptBundle, RequestKind
from ..strategies import (
    BatchTranslationStrategy,
    PromptStrategy,
    SectionTranslationStrategy,
)


class PromptEngine:
    """Factory and router for prompt strategies."""

    # Strategy registry: request kind -> strategy class
    _strategies: Dict[RequestKind, Type[PromptStrategy]] = {
        RequestKind.BATCH: BatchTranslationStrategy,
        RequestKind.SECTION: SectionTranslationStrategy,
    }

    @classmethod
    def get_strategy(cls, kind: RequestKind) -> PromptStrategy:
        """Get strategy instance for a request kind.

        Raises:
            ValueError: If no strategy is registered for the kind
        """
        strategy_class = cls._strategies.get(kind)
        if not strategy_class:
            raise ValueError(f"No strategy registered for request kind: {kind}")
        return strategy_class()

    @classmethod
    def build_for_batch(
        cls, batch: Batch, target_language: str, model: str
    ) -> PromptBundle:
        """Build the request for one batch of sections."""
        return cls.build(RequestKind.BATCH, batch.sections, target_language, model)

    @classmethod
    def build_for_section(
        cls, section: Section, target_language: str, model: str
    ) -> PromptBundle:
        """Build the request for a single section."""
        return cls.build(RequestKind.SECTION, section, target_language, model)

    @classmethod
    def build(
        cls,
        kind: RequestKind,
        payload: Any,
        target_language: str,
        model: str,
    ) -> PromptBundle:
        """Build prompt bundle for the given payload.

        Args:
            kind: Request kind selecting the strategy
            payload: Section list (batch) or section object
            target_language: Target language code
            model: Provider model identifier

        Returns:
            PromptBundle ready for LLM call
        """
        return cls.get_strategy(kind).build(payload, target_language, model)

    @classmethod
    def preview(cls, bundle: PromptBundle) -> Dict[str, Any]:
        """Summarize a bundle for debug logging."""
        messages: List[Dict[str, str]] = bundle.to_openai_format()
        return {
            "kind": bundle.kind.value,
            "model": bundle.model,
            "target_language": bundle.template_variables.get("target_language"),
            "system_chars": len(bundle.system_prompt or ""),
            "payload_chars": len(bundle.user_prompt or ""),
            "messages": len(messages),
        }
