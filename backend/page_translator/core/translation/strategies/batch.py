"""Batch translation strategy: several sections, JSON array in and out."""

from typing import Any, Dict

from .base import PromptStrategy
from ..models.prompt import RequestKind


class BatchTranslationStrategy(PromptStrategy):
    """Instruction for translating a batch of page sections."""

    kind = RequestKind.BATCH

    def build_system_prompt(self, variables: Dict[str, Any]) -> str:
        return f"""You are a professional translator. Translate the given page sections to {variables['target_language_name']}.

CRITICAL RULES:
1. Translate ONLY these text fields: {variables['translatable_fields']}
2. PRESERVE all HTML tags and structure exactly as they are
3. KEEP all non-text fields unchanged: {variables['passthrough_fields']}
4. Return ONLY valid JSON array of sections, no explanations
5. Maintain the original tone and style

Return the translated sections as a JSON array."""
