"""Single-section translation strategy: one JSON object in and out."""

from typing import Any, Dict

from .base import PromptStrategy
from ..models.prompt import RequestKind


class SectionTranslationStrategy(PromptStrategy):
    """Instruction for re-translating one section."""

    kind = RequestKind.SECTION

    def build_system_prompt(self, variables: Dict[str, Any]) -> str:
        return f"""You are a professional translator. Translate the given section to {variables['target_language_name']}.

CRITICAL RULES:
1. Translate ONLY these text fields: {variables['translatable_fields']}
2. PRESERVE all HTML tags and structure exactly as they are
3. KEEP all non-text fields unchanged: {variables['passthrough_fields']}
4. Return ONLY valid JSON object of the section, no explanations
5. Maintain the original tone and style

Return the translated section as a JSON object."""
