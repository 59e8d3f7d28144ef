"""Base prompt strategy.

This module defines the abstract base class for the translation prompt
strategies and the rule set both of them send to the provider.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict

from ..languages import get_language_name
from ..models.prompt import Message, PromptBundle, RequestKind
from page_translator.core.section_classifier import SectionFieldClassifier


def _field_list() -> str:
    names = list(SectionFieldClassifier.TEXT_FIELDS[:-1])
    names += [f"{name}[]" for name in SectionFieldClassifier.LIST_FIELDS]
    names.append(SectionFieldClassifier.TEXT_FIELDS[-1])
    return ", ".join(names)


TRANSLATABLE_FIELD_LIST = _field_list()
PASSTHROUGH_FIELD_LIST = "imageUrl, type, style, imagePosition, id, order, etc."


class PromptStrategy(ABC):
    """Abstract base class for translation prompt strategies.

    Each strategy builds the system prompt for one request kind. The user
    message is always the verbatim JSON payload so the provider answers with
    a structurally analogous document.
    """

    kind: RequestKind

    @abstractmethod
    def build_system_prompt(self, variables: Dict[str, Any]) -> str:
        """Render the instruction text.

        Args:
            variables: Template variables from get_template_variables

        Returns:
            System prompt text
        """
        pass

    def build(self, payload: Any, target_language: str, model: str) -> PromptBundle:
        """Build the prompt bundle for a payload.

        Args:
            payload: Batch section list or single section, sent unchanged
            target_language: Target language code
            model: Provider model identifier

        Returns:
            PromptBundle ready for the gateway
        """
        variables = self.get_template_variables(target_language)
        return PromptBundle(
            messages=[
                Message(role="system", content=self.build_system_prompt(variables)),
                Message(role="user", content=self.serialize_payload(payload)),
            ],
            model=model,
            kind=self.kind,
            template_variables=variables,
        )

    def get_template_variables(self, target_language: str) -> Dict[str, Any]:
        """Extract template variables for the instruction text."""
        return {
            "target_language": target_language,
            "target_language_name": get_language_name(target_language),
            "translatable_fields": TRANSLATABLE_FIELD_LIST,
            "passthrough_fields": PASSTHROUGH_FIELD_LIST,
        }

    @staticmethod
    def serialize_payload(payload: Any) -> str:
        """Serialize without reordering or renaming keys."""
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
