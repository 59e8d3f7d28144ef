"""Prompt bundle models.

This module defines the request package handed to the LLM gateway: the
conversation messages plus the model identifier chosen by the caller.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RequestKind(str, Enum):
    """Payload shape of a translation request."""

    BATCH = "batch"  # JSON array of sections
    SECTION = "section"  # single JSON object


class Message(BaseModel):
    """Single message in LLM conversation."""

    role: str = Field(
        ..., description="Message role: 'system', 'user', or 'assistant'"
    )
    content: str = Field(..., description="Message content")


class PromptBundle(BaseModel):
    """Complete prompt package ready for the gateway.

    This is the output of the PromptEngine and input to LLMGateway.
    """

    messages: List[Message] = Field(..., description="Conversation messages")
    model: str = Field(..., description="Provider model identifier")
    kind: RequestKind = Field(..., description="Payload shape sent and expected back")

    template_variables: Dict[str, Any] = Field(
        default_factory=dict, description="Variables used to render the prompts"
    )

    @property
    def system_prompt(self) -> Optional[str]:
        """Extract system prompt from messages."""
        for msg in self.messages:
            if msg.role == "system":
                return msg.content
        return None

    @property
    def user_prompt(self) -> Optional[str]:
        """Extract user prompt from messages."""
        for msg in self.messages:
            if msg.role == "user":
                return msg.content
        return None

    def to_openai_format(self) -> List[Dict[str, str]]:
        """Convert to OpenAI API message format.

        Returns:
            List of message dicts with 'role' and 'content' keys
        """
        return [{"role": m.role, "content": m.content} for m in self.messages]
