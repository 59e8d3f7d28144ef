"""LLM response models.

Provider-agnostic representation of a chat completion reply. Only the text
of the first choice matters to the pipeline.
"""

from typing import Any

from pydantic import BaseModel, Field


class TokenUsage(BaseModel):
    """Token consumption details."""

    prompt_tokens: int = Field(default=0, description="Tokens in the prompt")
    completion_tokens: int = Field(default=0, description="Tokens in the completion")
    total_tokens: int = Field(default=0, description="Total tokens used")

    def model_post_init(self, __context: Any) -> None:
        """Calculate total if not provided."""
        if not self.total_tokens and (self.prompt_tokens or self.completion_tokens):
            self.total_tokens = self.prompt_tokens + self.completion_tokens


class LLMResponse(BaseModel):
    """Reply from the provider."""

    content: str = Field(..., description="choices[0].message.content")
    model: str = Field(..., description="Model identifier used")

    usage: TokenUsage = Field(
        default_factory=TokenUsage, description="Token usage details"
    )
    latency_ms: int = Field(default=0, description="Response latency in milliseconds")
