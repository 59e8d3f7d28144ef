"""Translation pipeline data models.

This module provides structured data models for the translation pipeline,
ensuring clear contracts between components.
"""

from .batch import Batch, partition_sections
from .events import CompleteEvent, ErrorEvent, ProgressEvent, RunEvent
from .payload import ExtractedPayload, PayloadShape
from .prompt import Message, PromptBundle, RequestKind
from .response import LLMResponse, TokenUsage

__all__ = [
    # Batch models
    "Batch",
    "partition_sections",
    # Run events
    "ProgressEvent",
    "CompleteEvent",
    "ErrorEvent",
    "RunEvent",
    # Extracted payload
    "ExtractedPayload",
    "PayloadShape",
    # Prompt models
    "Message",
    "PromptBundle",
    "RequestKind",
    # Response models
    "TokenUsage",
    "LLMResponse",
]
