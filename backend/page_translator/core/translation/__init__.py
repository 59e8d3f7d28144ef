"""Translation package.

This package provides the section translation pipeline.

Architecture:
- models/: Data models (Batch, run events, PromptBundle, etc.)
- strategies/: Prompt strategies for batch and single-section requests
- pipeline/: Pipeline components (PromptEngine, LLMGateway, etc.)
- errors.py: Error taxonomy shared by the pipeline and the API
- languages.py: Target language table
"""

from .errors import (
    TranslationError,
    ConfigurationError,
    ValidationError,
    ProviderCallError,
    RateLimited,
    PaymentRequired,
    ProviderError,
    ExtractionFailed,
)
from .languages import LANGUAGE_NAMES, get_language_name, list_languages

# Re-export models for convenience
from .models import (
    Batch,
    partition_sections,
    ProgressEvent,
    CompleteEvent,
    ErrorEvent,
    RunEvent,
    Message,
    PromptBundle,
    RequestKind,
    LLMResponse,
)

# Re-export pipeline components
from .pipeline import (
    PromptEngine,
    LLMGateway,
    OutputProcessor,
    BatchTranslator,
    TranslationPipeline,
    PipelineConfig,
    PipelineFactory,
)

__all__ = [
    # Errors
    "TranslationError",
    "ConfigurationError",
    "ValidationError",
    "ProviderCallError",
    "RateLimited",
    "PaymentRequired",
    "ProviderError",
    "ExtractionFailed",
    # Languages
    "LANGUAGE_NAMES",
    "get_language_name",
    "list_languages",
    # Models
    "Batch",
    "partition_sections",
    "ProgressEvent",
    "CompleteEvent",
    "ErrorEvent",
    "RunEvent",
    "Message",
    "PromptBundle",
    "RequestKind",
    "LLMResponse",
    # Pipeline
    "PromptEngine",
    "LLMGateway",
    "OutputProcessor",
    "BatchTranslator",
    "TranslationPipeline",
    "PipelineConfig",
    "PipelineFactory",
]
