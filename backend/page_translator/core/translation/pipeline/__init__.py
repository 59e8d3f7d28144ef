"""Translation pipeline components.

This module provides the core pipeline components for translation:
- PromptEngine: Builds provider requests using strategy pattern
- LLMGateway: Interface to the text-generation provider
- OutputProcessor: Recovers JSON from raw provider replies
- BatchTranslator: Translates one batch with fallback to originals
- TranslationPipeline: Orchestrates page runs and single sections
"""

from .prompt_engine import PromptEngine
from .llm_gateway import LLMGateway, LiteLLMGateway, classify_provider_failure
from .output_processor import OutputProcessor
from .batch_translator import BatchOutcome, BatchTranslator
from .pipeline import PipelineConfig, PipelineFactory, TranslationPipeline

__all__ = [
    "PromptEngine",
    "LLMGateway",
    "LiteLLMGateway",
    "classify_provider_failure",
    "OutputProcessor",
    "BatchOutcome",
    "BatchTranslator",
    "TranslationPipeline",
    "PipelineConfig",
    "PipelineFactory",
]
