"""API dependencies for the translation endpoints.

The pipeline is built from settings per request so a missing credential is
reported as a configuration error before any provider call is made.
"""

import logging

from page_translator.config import settings
from page_translator.core.translation.pipeline import PipelineFactory, TranslationPipeline

logger = logging.getLogger(__name__)


def get_translation_pipeline() -> TranslationPipeline:
    """Provide a configured TranslationPipeline.

    Raises:
        ConfigurationError: If the AI gateway credential is missing
    """
    return PipelineFactory.from_settings(settings)
