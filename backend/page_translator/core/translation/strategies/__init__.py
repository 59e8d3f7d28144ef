"""Translation prompt strategies.

One strategy per request kind: a batch of sections or a single section.
"""

from .base import PromptStrategy
from .batch import BatchTranslationStrategy
from .section import SectionTranslationStrategy

__all__ = [
    "PromptStrategy",
    "BatchTranslationStrategy",
    "SectionTranslationStrategy",
]
