"""Shared Pydantic schemas for API requests and responses."""

from .translation import (
    ModelSelectionMixin,
    TranslatePageRequest,
    TranslateSectionRequest,
    TranslateSectionResponse,
    ErrorResponse,
)

__all__ = [
    "ModelSelectionMixin",
    "TranslatePageRequest",
    "TranslateSectionRequest",
    "TranslateSectionResponse",
    "ErrorResponse",
]
