"""Request and response schemas for the translation endpoints.

Field names follow the camelCase JSON the page editor sends. Sections are
accepted as free-form values so unknown fields and key order survive; the
pipeline itself decides what counts as missing input.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelSelectionMixin(BaseModel):
    """Mixin for the optional provider model field."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    # None = configured default model
    model: Optional[str] = None


class TranslatePageRequest(ModelSelectionMixin):
    """Body for a streamed page translation run."""

    sections: Optional[Any] = None
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class TranslateSectionRequest(ModelSelectionMixin):
    """Body for a single-section translation."""

    section: Optional[Any] = None
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")


class TranslateSectionResponse(BaseModel):
    section: Dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
