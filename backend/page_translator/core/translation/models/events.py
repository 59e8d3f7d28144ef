"""Progress events for a page translation run.

A run yields any number of ``progress`` events followed by exactly one
terminal ``complete`` or ``error`` event. Events serialize to the camelCase
JSON the page editor consumes.
"""

import json
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Event(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @property
    def is_terminal(self) -> bool:
        return False

    def to_wire(self) -> Dict[str, Any]:
        """Convert to the JSON object sent to clients."""
        return self.model_dump(by_alias=True)

    def to_sse(self) -> str:
        """Format as a single server-sent events frame."""
        return f"data: {json.dumps(self.to_wire(), ensure_ascii=False)}\n\n"


class ProgressEvent(_Event):
    """Emitted before each batch's provider call."""

    type: Literal["progress"] = "progress"
    current_batch: int = Field(..., alias="currentBatch")
    total_batches: int = Field(..., alias="totalBatches")
    sections_translated: int = Field(
        ..., alias="sectionsTranslated", description="Sections from completed batches"
    )
    total_sections: int = Field(..., alias="totalSections")


class CompleteEvent(_Event):
    """Terminal event carrying every section in page order."""

    type: Literal["complete"] = "complete"
    sections: List[Any] = Field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return True


class ErrorEvent(_Event):
    """Terminal event for a fatal provider failure."""

    type: Literal["error"] = "error"
    message: str = Field(..., alias="error")

    @property
    def is_terminal(self) -> bool:
        return True


RunEvent = Union[ProgressEvent, CompleteEvent, ErrorEvent]
