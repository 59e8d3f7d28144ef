"""Decoded provider payload.

Providers sometimes answer a one-section batch with a bare object instead of
an array. The shape is recorded explicitly and normalized before use.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List


class PayloadShape(str, Enum):
    ARRAY = "array"
    OBJECT = "object"
    SCALAR = "scalar"  # string, number, bool or null


@dataclass(frozen=True)
class ExtractedPayload:
    """JSON value recovered from a provider reply, tagged by shape."""

    shape: PayloadShape
    value: Any

    @classmethod
    def from_value(cls, value: Any) -> "ExtractedPayload":
        if isinstance(value, list):
            return cls(PayloadShape.ARRAY, value)
        if isinstance(value, dict):
            return cls(PayloadShape.OBJECT, value)
        return cls(PayloadShape.SCALAR, value)

    def as_sequence(self) -> List[Any]:
        """Return the payload as a list, wrapping anything but an array."""
        if self.shape is PayloadShape.ARRAY:
            return list(self.value)
        return [self.value]
