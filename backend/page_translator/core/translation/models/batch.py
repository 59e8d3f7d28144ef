"""Batch model and partitioner.

A batch is a contiguous slice of a page's sections translated in one
provider call. Concatenating every batch's sections in batch order gives
back the page's sections in their original order.
"""

from dataclasses import dataclass
from typing import List, Sequence

from page_translator.core.section_classifier import Section


@dataclass(frozen=True)
class Batch:
    """Order-preserving slice of sections."""

    number: int  # 1-based
    total: int
    start: int  # index of the first section in the page
    sections: List[Section]

    def __len__(self) -> int:
        return len(self.sections)


def partition_sections(sections: Sequence[Section], batch_size: int) -> List[Batch]:
    """Split sections into consecutive batches of at most ``batch_size``.

    Args:
        sections: Page sections in display order
        batch_size: Maximum sections per batch, must be positive

    Returns:
        Batches numbered 1..total; empty when there are no sections

    Raises:
        ValueError: If batch_size is not positive
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    total = (len(sections) + batch_size - 1) // batch_size
    return [
        Batch(
            number=index // batch_size + 1,
            total=total,
            start=index,
            sections=list(sections[index:index + batch_size]),
        )
        for index in range(0, len(sections), batch_size)
    ]
