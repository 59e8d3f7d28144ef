"""Output processor for provider replies.

This module recovers the JSON document from a provider's free-form reply.
It is lenient about framing (markdown code fences, surrounding whitespace)
and strict about the result being valid JSON.
"""

import json
import logging
import re
from typing import Any, Dict, List

from ..errors import ExtractionFailed
from ..models.payload import ExtractedPayload, PayloadShape
from page_translator.utils.text import preview_for_log

logger = logging.getLogger(__name__)


class OutputProcessor:
    """Turns raw reply text into decoded payloads.

    Responsibilities:
    1. Strip a markdown code fence if the reply contains one
    2. Parse the remaining text as JSON
    3. Normalize the decoded value for the batch or single-section path
    """

    # ```json ... ``` (any case) or ``` ... ```, first block wins
    FENCE_PATTERN = re.compile(r"```(?:(?i:json))?\s*\n?(.*?)\n?```", re.DOTALL)

    def extract(self, content: str) -> ExtractedPayload:
        """Decode the JSON carried by a reply.

        Args:
            content: Raw reply text (``choices[0].message.content``)

        Returns:
            ExtractedPayload tagged with the decoded shape

        Raises:
            ExtractionFailed: If the text is not valid JSON
        """
        text = self._strip_fence(content or "")

        # JSONDecodeError is a ValueError; deep nesting exhausts the decoder
        try:
            value = json.loads(text.strip())
        except (ValueError, RecursionError) as e:
            logger.error("Failed to parse AI response: %s", preview_for_log(content))
            raise ExtractionFailed(
                raw_text=content,
                details={"reason": getattr(e, "msg", type(e).__name__)},
            ) from e

        return ExtractedPayload.from_value(value)

    def extract_sections(self, content: str) -> List[Any]:
        """Decode a batch reply into a list.

        A bare object is wrapped in a one-element list.
        """
        return self.extract(content).as_sequence()

    def extract_section(self, content: str) -> Dict[str, Any]:
        """Decode a single-section reply into an object.

        A one-element array holding an object is unwrapped.

        Raises:
            ExtractionFailed: If the reply is not JSON or holds no object
        """
        payload = self.extract(content)
        if payload.shape is PayloadShape.OBJECT:
            return payload.value
        if (
            payload.shape is PayloadShape.ARRAY
            and len(payload.value) == 1
            and isinstance(payload.value[0], dict)
        ):
            return payload.value[0]

        logger.error(
            "AI response for section is %s, expected an object: %s",
            payload.shape.value,
            preview_for_log(content),
        )
        raise ExtractionFailed(raw_text=content, details={"shape": payload.shape.value})

    def _strip_fence(self, content: str) -> str:
        match = self.FENCE_PATTERN.search(content)
        if match:
            return match.group(1)
        return content
