"""Field classifier for page sections.

Decides which fields of a section are sent for translation and which must
come back byte-identical. The split is the same for every section type.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

logger = logging.getLogger(__name__)

# A section is kept as the decoded JSON object so unknown fields and key
# order survive the round trip.
Section = Dict[str, Any]


@dataclass(frozen=True)
class FieldClassification:
    """Field names of one section split by treatment, in section key order."""

    translatable: Tuple[str, ...]
    passthrough: Tuple[str, ...]


class SectionFieldClassifier:
    """Classify section fields as translatable or passthrough."""

    # Plain text fields (may contain inline HTML)
    TEXT_FIELDS = (
        "content",
        "heading",
        "ctaText",
        "author",
        "authorRole",
        "verifiedText",
        "buttonText",
    )

    # Ordered list of strings
    LIST_FIELDS = ("items",)

    TRANSLATABLE_FIELDS = TEXT_FIELDS + LIST_FIELDS

    def classify(self, section: Any) -> FieldClassification:
        """Split a section's fields into translatable and passthrough.

        Anything that is not a JSON object has no translatable fields.

        Args:
            section: Decoded section object

        Returns:
            FieldClassification for the fields present on the section
        """
        if not isinstance(section, dict):
            return FieldClassification(translatable=(), passthrough=())

        translatable = []
        passthrough = []
        for key in section:
            if self.is_translatable(key):
                translatable.append(key)
            else:
                passthrough.append(key)
        return FieldClassification(tuple(translatable), tuple(passthrough))

    def is_translatable(self, field: str) -> bool:
        return field in self.TRANSLATABLE_FIELDS

    def merge(self, original: Any, translated: Any) -> Any:
        """Apply a provider's translation onto the original section.

        Only translatable fields already present on the original are taken
        from ``translated``, and only when the value keeps its JSON type
        (``items`` must also keep its length). Every other field, and the
        key order, comes from the original.

        Args:
            original: Section sent to the provider
            translated: Object the provider returned for it

        Returns:
            New section dict, or the original unchanged when either side is
            not an object
        """
        if not isinstance(original, dict):
            return original
        if not isinstance(translated, dict):
            logger.warning(
                "Provider returned %s for section %s, keeping original",
                type(translated).__name__,
                original.get("id"),
            )
            return original

        merged: Section = {}
        for key, value in original.items():
            if self.is_translatable(key) and key in translated:
                candidate = translated[key]
                if self._same_shape(value, candidate):
                    merged[key] = candidate
                    continue
                logger.debug(
                    "Ignoring translated %s for section %s: shape changed",
                    key,
                    original.get("id"),
                )
            merged[key] = value
        return merged

    @staticmethod
    def _same_shape(original: Any, candidate: Any) -> bool:
        if isinstance(original, str):
            return isinstance(candidate, str)
        if isinstance(original, list):
            return (
                isinstance(candidate, list)
                and len(candidate) == len(original)
                and all(isinstance(item, str) for item in candidate)
            )
        # null / numbers in a text slot are left alone
        return False


# Module-level instance for convenience
classifier = SectionFieldClassifier()
