"""Text helpers for logging provider output.

Provider replies can be large HTML-laden JSON documents. These helpers keep
log lines readable without splitting characters or escape sequences.
"""

import re
from typing import Optional

_BREAK_CHARS = {" ", "\n", "\t", ",", ".", "!", "?", ";", ":", "-", ">"}
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def safe_truncate(text: str, max_chars: int, suffix: str = "...") -> str:
    """Truncate text, preferring a nearby word or tag boundary.

    Args:
        text: Text to truncate
        max_chars: Maximum characters (excluding suffix)
        suffix: Suffix to append if truncated (default "...")

    Returns:
        Truncated text with suffix if needed
    """
    if not text or len(text) <= max_chars:
        return text

    truncated = text[:max_chars]

    # Look back up to 20 characters for a cleaner break point
    for i in range(min(20, max_chars - 1), 0, -1):
        if truncated[-i] in _BREAK_CHARS:
            truncated = truncated[: len(truncated) - i + 1].rstrip()
            break

    # Never leave a lone high surrogate at the end
    if truncated and "\ud800" <= truncated[-1] <= "\udbff":
        truncated = truncated[:-1]

    return truncated + suffix


def preview_for_log(text: Optional[str], max_length: int = 500) -> str:
    """Collapse a provider reply into a single bounded log-friendly string."""
    if not text:
        return ""

    text = _CONTROL_CHARS.sub("", text)
    text = re.sub(r"\s+", " ", text).strip()
    return safe_truncate(text, max_length)
