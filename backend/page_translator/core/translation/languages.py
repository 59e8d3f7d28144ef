"""Target language table.

The mapping is only used to phrase the instruction sent to the provider.
Add entries here to offer more languages.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "fr": "French",
        "it": "Italian",
        "nl": "Dutch",
        "de": "German",
        "ro": "Romanian",
        "cs": "Czech",
        "pl": "Polish",
        "hu": "Hungarian",
    }
)


def get_language_name(code: str) -> str:
    """Return the display name for a language code.

    Unknown codes are returned unchanged so the provider still receives a
    usable target.
    """
    return LANGUAGE_NAMES.get(code, code)


def list_languages() -> List[Dict[str, str]]:
    """List supported languages in table order."""
    return [{"code": code, "name": name} for code, name in LANGUAGE_NAMES.items()]
