"""Utility modules for the page translator backend."""

from .text import safe_truncate, preview_for_log

__all__ = ["safe_truncate", "preview_for_log"]
