"""Utility modules for gpt-translate."""

from .text import normalize_for_display, safe_truncate

__all__ = ["normalize_for_display", "safe_truncate"]
