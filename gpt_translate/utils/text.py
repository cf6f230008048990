"""Text utilities for messages shown in logs and GitHub comments."""

import re
from typing import Optional

BREAK_CHARS = {" ", "\n", "\t", ",", ".", "!", "?", ";", ":", "-"}


def safe_truncate(text: str, max_chars: int, suffix: str = "...") -> str:
    """Truncate text, preferring a word boundary close to the limit.

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

    # Look back up to 20 characters for a good break point
    lookback = min(20, max_chars - 1)
    for i in range(len(truncated) - 1, len(truncated) - 1 - lookback, -1):
        if truncated[i] in BREAK_CHARS:
            truncated = truncated[:i].rstrip()
            break

    return truncated + suffix


def normalize_for_display(text: str, max_length: Optional[int] = None) -> str:
    """Normalize text for safe display in logs and comments.

    Removes control characters, collapses runs of spaces and blank lines,
    and optionally truncates to ``max_length``.
    """
    if not text:
        return ""

    # Remove control characters except newlines and tabs
    text = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", text)

    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    if max_length:
        text = safe_truncate(text, max_length)

    return text.strip()
