"""
Helper utility functions for the YouTube video summarization application.
"""

import re
from datetime import datetime, timezone

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Replace runs of whitespace with one space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def split_words(text: str) -> list:
    """Split text on whitespace, dropping empty tokens."""
    return [word for word in _WHITESPACE.split(text) if word]


def count_words(text: str) -> int:
    """Count the whitespace delimited words of a text."""
    return len(split_words(text))


def get_timestamp() -> str:
    """
    Get the current UTC time as an ISO-8601 string.

    Returns:
        Timestamp such as 2024-01-31T12:00:00.000Z
    """
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def truncate_text(text: str, max_length: int = 200, suffix: str = "...") -> str:
    """
    Cut text to a maximum length, marking the cut with a suffix.

    Args:
        text: Text to truncate
        max_length: Number of characters kept
        suffix: Appended only when something was cut

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def capitalize(word: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return word[:1].upper() + word[1:]
