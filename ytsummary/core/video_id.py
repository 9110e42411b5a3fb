"""
Helpers for resolving YouTube video identifiers from URLs.
"""

import re
from typing import Any, Optional

VIDEO_ID_PATTERN = re.compile(r"[\w-]{11}", re.ASCII)

# Tried in order, the first match wins
URL_PATTERNS = [
    re.compile(r"[?&]v=([\w-]{11})", re.ASCII),   # youtube.com/watch?v=ID
    re.compile(r"youtu\.be/([\w-]{11})", re.ASCII),
    re.compile(r"shorts/([\w-]{11})", re.ASCII),
    re.compile(r"embed/([\w-]{11})", re.ASCII),
    re.compile(r"live/([\w-]{11})", re.ASCII),
    re.compile(r"^([\w-]{11})$", re.ASCII),       # bare ID
]


def extract_video_id(value: Any) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL or a bare identifier.

    Args:
        value: URL or identifier supplied by the caller

    Returns:
        The 11 character identifier, or None when nothing matches
    """
    if not value or not isinstance(value, str):
        return None

    value = value.strip()
    for pattern in URL_PATTERNS:
        match = pattern.search(value)
        if match:
            return match.group(1)

    return None


def is_valid_video_id(value: Any) -> bool:
    """Check that a value is an 11 character YouTube identifier."""
    return isinstance(value, str) and VIDEO_ID_PATTERN.fullmatch(value) is not None
