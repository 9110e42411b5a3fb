"""
Caching utility module for the YouTube Video Summarizer.

Process local and best effort: entries vanish on restart and a miss simply
means the summary is computed again.
"""

import json
import time
import threading
from typing import Any, Optional

from ytsummary.utils.logger import logging

# In-memory cache
_memory_cache = {}
_cache_lock = threading.Lock()


def summary_cache_key(backend: str, mode: str, video_id: str) -> str:
    """Build the cache key for a summary response."""
    return f"summary:{backend}:{mode}:{video_id}"


def cache_set(key: str, value: Any, expires: int = 3600) -> bool:
    """
    Set a value in the cache.

    Args:
        key: Cache key
        value: Value to cache
        expires: Expiration time in seconds (default: 1 hour)

    Returns:
        True if successful, False otherwise
    """
    if expires <= 0:
        return False

    # Convert value to JSON
    try:
        serialized = json.dumps(value)
    except (TypeError, ValueError):
        logging.error(f"Error serializing value for key {key}")
        return False

    with _cache_lock:
        _memory_cache[key] = {
            "value": serialized,
            "expires": time.time() + expires
        }
    return True


def cache_get(key: str) -> Optional[Any]:
    """
    Get a value from the cache.

    Args:
        key: Cache key

    Returns:
        Cached value or None if not found or expired
    """
    with _cache_lock:
        cache_entry = _memory_cache.get(key)
        if cache_entry is None:
            return None

        # Check expiration
        if cache_entry["expires"] <= time.time():
            del _memory_cache[key]
            return None

    return json.loads(cache_entry["value"])


def cache_delete(key: str) -> bool:
    """
    Delete a value from the cache.

    Args:
        key: Cache key

    Returns:
        True if an entry was removed
    """
    with _cache_lock:
        return _memory_cache.pop(key, None) is not None


def clear_memory_cache():
    """Clear the in-memory cache."""
    with _cache_lock:
        _memory_cache.clear()
