"""
Error kinds raised by the summarization pipeline and their HTTP mapping.
"""

from enum import Enum
from typing import Optional

from ytsummary.core.transcript_source import TranscriptNotAvailable, VideoNotAvailable


class ErrorCode(str, Enum):
    """Every failure a caller of the API can observe."""
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_VIDEO_ID = "INVALID_VIDEO_ID"
    INVALID_MODE = "INVALID_MODE"
    NO_TRANSCRIPT = "NO_TRANSCRIPT"
    EMPTY_TRANSCRIPT = "EMPTY_TRANSCRIPT"
    VIDEO_UNAVAILABLE = "VIDEO_UNAVAILABLE"
    VIDEO_TOO_LONG = "VIDEO_TOO_LONG"
    TIMEOUT = "TIMEOUT"
    INVALID_API_KEY = "INVALID_API_KEY"
    RATE_LIMITED = "RATE_LIMITED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_STATUS = {
    ErrorCode.METHOD_NOT_ALLOWED: 405,
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.INVALID_VIDEO_ID: 400,
    ErrorCode.INVALID_MODE: 400,
    ErrorCode.NO_TRANSCRIPT: 404,
    ErrorCode.EMPTY_TRANSCRIPT: 422,
    ErrorCode.VIDEO_UNAVAILABLE: 404,
    ErrorCode.VIDEO_TOO_LONG: 422,
    ErrorCode.TIMEOUT: 408,
    ErrorCode.INVALID_API_KEY: 401,
    ErrorCode.RATE_LIMITED: 429,
    ErrorCode.SERVICE_UNAVAILABLE: 503,
    ErrorCode.INTERNAL_ERROR: 500,
}

ERROR_MESSAGES = {
    ErrorCode.METHOD_NOT_ALLOWED: "Only POST requests are accepted.",
    ErrorCode.INVALID_INPUT: 'Send "url" or "videoId" in the request body.',
    ErrorCode.INVALID_VIDEO_ID: "The video identifier is not valid.",
    ErrorCode.INVALID_MODE: "Summary mode must be one of: detailed, brief, bullets.",
    ErrorCode.NO_TRANSCRIPT: "No transcript is available for this video. Make sure it has captions (CC).",
    ErrorCode.EMPTY_TRANSCRIPT: "The transcript exists but contains no usable text.",
    ErrorCode.VIDEO_UNAVAILABLE: "The video is unavailable or has been removed.",
    ErrorCode.VIDEO_TOO_LONG: "The video is too long to summarize.",
    ErrorCode.TIMEOUT: "Summarizing the video took too long. Please try again.",
    ErrorCode.INVALID_API_KEY: "The summarization service rejected the API key.",
    ErrorCode.RATE_LIMITED: "The summarization service rate limit was exceeded.",
    ErrorCode.SERVICE_UNAVAILABLE: "The summarization service is temporarily unavailable.",
    ErrorCode.INTERNAL_ERROR: "An internal error occurred. Please try again.",
}

# Status codes returned by the LLM provider
PROVIDER_STATUS_CODES = {
    401: ErrorCode.INVALID_API_KEY,
    429: ErrorCode.RATE_LIMITED,
    503: ErrorCode.SERVICE_UNAVAILABLE,
    529: ErrorCode.SERVICE_UNAVAILABLE,
}


class SummarizerError(Exception):
    """A classified failure with a fixed error code."""

    def __init__(self, code: ErrorCode, message: Optional[str] = None, video_id: Optional[str] = None):
        self.code = ErrorCode(code)
        self.message = message or ERROR_MESSAGES[self.code]
        self.video_id = video_id
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.code]

    def __repr__(self) -> str:
        return f"SummarizerError({self.code.value!r}, video_id={self.video_id!r})"


def classify_exception(exc: Exception, video_id: Optional[str] = None) -> SummarizerError:
    """
    Map any exception raised while summarizing to a classified error.

    Args:
        exc: The exception that occurred
        video_id: ID of the video being processed, if known

    Returns:
        SummarizerError, INTERNAL_ERROR for anything unrecognised
    """
    if isinstance(exc, SummarizerError):
        return exc
    if isinstance(exc, TranscriptNotAvailable):
        return SummarizerError(ErrorCode.NO_TRANSCRIPT, video_id=video_id)
    if isinstance(exc, VideoNotAvailable):
        return SummarizerError(ErrorCode.VIDEO_UNAVAILABLE, video_id=video_id)

    status = getattr(exc, "status_code", None)
    if status in PROVIDER_STATUS_CODES:
        return SummarizerError(PROVIDER_STATUS_CODES[status], video_id=video_id)

    return SummarizerError(ErrorCode.INTERNAL_ERROR, video_id=video_id)
