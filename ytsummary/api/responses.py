"""
Builders for the JSON bodies returned by the API.
"""

import math
from typing import Any, Dict, Optional

from ytsummary.api.schemas import (
    ErrorDetail,
    ErrorResponse,
    SummarizeResponse,
    SummaryBlock,
    SummaryStats,
    Thumbnail,
    TranscriptInfo,
)
from ytsummary.models.schemas import ClippedText, NormalizedTranscript, SummaryResult
from ytsummary.utils.helpers import get_timestamp, truncate_text

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/{name}.jpg"

SAMPLE_LENGTH = 200

# About 180 words per minute
WORDS_PER_SECOND = 3


def thumbnails(video_id: str) -> Thumbnail:
    """Thumbnail URLs for every size YouTube serves."""
    return Thumbnail(
        default=THUMBNAIL_URL.format(video_id=video_id, name="default"),
        medium=THUMBNAIL_URL.format(video_id=video_id, name="mqdefault"),
        high=THUMBNAIL_URL.format(video_id=video_id, name="hqdefault"),
        maxres=THUMBNAIL_URL.format(video_id=video_id, name="maxresdefault"),
    )


def assemble_response(
    video_id: str,
    transcript: NormalizedTranscript,
    clipped: ClippedText,
    summary: SummaryResult,
    max_words: int,
) -> SummarizeResponse:
    """
    Package the pipeline outputs into the response body.

    Args:
        video_id: YouTube video ID
        transcript: Full cleaned transcript
        clipped: Text that was actually summarized
        summary: Summarizer output
        max_words: Word budget the transcript was clipped to

    Returns:
        SummarizeResponse
    """
    return SummarizeResponse(
        video_id=video_id,
        url=WATCH_URL.format(video_id=video_id),
        thumbnail=thumbnails(video_id),
        transcript=TranscriptInfo(
            language=transcript.language,
            total_words=transcript.total_words,
            used_words=clipped.word_count,
            was_trimmed=transcript.total_words > max_words,
            sample=truncate_text(clipped.text, SAMPLE_LENGTH),
        ),
        summary=SummaryBlock(
            short_summary=summary.short_summary,
            key_points=summary.key_points,
            topics=summary.topics,
            stats=SummaryStats(
                sentences=summary.sentence_count,
                words=clipped.word_count,
                read_seconds=math.ceil(clipped.word_count / WORDS_PER_SECOND),
            ),
            title=summary.title,
            channel=summary.channel,
            verdict=summary.verdict,
        ),
        generated_at=get_timestamp(),
    )


def error_response(code: str, message: str, video_id: Optional[str] = None) -> Dict[str, Any]:
    """Build the JSON body for a failed request."""
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message),
        timestamp=get_timestamp(),
        video_id=video_id,
    )
    return body.model_dump(by_alias=True, exclude_none=True)
