"""
Module for turning raw caption segments into one normalized transcript.
"""

import re
from typing import Iterable, List, Optional

from ytsummary.config import config
from ytsummary.core.errors import ErrorCode, SummarizerError
from ytsummary.core.transcript_source import (
    TranscriptNotAvailable,
    TranscriptSource,
    YouTubeTranscriptSource,
)
from ytsummary.models.schemas import NormalizedTranscript, TranscriptSegment
from ytsummary.utils.helpers import collapse_whitespace, count_words
from ytsummary.utils.logger import logging

AUTO_LANGUAGE = "auto"

_BRACKETED = re.compile(r"\[.*?\]")        # [Music] [Applause]
_PARENTHESIZED = re.compile(r"\(.*?\)")
_NUMERIC_ENTITY = re.compile(r"&#\d+;")
_NAMED_ENTITY = re.compile(r"&\w+;", re.ASCII)


def clean_segment(text: Optional[str]) -> str:
    """
    Strip caption annotations and HTML character references from a segment.

    Args:
        text: Raw segment text, may be None

    Returns:
        Cleaned text with single spaces, possibly empty
    """
    text = text or ""
    text = _BRACKETED.sub("", text)
    text = _PARENTHESIZED.sub("", text)
    text = _NUMERIC_ENTITY.sub(" ", text)
    text = _NAMED_ENTITY.sub(" ", text)
    return collapse_whitespace(text)


def join_segments(segments: Iterable[TranscriptSegment]) -> str:
    """Clean every segment and join the non-empty ones with single spaces."""
    cleaned = [clean_segment(segment.text) for segment in segments]
    return collapse_whitespace(" ".join(part for part in cleaned if part))


class TranscriptAssembler:
    """Class to fetch a video transcript, trying languages in priority order."""

    def __init__(self, source: Optional[TranscriptSource] = None, languages: Optional[List[str]] = None):
        """
        Initialize the assembler.

        Args:
            source: Transcript source to fetch from (defaults to YouTube)
            languages: Language codes to try, in order, before automatic selection
        """
        self.source = source or YouTubeTranscriptSource()
        self.languages = list(languages) if languages is not None else list(config.TRANSCRIPT_LANGUAGES)

    def fetch_segments(self, video_id: str):
        """
        Fetch segments for the first language that works.

        Returns:
            Tuple of (segments, language code or "auto")
        """
        for lang in self.languages:
            try:
                segments = self.source.fetch(video_id, lang=lang)
            except Exception as e:
                logging.debug(f"No '{lang}' transcript for {video_id}: {type(e).__name__}")
                continue
            logging.info(f"Found '{lang}' transcript for {video_id}")
            return segments, lang

        logging.info(f"No preferred language available for {video_id}, using automatic selection")
        try:
            segments = self.source.fetch(video_id)
        except TranscriptNotAvailable as e:
            raise SummarizerError(ErrorCode.NO_TRANSCRIPT, video_id=video_id) from e

        return segments, AUTO_LANGUAGE

    def get_transcript(self, video_id: str) -> NormalizedTranscript:
        """
        Get the cleaned transcript of a video.

        Args:
            video_id: YouTube video ID

        Returns:
            NormalizedTranscript with the text, language and word count
        """
        segments, language = self.fetch_segments(video_id)

        if not segments:
            raise SummarizerError(ErrorCode.NO_TRANSCRIPT, video_id=video_id)

        full_text = join_segments(segments)
        if not full_text:
            raise SummarizerError(ErrorCode.EMPTY_TRANSCRIPT, video_id=video_id)

        transcript = NormalizedTranscript(
            full_text=full_text,
            language=language,
            total_words=count_words(full_text),
        )
        logging.info(f"Transcript for {video_id}: {transcript.total_words} words ({language})")
        return transcript
