"""
Module for fetching timed caption segments from YouTube.
"""

from typing import List, Optional

from youtube_transcript_api import (
    YouTubeTranscriptApi,
    TranscriptsDisabled,
    NoTranscriptFound,
    VideoUnavailable,
)

from ytsummary.models.schemas import TranscriptSegment
from ytsummary.utils.logger import logging


class TranscriptSourceError(Exception):
    """Base class for failures reported by a transcript source."""


class TranscriptNotAvailable(TranscriptSourceError):
    """Transcripts are disabled, or none exists for the requested language."""


class VideoNotAvailable(TranscriptSourceError):
    """The video itself is gone or cannot be played."""


class TranscriptSource:
    """Interface for anything that can supply caption segments."""

    def fetch(self, video_id: str, lang: Optional[str] = None) -> List[TranscriptSegment]:
        """
        Fetch the caption segments of a video.

        Args:
            video_id: YouTube video ID
            lang: Language code to request, None to let the source choose

        Returns:
            Ordered list of transcript segments
        """
        raise NotImplementedError


class YouTubeTranscriptSource(TranscriptSource):
    """Transcript source backed by youtube-transcript-api."""

    def __init__(self, api: Optional[YouTubeTranscriptApi] = None):
        self.api = api or YouTubeTranscriptApi()

    def fetch(self, video_id: str, lang: Optional[str] = None) -> List[TranscriptSegment]:
        try:
            if lang:
                fetched = self.api.fetch(video_id, languages=[lang])
            else:
                fetched = self._fetch_first_available(video_id)
        except (TranscriptsDisabled, NoTranscriptFound) as e:
            raise TranscriptNotAvailable(str(e)) from e
        except VideoUnavailable as e:
            raise VideoNotAvailable(str(e)) from e

        return [
            TranscriptSegment(text=snippet.text, start=snippet.start, duration=snippet.duration)
            for snippet in fetched
        ]

    def _fetch_first_available(self, video_id: str):
        """Fetch whichever transcript YouTube lists first for the video."""
        for transcript in self.api.list(video_id):
            logging.debug(f"Automatic transcript selection picked '{transcript.language_code}' for {video_id}")
            return transcript.fetch()

        raise TranscriptNotAvailable(f"No transcripts are listed for video {video_id}")
