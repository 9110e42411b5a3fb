"""
Data models for the YouTube summarizer application.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field


class SummaryMode(str, Enum):
    """Styles of summary the LLM backend can produce."""
    DETAILED = "detailed"
    BRIEF = "brief"
    BULLETS = "bullets"


class SummaryConfig(BaseModel):
    """Configuration for LLM summarization operations."""
    model: str
    temperature: float = 0.0
    max_tokens: int = 1500
    chunk_size: int = 60000
    chunk_overlap: int = 400
    language: str = "Arabic"


class TranscriptSegment(BaseModel):
    """One timed caption entry of a video."""
    text: Optional[str] = None
    start: Optional[float] = None
    duration: Optional[float] = None


class NormalizedTranscript(BaseModel):
    """Cleaned transcript text and the language it was fetched in."""
    full_text: str = Field(min_length=1)
    language: str
    total_words: int


class ClippedText(BaseModel):
    """Transcript text cut down to a word budget."""
    text: str
    word_count: int


class ScoredSentence(BaseModel):
    """A sentence with its rank score, only used while ranking."""
    sentence: str
    index: int
    score: float = Field(default=0.0, ge=0)


class SummaryResult(BaseModel):
    """Summary produced by one of the summarizer backends."""
    short_summary: str
    key_points: List[str] = []
    topics: List[str] = []
    sentence_count: int = 0

    # Only filled by the LLM backend
    title: Optional[str] = None
    channel: Optional[str] = None
    verdict: Optional[str] = None
