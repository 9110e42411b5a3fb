from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummarizeRequest(CamelModel):
    """Model for requesting video summarization."""
    url: Optional[str] = None
    video_id: Optional[str] = None
    mode: Optional[str] = None


class Thumbnail(CamelModel):
    """Thumbnail URLs of a video."""
    default: str
    medium: str
    high: str
    maxres: str


class TranscriptInfo(CamelModel):
    """Statistics about the transcript that was summarized."""
    language: str
    total_words: int
    used_words: int
    was_trimmed: bool
    sample: str


class SummaryStats(CamelModel):
    sentences: int
    words: int
    read_seconds: int


class SummaryBlock(CamelModel):
    """The summary itself."""
    short_summary: str
    key_points: List[str] = []
    topics: List[str] = []
    stats: SummaryStats

    # Only set by the LLM backend
    title: Optional[str] = None
    channel: Optional[str] = None
    verdict: Optional[str] = None


class SummarizeResponse(CamelModel):
    """Model for summary responses."""
    success: bool = True
    video_id: str
    url: str
    thumbnail: Thumbnail
    transcript: TranscriptInfo
    summary: SummaryBlock
    generated_at: str


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(CamelModel):
    """Model for error responses."""
    success: bool = False
    error: ErrorDetail
    timestamp: str
    video_id: Optional[str] = Field(default=None)


class HealthResponse(BaseModel):
    """Model for the health check."""
    status: str
    timestamp: str
    backend: str
    model: Optional[str] = None
