"""
Configuration for pytest tests.
"""

import os
import shutil
import tempfile
import pytest

# Must be set before the application modules read their configuration
TEST_LOG_DIR = tempfile.mkdtemp(prefix="ytsummary_logs_")
os.environ["LOG_DIR"] = TEST_LOG_DIR
os.environ["ENVIRONMENT"] = "development"
os.environ["SUMMARIZER_BACKEND"] = "local"
os.environ.setdefault("GROQ_API_KEY", "test_api_key")

from ytsummary.models.schemas import TranscriptSegment  # noqa: E402
from ytsummary.core.transcript_source import (  # noqa: E402
    TranscriptNotAvailable,
    TranscriptSource,
)
from ytsummary.utils.caching import clear_memory_cache  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Remove the test log directory once the session ends."""
    yield
    shutil.rmtree(TEST_LOG_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def empty_cache():
    """Every test starts with an empty summary cache."""
    clear_memory_cache()
    yield
    clear_memory_cache()


class FakeTranscriptSource(TranscriptSource):
    """Transcript source serving canned segments per language."""

    def __init__(self, transcripts=None, auto=None, auto_error=None):
        self.transcripts = transcripts or {}
        self.auto = auto
        self.auto_error = auto_error
        self.calls = []

    def fetch(self, video_id, lang=None):
        self.calls.append(lang)
        if lang is None:
            if self.auto_error is not None:
                raise self.auto_error
            if self.auto is None:
                raise TranscriptNotAvailable("no transcripts")
            return [TranscriptSegment(text=text) for text in self.auto]
        if lang not in self.transcripts:
            raise TranscriptNotAvailable(f"no {lang} transcript")
        return [TranscriptSegment(text=text) for text in self.transcripts[lang]]


@pytest.fixture
def test_video_id():
    """Return a test YouTube video ID."""
    return "dQw4w9WgXcQ"


@pytest.fixture
def english_paragraph():
    """A well formed multi sentence paragraph."""
    return (
        "Machine learning models need large amounts of training data to perform well. "
        "Collecting training data is often the most expensive part of building models. "
        "Data labeling requires careful human review and clear labeling guidelines. "
        "Researchers have proposed synthetic data as a cheaper source of training examples. "
        "Synthetic data can be generated quickly but may not match real world distributions. "
        "Evaluation on held out real data remains essential for trustworthy models. "
        "Teams should track data quality metrics alongside model accuracy metrics. "
        "Good data practices ultimately matter more than clever model architectures."
    )


@pytest.fixture
def fake_source(english_paragraph):
    """Source with only an English transcript split in caption sized segments."""
    segments = [sentence + "." for sentence in english_paragraph.rstrip(".").split(". ")]
    segments.insert(0, "[Music]")
    return FakeTranscriptSource({"en": segments})


@pytest.fixture
def make_source():
    """Factory for fake transcript sources."""
    return FakeTranscriptSource
