"""
Tests for the transcript source adapter and the transcript assembler.
"""

import pytest
from unittest.mock import MagicMock, patch

from youtube_transcript_api import TranscriptsDisabled, VideoUnavailable

from ytsummary.core.errors import ErrorCode, SummarizerError
from ytsummary.core.transcript import (
    AUTO_LANGUAGE,
    TranscriptAssembler,
    clean_segment,
    join_segments,
)
from ytsummary.core.transcript_source import (
    TranscriptNotAvailable,
    VideoNotAvailable,
    YouTubeTranscriptSource,
)
from ytsummary.models.schemas import TranscriptSegment


def test_clean_segment_removes_annotations():
    assert clean_segment("[موسيقى] مرحباً") == "مرحباً"
    assert clean_segment("(applause) thank you [Music]") == "thank you"


def test_clean_segment_replaces_character_references():
    cleaned = clean_segment("it&#39;s &amp; more")
    assert "&#" not in cleaned
    assert "&amp;" not in cleaned
    assert cleaned == "it s more"


def test_clean_segment_handles_none_and_whitespace():
    assert clean_segment(None) == ""
    assert clean_segment("كلمة   أخرى") == "كلمة أخرى"
    assert clean_segment("  \n line\tbreak  ") == "line break"


def test_join_segments_skips_empty_segments():
    segments = [
        TranscriptSegment(text="[Music]"),
        TranscriptSegment(text="hello  there"),
        TranscriptSegment(text=None),
        TranscriptSegment(text="general kenobi"),
    ]
    assert join_segments(segments) == "hello there general kenobi"


def test_get_transcript_uses_first_available_language(test_video_id, make_source):
    """Languages are tried in order and the first success wins."""
    source = make_source({"en": ["english text"], "fr": ["texte français"]})
    assembler = TranscriptAssembler(source, languages=["ar", "en", "fr"])

    transcript = assembler.get_transcript(test_video_id)

    assert transcript.language == "en"
    assert transcript.full_text == "english text"
    assert transcript.total_words == 2
    assert source.calls == ["ar", "en"]


def test_get_transcript_falls_back_to_automatic_selection(test_video_id, make_source):
    source = make_source(auto=["[Music]", "automatic  captions here"])
    assembler = TranscriptAssembler(source, languages=["ar", "en"])

    transcript = assembler.get_transcript(test_video_id)

    assert transcript.language == AUTO_LANGUAGE
    assert transcript.full_text == "automatic captions here"
    assert source.calls == ["ar", "en", None]


def test_get_transcript_continues_after_unexpected_language_errors(test_video_id):
    source = MagicMock()
    source.fetch.side_effect = [RuntimeError("network glitch"), [TranscriptSegment(text="second try")]]
    assembler = TranscriptAssembler(source, languages=["ar", "en"])

    transcript = assembler.get_transcript(test_video_id)

    assert transcript.language == "en"
    assert source.fetch.call_count == 2


def test_get_transcript_without_any_transcript(test_video_id, make_source):
    assembler = TranscriptAssembler(make_source(), languages=["ar", "en"])

    with pytest.raises(SummarizerError) as exc_info:
        assembler.get_transcript(test_video_id)

    assert exc_info.value.code == ErrorCode.NO_TRANSCRIPT
    assert exc_info.value.status_code == 404
    assert exc_info.value.video_id == test_video_id


def test_get_transcript_propagates_other_failures(test_video_id, make_source):
    """Failures other than missing transcripts reach the caller unchanged."""
    source = make_source(auto_error=VideoNotAvailable("gone"))
    assembler = TranscriptAssembler(source, languages=["ar"])

    with pytest.raises(VideoNotAvailable):
        assembler.get_transcript(test_video_id)


def test_get_transcript_with_no_segments(test_video_id, make_source):
    assembler = TranscriptAssembler(make_source({"ar": []}), languages=["ar"])

    with pytest.raises(SummarizerError) as exc_info:
        assembler.get_transcript(test_video_id)

    assert exc_info.value.code == ErrorCode.NO_TRANSCRIPT


def test_get_transcript_that_cleans_to_nothing(test_video_id, make_source):
    source = make_source({"ar": ["[موسيقى]", "(تصفيق)", "&#39;"]})
    assembler = TranscriptAssembler(source, languages=["ar"])

    with pytest.raises(SummarizerError) as exc_info:
        assembler.get_transcript(test_video_id)

    assert exc_info.value.code == ErrorCode.EMPTY_TRANSCRIPT
    assert exc_info.value.status_code == 422


def _snippet(text):
    snippet = MagicMock()
    snippet.text = text
    snippet.start = 0.0
    snippet.duration = 1.5
    return snippet


def test_youtube_source_fetches_requested_language(test_video_id):
    api = MagicMock()
    api.fetch.return_value = [_snippet("hello"), _snippet("world")]

    segments = YouTubeTranscriptSource(api).fetch(test_video_id, lang="en")

    api.fetch.assert_called_once_with(test_video_id, languages=["en"])
    assert [segment.text for segment in segments] == ["hello", "world"]
    assert segments[0].duration == 1.5


def test_youtube_source_automatic_selection_uses_first_listed(test_video_id):
    first, second = MagicMock(), MagicMock()
    first.language_code = "ja"
    first.fetch.return_value = [_snippet("konnichiwa")]
    api = MagicMock()
    api.list.return_value = [first, second]

    segments = YouTubeTranscriptSource(api).fetch(test_video_id)

    assert [segment.text for segment in segments] == ["konnichiwa"]
    second.fetch.assert_not_called()


def test_youtube_source_with_empty_listing(test_video_id):
    api = MagicMock()
    api.list.return_value = []

    with pytest.raises(TranscriptNotAvailable):
        YouTubeTranscriptSource(api).fetch(test_video_id)


def test_youtube_source_translates_library_errors(test_video_id):
    api = MagicMock()
    api.fetch.side_effect = TranscriptsDisabled(test_video_id)
    with pytest.raises(TranscriptNotAvailable):
        YouTubeTranscriptSource(api).fetch(test_video_id, lang="ar")

    api.fetch.side_effect = VideoUnavailable(test_video_id)
    with pytest.raises(VideoNotAvailable):
        YouTubeTranscriptSource(api).fetch(test_video_id, lang="ar")


def test_assembler_defaults_to_youtube_source():
    with patch("ytsummary.core.transcript.YouTubeTranscriptSource") as mock_source_class:
        assembler = TranscriptAssembler()

    assert assembler.source is mock_source_class.return_value
    assert assembler.languages == ["ar", "en", "fr", "de", "es", "tr", "it", "pt"]
