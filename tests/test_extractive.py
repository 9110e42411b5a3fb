"""
Tests for the extractive summarizer.
"""

from collections import Counter

import pytest

from ytsummary.core.extractive import (
    build_summary,
    compute_word_frequency,
    extract_topics,
    format_key_point,
    score_sentence,
    split_sentences,
)
from ytsummary.models.schemas import ClippedText
from ytsummary.utils.helpers import count_words

ARABIC_SENTENCES = [
    "الذكاء الاصطناعي يغير طريقة عمل الشركات الكبيرة حول العالم.",
    "تستخدم المستشفيات الذكاء الاصطناعي لتحليل الصور الطبية بسرعة؟",
    "يخشى بعض الموظفين أن يأخذ الذكاء الاصطناعي وظائفهم مستقبلا!",
    "لذلك تحتاج الحكومات إلى قوانين واضحة تنظم الذكاء الاصطناعي.",
]


def _clipped(text):
    return ClippedText(text=text, word_count=count_words(text))


def test_split_sentences_on_punctuation_and_newlines():
    text = "First one. Second one! Third one? رابعة؟ Fifth\nSixth"
    assert split_sentences(text) == ["First one.", "Second one!", "Third one?", "رابعة؟", "Fifth", "Sixth"]


def test_word_frequency_skips_short_and_stop_words():
    freq = compute_word_frequency("The data, the DATA and their data! Cat: هذه البيانات")
    assert freq["data"] == 3
    assert "their" not in freq
    assert "the" not in freq
    assert "cat" not in freq
    assert freq["البيانات"] == 1


def test_score_sentence_position_bonus():
    sentence = "alpha bravo charlie delta echo foxtrot golf hotel india"
    freq = Counter({"alpha": 4, "bravo": 2})
    base = 6 / 9

    assert score_sentence(sentence, freq, 0, 10) == pytest.approx(base * 1.3)
    assert score_sentence(sentence, freq, 1, 10) == pytest.approx(base * 1.15)
    assert score_sentence(sentence, freq, 5, 10) == pytest.approx(base)
    assert score_sentence(sentence, freq, 9, 10) == pytest.approx(base * 1.3)


def test_score_sentence_length_penalty():
    freq = Counter({"alpha": 4})

    assert score_sentence("alpha alpha", freq, 5, 10) == pytest.approx(4 * 0.7)
    assert score_sentence(" ".join(["alpha"] * 60), freq, 5, 10) == pytest.approx(4 * 0.85)


def test_score_sentence_without_qualifying_words():
    assert score_sentence("a bb ccc", Counter({"word": 3}), 0, 1) == 0


def test_format_key_point():
    long_sentence = "x" * 200
    formatted = format_key_point(long_sentence)
    assert len(formatted) == 150
    assert formatted.endswith("...")

    assert format_key_point("no punctuation here") == "no punctuation here."
    assert format_key_point("a question?") == "a question?"
    assert format_key_point("سؤال؟") == "سؤال؟"


def test_extract_topics_top_five_capitalized():
    freq = Counter(["video", "video", "video", "summary", "summary", "python", "tests", "words", "extra"])
    assert extract_topics(freq) == ["Video", "Summary", "Python", "Tests", "Words"]


def test_build_summary_without_sentences():
    text = "Hi there. " * 50

    result = build_summary(_clipped(text))

    assert result.sentence_count == 0
    assert result.key_points == []
    assert result.topics == []
    assert result.short_summary == text[:300]
    assert len(result.short_summary) == 300


def test_build_summary_with_sentences_lacking_words():
    """Short sentences still feed the topics when no long one can be ranked."""
    text = "Data science rocks. a bb ccc a bb ccc a bb ccc a bb ccc a bb ccc a bb ccc."

    result = build_summary(_clipped(text))

    assert result.sentence_count == 1
    assert result.short_summary == text
    assert result.key_points == []
    assert result.topics == ["Data", "Science", "Rocks"]


def test_build_summary_on_paragraph(english_paragraph):
    """Selected sentences come verbatim from the input."""
    result = build_summary(_clipped(english_paragraph))

    assert result.sentence_count == 8
    assert len(result.key_points) == 5
    assert len(result.topics) <= 5
    assert len(split_sentences(result.short_summary)) == 2
    for sentence in split_sentences(result.short_summary):
        assert sentence in english_paragraph
    for point in result.key_points:
        assert point in english_paragraph
    assert result.topics[0] == "Data"
    assert set(result.topics[1:3]) == {"Models", "Training"}


def test_build_summary_keeps_narrative_order(english_paragraph):
    result = build_summary(_clipped(english_paragraph))

    positions = [english_paragraph.index(point) for point in result.key_points]
    assert positions == sorted(positions)


def test_build_summary_on_arabic_text():
    text = " ".join(ARABIC_SENTENCES)

    result = build_summary(_clipped(text))

    assert result.sentence_count == 4
    assert result.short_summary == ARABIC_SENTENCES[0]
    assert result.key_points == ARABIC_SENTENCES[1:]
    assert result.topics[:2] == ["الذكاء", "الاصطناعي"]


def test_build_summary_is_deterministic(english_paragraph):
    first = build_summary(_clipped(english_paragraph))
    second = build_summary(_clipped(english_paragraph))
    assert first == second
