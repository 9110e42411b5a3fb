"""
Extractive summarization of transcripts.

Sentences are ranked by the average frequency of their words across the whole
text, weighted by where they sit and how long they are. The best few become the
short summary, the next ones the key points, and the most frequent words the
topics. Everything is deterministic and runs offline.

Sentence splitting only looks at punctuation followed by whitespace, so
abbreviations, decimal numbers and quoted speech can split a sentence early.
"""

import re
from collections import Counter
from typing import List

from ytsummary.models.schemas import ClippedText, ScoredSentence, SummaryResult
from ytsummary.utils.helpers import capitalize

MIN_SENTENCE_LENGTH = 40
FALLBACK_SUMMARY_LENGTH = 300
MIN_TERM_LENGTH = 4

MAX_SUMMARY_SENTENCES = 3
SENTENCES_PER_SUMMARY_SENTENCE = 4
MAX_KEY_POINTS = 5
MAX_TOPICS = 5

# Position bonus
EDGE_SENTENCE_BONUS = 1.3
LEADING_SENTENCE_BONUS = 1.15
LEADING_SHARE = 0.2

# Length penalty
SHORT_SENTENCE_LENGTH = 50
SHORT_SENTENCE_PENALTY = 0.7
LONG_SENTENCE_LENGTH = 300
LONG_SENTENCE_PENALTY = 0.85

KEY_POINT_MAX_LENGTH = 150
KEY_POINT_ELLIPSIS = "..."

STOP_WORDS = frozenset([
    # Arabic
    'في', 'من', 'إلى', 'على', 'عن', 'مع', 'هذا', 'هذه', 'التي', 'الذي', 'كان', 'كانت',
    'هو', 'هي', 'هم', 'نحن', 'أنت', 'أنا', 'لا', 'ما', 'هل', 'إن', 'أن', 'كما', 'أو',
    'وكذلك', 'ولكن', 'لأن', 'حتى', 'قد', 'لقد', 'كل', 'جدا', 'فقط', 'أيضا', 'ثم',
    'لم', 'لن', 'ليس', 'عند', 'بعد', 'قبل', 'عندما', 'إذا', 'كيف', 'لماذا', 'ماذا',
    'يمكن', 'يجب', 'ذلك', 'تلك', 'الان', 'اليوم', 'وأن', 'وهو', 'وهي', 'وهم', 'وقد',
    # English
    'the', 'a', 'an', 'is', 'are', 'was', 'were', 'be', 'been', 'being',
    'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would', 'could', 'should',
    'may', 'might', 'shall', 'must', 'can', 'to', 'of', 'in', 'on', 'at', 'by',
    'for', 'with', 'about', 'as', 'this', 'that', 'these', 'those', 'it', 'its',
    'and', 'or', 'but', 'not', 'so', 'if', 'then', 'than', 'when', 'where',
    'how', 'what', 'which', 'who', 'just', 'also', 'very', 'more', 'some',
    'we', 'they', 'he', 'she', 'you', 'i', 'my', 'our', 'your', 'their', 'his', 'her',
])

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?؟])\s+|(?<=\n)")
_NON_WORD_CHARS = re.compile(r"[^\u0600-\u06FFa-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")
_TERMINAL_MARK = re.compile(r"[.!?؟]$")


def split_sentences(text: str) -> List[str]:
    """Split text into trimmed, non-empty sentences."""
    parts = (part.strip() for part in _SENTENCE_BOUNDARY.split(text))
    return [part for part in parts if part]


def qualifying_sentences(text: str) -> List[str]:
    """Sentences long enough to take part in ranking."""
    return [s for s in split_sentences(text) if len(s) >= MIN_SENTENCE_LENGTH]


def tokenize(text: str) -> List[str]:
    """Lowercase, keep Arabic and ASCII alphanumerics, drop short tokens."""
    normalized = _NON_WORD_CHARS.sub(" ", text.lower())
    return [word for word in _WHITESPACE.split(normalized) if len(word) >= MIN_TERM_LENGTH]


def compute_word_frequency(text: str) -> Counter:
    """Count every meaningful word of the text, stop words excluded."""
    return Counter(word for word in tokenize(text) if word not in STOP_WORDS)


def score_sentence(sentence: str, word_freq: Counter, index: int, total: int) -> float:
    """
    Score a sentence for inclusion in the summary.

    Args:
        sentence: Sentence text
        word_freq: Word frequencies of the whole text
        index: Position of the sentence
        total: Number of sentences

    Returns:
        Non-negative score, 0 for sentences without qualifying words
    """
    words = tokenize(sentence)
    if not words:
        return 0.0

    freq_score = sum(word_freq.get(word, 0) for word in words) / len(words)

    if index == 0 or index == total - 1:
        position_bonus = EDGE_SENTENCE_BONUS
    elif index < total * LEADING_SHARE:
        position_bonus = LEADING_SENTENCE_BONUS
    else:
        position_bonus = 1.0

    if len(sentence) < SHORT_SENTENCE_LENGTH:
        length_penalty = SHORT_SENTENCE_PENALTY
    elif len(sentence) > LONG_SENTENCE_LENGTH:
        length_penalty = LONG_SENTENCE_PENALTY
    else:
        length_penalty = 1.0

    return freq_score * position_bonus * length_penalty


def format_key_point(sentence: str) -> str:
    """Shorten long sentences and make sure the point ends with punctuation."""
    if len(sentence) > KEY_POINT_MAX_LENGTH:
        cut = KEY_POINT_MAX_LENGTH - len(KEY_POINT_ELLIPSIS)
        sentence = sentence[:cut] + KEY_POINT_ELLIPSIS

    return sentence if _TERMINAL_MARK.search(sentence) else sentence + "."


def extract_topics(word_freq: Counter) -> List[str]:
    """The most frequent words, capitalized."""
    return [capitalize(word) for word, _ in word_freq.most_common(MAX_TOPICS)]


def _in_original_order(scored: List[ScoredSentence]) -> List[ScoredSentence]:
    return sorted(scored, key=lambda item: item.index)


def build_summary(clipped: ClippedText) -> SummaryResult:
    """
    Build a summary from the clipped transcript.

    Args:
        clipped: Transcript text cut to the word budget

    Returns:
        SummaryResult with the short summary, key points and topics
    """
    text = clipped.text
    sentences = qualifying_sentences(text)

    if not sentences:
        return SummaryResult(
            short_summary=text[:FALLBACK_SUMMARY_LENGTH],
            key_points=[],
            topics=[],
            sentence_count=0,
        )

    word_freq = compute_word_frequency(text)
    total = len(sentences)

    scored = [
        ScoredSentence(sentence=sentence, index=index, score=score_sentence(sentence, word_freq, index, total))
        for index, sentence in enumerate(sentences)
    ]
    # Sentences without a single qualifying word are never picked
    candidates = [item for item in scored if tokenize(item.sentence)]
    if not candidates:
        return SummaryResult(
            short_summary=text[:FALLBACK_SUMMARY_LENGTH],
            topics=extract_topics(word_freq),
            sentence_count=total,
        )

    ranked = sorted(candidates, key=lambda item: item.score, reverse=True)

    summary_count = min(MAX_SUMMARY_SENTENCES, max(1, total // SENTENCES_PER_SUMMARY_SENTENCE))

    top = _in_original_order(ranked[:summary_count])
    short_summary = " ".join(item.sentence for item in top).strip()

    following = _in_original_order(ranked[summary_count:summary_count + MAX_KEY_POINTS])
    key_points = [format_key_point(item.sentence) for item in following]

    return SummaryResult(
        short_summary=short_summary,
        key_points=key_points,
        topics=extract_topics(word_freq),
        sentence_count=total,
    )
