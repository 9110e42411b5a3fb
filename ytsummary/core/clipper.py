"""
Word budget clipping for transcripts.
"""

from ytsummary.models.schemas import ClippedText
from ytsummary.utils.helpers import count_words, split_words

SENTENCE_END_MARKS = (".", "!", "؟", "?")

# A sentence end is only used when it lies past this share of the clipped text
BOUNDARY_MIN_RATIO = 0.6


def clip_to_words(text: str, max_words: int) -> ClippedText:
    """
    Cut text to its first max_words words, ending on a sentence if one is near.

    Args:
        text: Normalized transcript text
        max_words: Word budget

    Returns:
        ClippedText with the kept text and its word count
    """
    words = split_words(text)
    if len(words) <= max_words:
        return ClippedText(text=text, word_count=len(words))

    clipped = " ".join(words[:max_words])

    last_mark = max(clipped.rfind(mark) for mark in SENTENCE_END_MARKS)
    if last_mark > len(clipped) * BOUNDARY_MIN_RATIO:
        clipped = clipped[:last_mark + 1]

    return ClippedText(text=clipped, word_count=count_words(clipped))
