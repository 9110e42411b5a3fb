"""
Main entry point for the YouTube Video Summarizer application.
"""

import sys
import json
import asyncio
import argparse
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastapi.concurrency import run_in_threadpool

from ytsummary.api.responses import assemble_response, error_response
from ytsummary.api.schemas import SummarizeResponse
from ytsummary.config import config
from ytsummary.core.clipper import clip_to_words
from ytsummary.core.errors import ErrorCode, SummarizerError, classify_exception
from ytsummary.core.summarizer import BaseSummarizer, LLMSummarizer, get_summarizer
from ytsummary.core.transcript import TranscriptAssembler
from ytsummary.core.transcript_source import TranscriptSource
from ytsummary.core.video_id import extract_video_id, is_valid_video_id
from ytsummary.models.schemas import SummaryMode
from ytsummary.utils.caching import cache_get, cache_set, summary_cache_key
from ytsummary.utils.logger import logging


def parse_mode(value: Optional[str]) -> SummaryMode:
    """Turn a requested mode name into a SummaryMode, detailed by default."""
    if value is None:
        return SummaryMode.DETAILED
    try:
        return SummaryMode(value)
    except ValueError:
        raise SummarizerError(ErrorCode.INVALID_MODE)


def summarize_youtube_video(
    video_id: str,
    mode: SummaryMode = SummaryMode.DETAILED,
    source: Optional[TranscriptSource] = None,
    summarizer: Optional[BaseSummarizer] = None,
    max_words: Optional[int] = None,
) -> SummarizeResponse:
    """
    Process a YouTube video: fetch the transcript, clip it and summarize it.

    Args:
        video_id: YouTube video ID
        mode: Summary style (used by the LLM backend)
        source: Transcript source (defaults to YouTube)
        summarizer: Summarizer backend (defaults to SUMMARIZER_BACKEND)
        max_words: Word budget (defaults to the backend's budget)

    Returns:
        SummarizeResponse ready to be returned by the API
    """
    summarizer = summarizer or get_summarizer()
    if max_words is None:
        max_words = config.word_budget(summarizer.name)

    # 1. Fetch and clean the transcript
    logging.info(f"Fetching transcript for video: {video_id}")
    transcript = TranscriptAssembler(source).get_transcript(video_id)

    if isinstance(summarizer, LLMSummarizer) and transcript.total_words > config.MAX_TRANSCRIPT_WORDS:
        raise SummarizerError(ErrorCode.VIDEO_TOO_LONG, video_id=video_id)

    # 2. Clip to the word budget
    clipped = clip_to_words(transcript.full_text, max_words)
    logging.info(f"Using {clipped.word_count} of {transcript.total_words} words")

    # 3. Summarize
    logging.info(f"Summarizing with the {summarizer.name} backend ({mode.value})")
    summary = summarizer.summarize(clipped, mode)

    return assemble_response(video_id, transcript, clipped, summary, max_words)


async def summarize_with_timeout(
    video_id: str,
    mode: SummaryMode = SummaryMode.DETAILED,
    source: Optional[TranscriptSource] = None,
    summarizer: Optional[BaseSummarizer] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Summarize a video under a deadline, reusing cached responses.

    The pipeline runs in the thread pool. When the deadline passes the call
    is abandoned and TIMEOUT is raised.

    Returns:
        Response body as a JSON-compatible dictionary
    """
    summarizer = summarizer or get_summarizer()
    timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
    key = summary_cache_key(summarizer.name, mode.value, video_id)

    cached = cache_get(key)
    if cached is not None:
        logging.info(f"Serving cached summary for {video_id}")
        return cached

    try:
        response = await asyncio.wait_for(
            run_in_threadpool(summarize_youtube_video, video_id, mode, source, summarizer),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logging.warning(f"Summarizing {video_id} exceeded {timeout} seconds")
        raise SummarizerError(ErrorCode.TIMEOUT, video_id=video_id)

    body = response.model_dump(by_alias=True, exclude_none=True)
    cache_set(key, body, config.CACHE_TTL)
    return body


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer")
    parser.add_argument("url", help="YouTube video URL or ID")
    parser.add_argument("--mode", default=SummaryMode.DETAILED.value,
                        choices=[mode.value for mode in SummaryMode],
                        help="Summary style for the LLM backend")
    parser.add_argument("--backend", default=config.SUMMARIZER_BACKEND,
                        choices=["local", "llm"], help="Summarizer backend")
    parser.add_argument("--max-words", type=int, default=None,
                        help="Word budget for the transcript")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    video_id = extract_video_id(args.url)
    try:
        if not video_id:
            raise SummarizerError(ErrorCode.INVALID_INPUT)
        if not is_valid_video_id(video_id):
            raise SummarizerError(ErrorCode.INVALID_VIDEO_ID, video_id=video_id)

        response = summarize_youtube_video(
            video_id,
            SummaryMode(args.mode),
            summarizer=get_summarizer(args.backend),
            max_words=args.max_words,
        )
    except Exception as e:
        error = classify_exception(e, video_id)
        if error.code == ErrorCode.INTERNAL_ERROR:
            logging.exception(f"Unexpected error while summarizing {video_id}")
        print(json.dumps(error_response(error.code.value, error.message, error.video_id),
                         ensure_ascii=False, indent=2))
        sys.exit(1)

    print(json.dumps(response.model_dump(by_alias=True, exclude_none=True), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
