"""
API routes for the YouTube Video Summarizer application.
"""

import traceback
from typing import Optional
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ytsummary.api.responses import error_response
from ytsummary.api.schemas import HealthResponse, SummarizeRequest
from ytsummary.config import config
from ytsummary.core.errors import ErrorCode, SummarizerError, classify_exception
from ytsummary.core.summarizer import get_summarizer
from ytsummary.core.video_id import extract_video_id, is_valid_video_id
from ytsummary.main import parse_mode, summarize_with_timeout
from ytsummary.utils.helpers import get_timestamp
from ytsummary.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])


def resolve_video_id(request: SummarizeRequest) -> str:
    """
    Pick the video ID from the request, videoId winning over url.

    Raises:
        SummarizerError: INVALID_INPUT or INVALID_VIDEO_ID
    """
    video_id = request.video_id if request.video_id is not None else extract_video_id(request.url)

    if not video_id:
        raise SummarizerError(ErrorCode.INVALID_INPUT)

    if not is_valid_video_id(video_id):
        raise SummarizerError(
            ErrorCode.INVALID_VIDEO_ID,
            message=f'The video identifier is not valid: "{video_id}"',
        )

    return video_id


@router.post("/summarize")
async def summarize_video(request: Optional[SummarizeRequest] = None):
    """
    Summarize a YouTube video by URL or ID.

    - Tries the preferred transcript languages in order, then automatic selection
    - Summarizes with the configured backend, local or LLM
    - Returns cached results for videos summarized recently
    """
    request = request or SummarizeRequest()
    video_id = resolve_video_id(request)
    mode = parse_mode(request.mode)

    logging.info(f"Summary requested for {video_id} ({mode.value})")
    try:
        body = await summarize_with_timeout(video_id, mode, summarizer=get_summarizer())
    except SummarizerError:
        raise
    except Exception as e:
        error = classify_exception(e, video_id)
        if error.code == ErrorCode.INTERNAL_ERROR:
            logging.error(f"Error processing video {video_id}: {str(e)}")
            logging.error(traceback.format_exc())
        raise error from e

    return JSONResponse(status_code=200, content=body)


@router.api_route("/summarize", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def summarize_method_not_allowed():
    """Reject every method other than POST and OPTIONS."""
    return JSONResponse(
        status_code=405,
        content=error_response(
            ErrorCode.METHOD_NOT_ALLOWED.value,
            SummarizerError(ErrorCode.METHOD_NOT_ALLOWED).message,
        ),
        headers={"Allow": "POST, OPTIONS"},
    )


@router.get("/health", response_model=HealthResponse)
async def health():
    """Report that the service is up and which backend it uses."""
    backend = config.SUMMARIZER_BACKEND
    return HealthResponse(
        status="ok",
        timestamp=get_timestamp(),
        backend=backend,
        model=config.DEFAULT_SUMMARY_MODEL if backend == "llm" else None,
    )
