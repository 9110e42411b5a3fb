"""
FastAPI application for the YouTube Video Summarizer.
"""

import time
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from ytsummary.config import config
from ytsummary.api.responses import error_response
from ytsummary.api.routes import router
from ytsummary.core.errors import ErrorCode, SummarizerError, classify_exception
from ytsummary.utils.logger import logging

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for fetching and summarizing YouTube video transcripts",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.middleware("http")
async def answer_preflight(request: Request, call_next):
    """Answer every OPTIONS request under /api with an empty 204."""
    if request.method == "OPTIONS" and request.url.path.startswith("/api"):
        return Response(status_code=204, headers=CORS_HEADERS)
    return await call_next(request)


def _error_json(error: SummarizerError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=error_response(error.code.value, error.message, error.video_id),
    )


@app.exception_handler(SummarizerError)
async def summarizer_error_handler(request: Request, exc: SummarizerError):
    """Return classified failures with their mapped status."""
    logging.warning(f"{exc.code.value} for {request.url.path} (video: {exc.video_id})")
    return _error_json(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported as invalid input."""
    logging.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return _error_json(SummarizerError(ErrorCode.INVALID_INPUT))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Report unsupported methods in the same shape as every other failure."""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    response = _error_json(SummarizerError(ErrorCode.METHOD_NOT_ALLOWED))
    response.headers.update(exc.headers or {})
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    error = classify_exception(exc)
    if error.code == ErrorCode.INTERNAL_ERROR:
        logging.exception(f"Unhandled error for {request.url.path}", exc_info=exc)
    return _error_json(error)


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube Video Summarizer API",
    }
