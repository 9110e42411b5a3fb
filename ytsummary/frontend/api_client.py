"""
API client for communicating with the YouTube Video Summarizer backend.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin
from ytsummary.config import config


class ApiError(Exception):
    """Failure reported by the summarizer API."""

    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"{code}: {message}")


class ApiClient:
    """Client for interacting with the YouTube Video Summarizer API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = config.REQUEST_TIMEOUT):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response before giving up
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def summarize(self, url: Optional[str] = None, video_id: Optional[str] = None,
                  mode: str = "detailed") -> Dict[str, Any]:
        """
        Request a video summary.

        Args:
            url: YouTube video URL
            video_id: YouTube video ID, used instead of url when given
            mode: Summary style: detailed, brief or bullets

        Returns:
            Response body with the transcript statistics and the summary

        Raises:
            ApiError: when the API answers with an error
        """
        payload: Dict[str, Any] = {"mode": mode}
        if url:
            payload["url"] = url
        if video_id:
            payload["videoId"] = video_id

        try:
            response = requests.post(self._url("summarize"), json=payload, timeout=self.timeout)
        except requests.Timeout:
            raise ApiError("TIMEOUT", "The server did not answer in time.")

        return self._handle(response)

    def health(self) -> Dict[str, Any]:
        """Check that the API is up."""
        response = requests.get(self._url("health"), timeout=self.timeout)
        return self._handle(response)

    @staticmethod
    def _handle(response: requests.Response) -> Dict[str, Any]:
        """Return the JSON body, raising ApiError for error responses."""
        try:
            body = response.json()
        except ValueError:
            response.raise_for_status()
            raise ApiError("INVALID_RESPONSE", "The server returned a non JSON body.", response.status_code)

        if response.status_code >= 400 or body.get("success") is False:
            error = body.get("error") or {}
            raise ApiError(
                error.get("code", "HTTP_ERROR"),
                error.get("message", f"Request failed with status {response.status_code}"),
                response.status_code,
            )

        return body
