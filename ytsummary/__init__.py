"""
YouTube Video Summarizer.

Fetches the transcript of a YouTube video and summarizes it, either with a
local extractive summarizer or with an LLM.
"""

from ytsummary.config import config

__version__ = config.APP_VERSION
