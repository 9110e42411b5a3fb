"""
Configuration settings for the YouTube summarizer application.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_list(name: str, default: List[str]) -> List[str]:
    """Read a comma separated list from the environment."""
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Video Summarizer"
    APP_VERSION = "0.2.0"

    # Directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Summarization backend: "local" (extractive) or "llm" (Groq via LangChain)
    SUMMARIZER_BACKEND = os.getenv("SUMMARIZER_BACKEND", "local").lower()
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.3-70b-versatile")
    SUMMARY_LANGUAGE = os.getenv("SUMMARY_LANGUAGE", "Arabic")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.0"))
    LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "1500"))

    # Transcript acquisition, tried in this order before automatic selection
    TRANSCRIPT_LANGUAGES = _env_list(
        "TRANSCRIPT_LANGUAGES", ["ar", "en", "fr", "de", "es", "tr", "it", "pt"]
    )

    # Word budgets
    MAX_WORDS = int(os.getenv("MAX_WORDS", "500"))
    LLM_MAX_WORDS = int(os.getenv("LLM_MAX_WORDS", "12000"))
    MAX_TRANSCRIPT_WORDS = int(os.getenv("MAX_TRANSCRIPT_WORDS", "24000"))

    # Deadline for the external calls of one request, in seconds
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))

    # In-memory response cache, 0 disables it
    CACHE_TTL = int(os.getenv("CACHE_TTL", "3600"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if cls.SUMMARIZER_BACKEND == "llm" and not cls.GROQ_API_KEY:
            print("WARNING: SUMMARIZER_BACKEND is 'llm' but GROQ_API_KEY is not set.")
            print("Please set it in the .env file or environment variables.")

    @classmethod
    def word_budget(cls, backend: str) -> int:
        """Get the clipping budget for a summarizer backend."""
        return cls.LLM_MAX_WORDS if backend == "llm" else cls.MAX_WORDS


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
