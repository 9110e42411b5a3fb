"""
Module for summarizing transcripts, either locally or with LLM models.
"""

import os
import re
import json
from typing import Any, Dict, Optional

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter
from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from ytsummary.config import config
from ytsummary.core.extractive import build_summary, qualifying_sentences
from ytsummary.core.prompts import map_template, mode_instructions, system_template, user_template
from ytsummary.models.schemas import ClippedText, SummaryConfig, SummaryMode, SummaryResult
from ytsummary.utils.logger import logging

MAX_TOPICS = 5
DEFAULT_TITLE = "YouTube video"
FALLBACK_TITLE = "Video summary"

_CODE_FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CODE_FENCE_END = re.compile(r"\s*```$")


class BaseSummarizer:
    """Interface shared by the summarizer backends."""

    name = "base"

    def summarize(self, clipped: ClippedText, mode: SummaryMode = SummaryMode.DETAILED) -> SummaryResult:
        """
        Summarize a clipped transcript.

        Args:
            clipped: Transcript text cut to the backend's word budget
            mode: Requested summary style

        Returns:
            SummaryResult
        """
        raise NotImplementedError


class ExtractiveSummarizer(BaseSummarizer):
    """Offline summarizer that picks the highest ranked transcript sentences."""

    name = "local"

    def summarize(self, clipped: ClippedText, mode: SummaryMode = SummaryMode.DETAILED) -> SummaryResult:
        return build_summary(clipped)


def parse_llm_response(raw_text: str) -> Dict[str, Any]:
    """
    Extract the JSON object from a model reply.

    Args:
        raw_text: Model output, possibly wrapped in a Markdown code fence

    Returns:
        Dictionary with title, channel, summary, keyPoints, topics and verdict
    """
    cleaned = _CODE_FENCE_END.sub("", _CODE_FENCE_START.sub("", raw_text.strip())).strip()

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        parsed = None

    if not isinstance(parsed, dict):
        logging.warning("Could not parse JSON from the model reply, returning the raw text")
        return {
            "title": FALLBACK_TITLE,
            "channel": None,
            "summary": raw_text,
            "keyPoints": [],
            "topics": [],
            "verdict": None,
        }

    key_points = parsed.get("keyPoints")
    topics = parsed.get("topics")
    return {
        "title": parsed.get("title") or DEFAULT_TITLE,
        "channel": parsed.get("channel") or None,
        "summary": parsed.get("summary") or None,
        "keyPoints": [str(point) for point in key_points] if isinstance(key_points, list) else [],
        "topics": [str(topic) for topic in topics[:MAX_TOPICS]] if isinstance(topics, list) else [],
        "verdict": parsed.get("verdict") or None,
    }


class LLMSummarizer(BaseSummarizer):
    """Class to handle transcript summarization with a Groq hosted model."""

    name = "llm"

    def __init__(self, api_key: Optional[str] = None, summary_config: Optional[SummaryConfig] = None):
        """
        Initialize the summarizer with API key.

        Args:
            api_key: Groq API key (if None, will try to get from environment)
            summary_config: Model settings (defaults come from the app config)
        """
        self.api_key = api_key or os.getenv("GROQ_API_KEY") or config.GROQ_API_KEY
        if not self.api_key:
            raise ValueError("Groq API key is required. Set it in .env file or pass directly.")

        os.environ["GROQ_API_KEY"] = self.api_key

        self.config = summary_config or SummaryConfig(
            model=config.DEFAULT_SUMMARY_MODEL,
            temperature=config.LLM_TEMPERATURE,
            max_tokens=config.LLM_MAX_TOKENS,
            language=config.SUMMARY_LANGUAGE,
        )

    def build_system_prompt(self, mode: SummaryMode) -> str:
        """Build the system prompt for a summary mode."""
        return system_template.format(
            language=self.config.language,
            mode=mode.value,
            instructions=mode_instructions[mode.value],
        )

    def condense(self, text: str, llm) -> str:
        """
        Reduce a long transcript to partial summaries, one per chunk.

        Short transcripts are returned unchanged.
        """
        text_splitter = RecursiveCharacterTextSplitter(
            chunk_size=self.config.chunk_size,
            chunk_overlap=self.config.chunk_overlap
        )
        docs = text_splitter.split_documents([Document(page_content=text)])
        if len(docs) <= 1:
            return text

        logging.info(f"Transcript split into {len(docs)} chunks, summarizing each first")
        map_chain = ChatPromptTemplate.from_messages([("system", map_template)]) | llm

        interim_summaries = []
        for doc in docs:
            interim_summary = map_chain.invoke({"text": doc.page_content})
            interim_summaries.append(interim_summary.content)

        return "\n\n".join(interim_summaries)

    def summarize(self, clipped: ClippedText, mode: SummaryMode = SummaryMode.DETAILED) -> SummaryResult:
        llm = init_chat_model(
            model=self.config.model,
            model_provider="groq",
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens
        )

        text = self.condense(clipped.text, llm)

        summary_prompt = ChatPromptTemplate.from_messages([
            ("system", "{system}"),
            ("user", user_template),
        ])
        chain = summary_prompt | llm

        logging.info(f"Sending {clipped.word_count} words to {self.config.model} ({mode.value})")
        response = chain.invoke({
            "system": self.build_system_prompt(mode),
            "mode": mode.value,
            "text": text,
        })
        parsed = parse_llm_response(response.content)

        return SummaryResult(
            short_summary=parsed["summary"] or "",
            key_points=parsed["keyPoints"],
            topics=parsed["topics"],
            sentence_count=len(qualifying_sentences(clipped.text)),
            title=parsed["title"],
            channel=parsed["channel"],
            verdict=parsed["verdict"],
        )


SUMMARIZERS = {
    ExtractiveSummarizer.name: ExtractiveSummarizer,
    LLMSummarizer.name: LLMSummarizer,
}


def get_summarizer(backend: Optional[str] = None) -> BaseSummarizer:
    """
    Create the summarizer for a backend name.

    Args:
        backend: "local" or "llm" (defaults to SUMMARIZER_BACKEND)

    Returns:
        Summarizer instance
    """
    backend = (backend or config.SUMMARIZER_BACKEND).lower()
    if backend not in SUMMARIZERS:
        raise ValueError(f"Unknown summarizer backend: {backend!r}")
    return SUMMARIZERS[backend]()
