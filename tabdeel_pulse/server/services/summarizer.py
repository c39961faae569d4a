"""
Thread summarisation.

Summaries are produced by a generative model through Pydantic AI. The
transcript is built locally as ``"<sender>: <text>"`` lines; everything else
is delegated to the model.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

import httpx
from google.genai import errors as genai_errors
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.monitoring import log_llm_call
from tabdeel_pulse.server.core.config import settings

logger = get_logger(__name__)

MIN_TRANSCRIPT_LENGTH = 50

SUMMARY_PROMPT = (
    "Summarize the following conversation into key bullet points. "
    "Focus on decisions made and action items:\n\n{transcript}"
)


class SummarizerError(Exception):
    """Base class for summarisation failures."""


class ConversationTooShortError(SummarizerError):
    """The transcript is too short to be worth summarising."""

    def __init__(self) -> None:
        super().__init__("Conversation is too short to summarize.")


class SummarizerUnavailableError(SummarizerError):
    """No model is configured (typically a missing API key)."""


class SummaryGenerationError(SummarizerError):
    """The model call failed or returned nothing usable."""


def build_transcript(lines: Iterable[Tuple[str, str]]) -> str:
    """Join ``(sender, text)`` pairs into one ``"sender: text"`` line each."""
    return "\n".join(f"{sender}: {text}" for sender, text in lines)


class ThreadSummarizer:
    """Summarise a thread transcript with a Pydantic AI agent.

    Args:
        model: A Pydantic AI model instance or model name. ``None`` means no
            model is configured and every call raises ``SummarizerUnavailableError``.
        model_name: Name reported in logs; defaults to ``str(model)``.
    """

    def __init__(self, model: Any | None, model_name: Optional[str] = None) -> None:
        self._model = model
        self.model_name = model_name or str(model)
        self._agent: Optional[Agent] = None
        if model is not None:
            self._agent = Agent(
                model,
                output_type=str,
                system_prompt="You summarise workplace chat threads for a busy operations team.",
            )

    @property
    def available(self) -> bool:
        return self._agent is not None

    async def summarize(self, thread_id: int, lines: Iterable[Tuple[str, str]]) -> str:
        """Return a bullet-point summary of the conversation.

        Raises:
            ConversationTooShortError: transcript shorter than 50 characters
            SummarizerUnavailableError: no model configured
            SummaryGenerationError: the model call failed
        """
        transcript = build_transcript(lines)
        if len(transcript) < MIN_TRANSCRIPT_LENGTH:
            raise ConversationTooShortError()
        if self._agent is None:
            raise SummarizerUnavailableError("Summarisation is not configured. Set GOOGLE_API_KEY to enable it.")

        logger.debug(f"Summarising thread {thread_id} ({len(transcript)} chars) with {self.model_name}")
        try:
            result = await self._agent.run(SUMMARY_PROMPT.format(transcript=transcript))
        except (AgentRunError, httpx.HTTPError, genai_errors.APIError) as e:
            logger.error(f"Summary generation failed for thread {thread_id}: {e}")
            raise SummaryGenerationError(f"Failed to generate summary: {e}") from e

        summary = (result.output or "").strip()
        log_llm_call(
            model=self.model_name,
            thread_id=thread_id,
            characters=len(transcript),
            tokens_used=result.usage().total_tokens,
        )
        if not summary:
            raise SummaryGenerationError("The model returned an empty summary.")
        return summary


_summarizer: Optional[ThreadSummarizer] = None


def create_default_summarizer() -> ThreadSummarizer:
    """Build a summarizer from settings; without an API key it is unavailable."""
    config = settings.google
    if not config.api_key:
        logger.info("GOOGLE_API_KEY is not set; thread summaries are disabled")
        return ThreadSummarizer(None, model_name=config.summary_model)
    model = GoogleModel(config.summary_model, provider=GoogleProvider(api_key=config.api_key))
    return ThreadSummarizer(model, model_name=config.summary_model)


def get_summarizer() -> ThreadSummarizer:
    """FastAPI dependency returning the process-wide summarizer."""
    global _summarizer
    if _summarizer is None:
        _summarizer = create_default_summarizer()
    return _summarizer
