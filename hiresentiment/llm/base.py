"""Abstract base class for LLM providers and shared response handling."""

import re
from abc import ABC, abstractmethod

SYSTEM_PROMPT = (
    "You are an AI recruiter analyzing candidates from our database. "
    "You ONLY analyze the actual candidates in our database. Do NOT provide "
    "general advice, salary information, or external recommendations. "
    "Focus solely on the candidates we have in our system."
)

_THINK_BLOCK = re.compile(r"<think>.*?</think>", re.IGNORECASE | re.DOTALL)
_UNCLOSED_THINK = re.compile(r"<think>.*$", re.IGNORECASE | re.DOTALL)
_EXTRA_BLANK_LINES = re.compile(r"\n\s*\n\s*\n")


def clean_response(raw_text: str | None) -> str:
    """Strip <think> reasoning blocks and surplus blank lines from model output.

    An opening <think> with no closing tag swallows the rest of the text.
    """
    if not raw_text:
        return ""
    cleaned = _THINK_BLOCK.sub("", raw_text)
    cleaned = _UNCLOSED_THINK.sub("", cleaned)
    cleaned = _EXTRA_BLANK_LINES.sub("\n\n", cleaned)
    return cleaned.strip()


class LLMProvider(ABC):
    """Base class that every LLM provider must implement."""

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Unique identifier for this provider (e.g. 'ollama')."""

    @abstractmethod
    def complete(
        self,
        prompt: str,
        model: str | None = None,
        *,
        system: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout: float | None = None,
    ) -> str:
        """Send a prompt to the LLM and return the raw response text.

        Args:
            prompt: User message content.
            model: Override the provider's default model. None uses default.
            system: Override the system prompt. None falls back to SYSTEM_PROMPT.
            temperature: Sampling temperature. None uses the SDK default.
            max_tokens: Upper bound on generated tokens.
            timeout: Seconds before the SDK abandons the request.

        Returns:
            Raw text response from the LLM.
        """

    @property
    @abstractmethod
    def default_model(self) -> str:
        """The default model ID used when no override is specified."""

    @property
    @abstractmethod
    def env_var(self) -> str | None:
        """Environment variable name for the API key, or None if not needed."""
