"""Ollama local LLM provider (OpenAI-compatible API)."""

import logging
import os

from hiresentiment.llm.base import SYSTEM_PROMPT, LLMProvider

logger = logging.getLogger(__name__)

_OLLAMA_BASE_URL = "http://localhost:11434/v1"


class OllamaProvider(LLMProvider):
    """LLM provider using a local Ollama instance via OpenAI-compatible API."""

    @property
    def provider_id(self) -> str:
        return "ollama"

    @property
    def default_model(self) -> str:
        return "llama3"

    @property
    def env_var(self) -> None:
        return None

    @property
    def base_url(self) -> str:
        return os.environ.get("OLLAMA_BASE_URL", _OLLAMA_BASE_URL)

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
        try:
            import openai
        except ImportError:
            msg = (
                "openai is required for Ollama (OpenAI-compatible API). "
                "Install with: pip install 'hiresentiment[openai]'"
            )
            raise ImportError(msg) from None

        client = openai.OpenAI(
            base_url=self.base_url, api_key="ollama", timeout=timeout, max_retries=0
        )
        use_model = model or self.default_model
        use_system = system if system is not None else SYSTEM_PROMPT

        kwargs: dict[str, object] = {}
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        logger.info("Sending prompt to Ollama (%s)...", use_model)
        response = client.chat.completions.create(
            model=use_model,
            messages=[
                {"role": "system", "content": use_system},
                {"role": "user", "content": prompt},
            ],
            **kwargs,  # type: ignore[arg-type]
        )

        return response.choices[0].message.content  # type: ignore[no-any-return]
