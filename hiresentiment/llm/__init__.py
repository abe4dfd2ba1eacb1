"""LLM provider registry with lazy loading.

Usage:
    from hiresentiment.llm import clean_response, get_provider

    provider = get_provider("ollama")
    text = clean_response(provider.complete(prompt, system=system))
"""

from __future__ import annotations

import importlib

from hiresentiment.llm.base import LLMProvider, clean_response

__all__ = ["LLMProvider", "available_providers", "clean_response", "get_provider"]

# Lazy registry: maps provider name → (module_path, class_name)
_REGISTRY: dict[str, tuple[str, str]] = {
    "anthropic": ("hiresentiment.llm.anthropic", "AnthropicProvider"),
    "openai": ("hiresentiment.llm.openai", "OpenAIProvider"),
    "gemini": ("hiresentiment.llm.gemini", "GeminiProvider"),
    "ollama": ("hiresentiment.llm.ollama", "OllamaProvider"),
}


def get_provider(name: str) -> LLMProvider:
    """Instantiate and return an LLM provider by name.

    Args:
        name: Provider identifier (anthropic, openai, gemini, ollama).

    Returns:
        An LLMProvider instance.

    Raises:
        ValueError: If the provider name is unknown.
    """
    if name not in _REGISTRY:
        valid = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown LLM provider '{name}'. Available: {valid}"
        raise ValueError(msg)

    module_path, class_name = _REGISTRY[name]
    module = importlib.import_module(module_path)
    cls = getattr(module, class_name)
    return cls()  # type: ignore[no-any-return]


def available_providers() -> list[str]:
    """Return sorted list of registered provider names."""
    return sorted(_REGISTRY)
