"""Tests for the recruiter chat assistant."""

from unittest.mock import MagicMock

import pytest

from hiresentiment.chat.assistant import (
    CHAT_SYSTEM_PROMPT,
    DEFAULT_TEXT,
    FALLBACK_MODEL,
    HELP_TEXT,
    fallback_reply,
    reply,
)
from hiresentiment.core.config import ModelCallConfig
from hiresentiment.pipeline.orchestrator import InvalidQueryError


def _config(**overrides: object) -> ModelCallConfig:
    defaults: dict[str, object] = {"max_tokens": 50, "timeout_seconds": 2.0}
    defaults.update(overrides)
    return ModelCallConfig(**defaults)  # type: ignore[arg-type]


def _mock_provider(response: str | None = None, error: Exception | None = None) -> MagicMock:
    provider = MagicMock()
    provider.provider_id = "mock"
    provider.default_model = "llama3"
    if error is not None:
        provider.complete.side_effect = error
    else:
        provider.complete.return_value = response
    return provider


class TestFallbackReply:
    def test_search_intent(self) -> None:
        assert fallback_reply("find me someone").startswith("I can help you find candidates!")

    def test_refine_when_recent_history_searched(self) -> None:
        history = [{"sender": "user", "text": "Search for python devs"}]
        assert fallback_reply("find more", history).startswith("I can help you refine")

    def test_only_last_three_history_messages_count(self) -> None:
        history = [
            {"sender": "user", "text": "search java"},
            {"sender": "ai", "text": "ok"},
            {"sender": "user", "text": "ok"},
            {"sender": "ai", "text": "ok"},
        ]
        assert fallback_reply("find more", history).startswith("I can help you find candidates!")

    @pytest.mark.parametrize(
        ("message", "opening"),
        [
            ("any React people?", "Great! I can help you find frontend"),
            ("backend folks", "Excellent! I can help you find backend"),
            ("cloud engineers", "Perfect! I can help you find DevOps"),
            ("Android devs", "Great choice! I can help you find mobile"),
            ("machine learning", "Excellent! I can help you find data"),
            ("years of experience", "I can search our candidate database"),
        ],
    )
    def test_topics(self, message: str, opening: str) -> None:
        assert fallback_reply(message).startswith(opening)

    def test_help(self) -> None:
        assert fallback_reply("help") == HELP_TEXT

    def test_greeting(self) -> None:
        assert fallback_reply("hey there").startswith("Hello!")

    def test_thanks(self) -> None:
        assert fallback_reply("thank you").startswith("You're welcome!")

    def test_default(self) -> None:
        assert fallback_reply("zzz") == DEFAULT_TEXT


class TestReply:
    def test_empty_message_rejected(self) -> None:
        with pytest.raises(ValueError, match="Message is required"):
            reply("   ", [], None, _config())

    def test_non_string_message_rejected(self) -> None:
        with pytest.raises(InvalidQueryError, match="Message is required"):
            reply(42, [], None, _config())  # type: ignore[arg-type]

    @pytest.mark.parametrize("history", ["find", [1], [{"text": "find"}, None]])
    def test_malformed_history_rejected(self, history) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(InvalidQueryError, match="conversationHistory"):
            reply("find more", history, None, _config())

    def test_model_reply_cleaned(self) -> None:
        provider = _mock_provider("<think>plan</think>Perfect! I've found some great candidates!")
        answer = reply("top 5 react developers", [], provider, _config())
        assert answer.message == "Perfect! I've found some great candidates!"
        assert answer.model == "llama3"
        kwargs = provider.complete.call_args.kwargs
        assert kwargs["system"] == CHAT_SYSTEM_PROMPT
        assert kwargs["max_tokens"] == 50

    def test_configured_model_reported(self) -> None:
        provider = _mock_provider("Hi!")
        answer = reply("hello", [], provider, _config(model="llama3.1"))
        assert answer.model == "llama3.1"

    def test_provider_error_falls_back(self) -> None:
        provider = _mock_provider(error=TimeoutError("slow"))
        answer = reply("thanks", [], provider, _config())
        assert answer.model == FALLBACK_MODEL
        assert answer.message.startswith("You're welcome!")

    def test_empty_model_reply_falls_back(self) -> None:
        provider = _mock_provider("<think>never closed")
        answer = reply("zzz", [], provider, _config())
        assert answer.message == DEFAULT_TEXT
        assert answer.model == FALLBACK_MODEL

    def test_no_provider_uses_rules(self) -> None:
        answer = reply("zzz", None, None, _config())
        assert answer.message == DEFAULT_TEXT

    def test_disabled_skips_provider(self) -> None:
        provider = _mock_provider("model text")
        answer = reply("zzz", [], provider, _config(enabled=False))
        assert answer.message == DEFAULT_TEXT
        provider.complete.assert_not_called()
