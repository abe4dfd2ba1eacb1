"""Tests for configuration models and YAML loading."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from hiresentiment.core.config import (
    DatabaseConfig,
    ModelCallConfig,
    ScoringConfig,
    ServerConfig,
    Settings,
)


class TestScoringConfig:
    def test_defaults_match_rubric(self) -> None:
        c = ScoringConfig()
        assert c.title_token_points == 15
        assert c.skill_points == 12
        assert c.tech_stack_points == 10
        assert c.senior_points == 8
        assert c.mid_points == 6
        assert c.junior_points == 4
        assert c.keyword_points == 3
        assert c.education_points == 5
        assert c.extensive_experience_points == 6
        assert c.good_experience_points == 4
        assert c.specialized_skill_points == 8

    def test_negative_points_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoringConfig(skill_points=-1)


class TestModelCallConfig:
    def test_defaults(self) -> None:
        c = ModelCallConfig()
        assert c.enabled is True
        assert c.provider == "ollama"
        assert c.model is None
        assert c.timeout_seconds == 15.0
        assert c.max_tokens == 300

    def test_provider_normalized(self) -> None:
        assert ModelCallConfig(provider=" OpenAI ").provider == "openai"

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValidationError, match="provider must be one of"):
            ModelCallConfig(provider="watson")

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ModelCallConfig(timeout_seconds=0)


class TestServerConfig:
    def test_defaults(self) -> None:
        s = ServerConfig()
        assert s.host == "127.0.0.1"
        assert s.port == 5001

    def test_port_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(port=0)


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.database == DatabaseConfig()
        assert s.chat.max_tokens == 50
        assert s.search_limit == 20
        assert "react" in s.vocabulary.tech_stack

    def test_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(
            dedent("""\
                database:
                  path: /tmp/test.db
                scoring:
                  skill_points: 20
                vocabulary:
                  specialized_skills: [rust, go]
                enrichment:
                  provider: anthropic
                  timeout_seconds: 5
                chat:
                  enabled: false
                server:
                  port: 8080
            """)
        )
        s = Settings.from_yaml(config_file)
        assert s.database.path == "/tmp/test.db"
        assert s.scoring.skill_points == 20
        assert s.scoring.title_token_points == 15
        assert s.vocabulary.specialized_skills == ("rust", "go")
        assert s.enrichment.provider == "anthropic"
        assert s.enrichment.timeout_seconds == 5.0
        assert s.chat.enabled is False
        assert s.server.port == 8080

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("")
        assert Settings.from_yaml(config_file) == Settings()

    def test_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Settings.from_yaml("/nonexistent/settings.yaml")

    def test_invalid_values(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("search_limit: 0\n")
        with pytest.raises(ValidationError):
            Settings.from_yaml(config_file)

    def test_shipped_config_loads(self) -> None:
        path = Path(__file__).parent.parent.parent / "config" / "settings.yaml"
        s = Settings.from_yaml(path)
        assert s.enrichment.provider == "ollama"
