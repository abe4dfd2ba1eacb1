"""Configuration models and YAML loader for the candidate search service."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from hiresentiment.core.vocabulary import Vocabulary

KNOWN_PROVIDERS = {"anthropic", "gemini", "ollama", "openai"}


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str = "data/hiresentiment.db"


class ScoringConfig(BaseModel):
    """Point values for the rule-based candidate rubric."""

    title_token_points: int = Field(default=15, ge=0)
    skill_points: int = Field(default=12, ge=0)
    tech_stack_points: int = Field(default=10, ge=0)
    senior_points: int = Field(default=8, ge=0)
    mid_points: int = Field(default=6, ge=0)
    junior_points: int = Field(default=4, ge=0)
    keyword_points: int = Field(default=3, ge=0)
    education_points: int = Field(default=5, ge=0)
    extensive_experience_points: int = Field(default=6, ge=0)
    good_experience_points: int = Field(default=4, ge=0)
    specialized_skill_points: int = Field(default=8, ge=0)


class ModelCallConfig(BaseModel):
    """Settings for a single external model call."""

    enabled: bool = True
    provider: str = "ollama"
    model: str | None = None
    timeout_seconds: float = Field(default=15.0, gt=0.0)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=300, ge=1)

    @field_validator("provider")
    @classmethod
    def provider_known(cls, v: str) -> str:
        v = v.lower().strip()
        if v not in KNOWN_PROVIDERS:
            msg = f"provider must be one of {sorted(KNOWN_PROVIDERS)}, got '{v}'"
            raise ValueError(msg)
        return v


def _chat_defaults() -> ModelCallConfig:
    return ModelCallConfig(max_tokens=50)


class ServerConfig(BaseModel):
    """HTTP server binding."""

    host: str = "127.0.0.1"
    port: int = Field(default=5001, ge=1, le=65535)


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    vocabulary: Vocabulary = Field(default_factory=Vocabulary)
    enrichment: ModelCallConfig = Field(default_factory=ModelCallConfig)
    chat: ModelCallConfig = Field(default_factory=_chat_defaults)
    server: ServerConfig = Field(default_factory=ServerConfig)
    search_limit: int = Field(default=20, ge=1)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
