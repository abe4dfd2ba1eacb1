"""Core data models for candidate search."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ExperienceLevel = Literal["junior", "mid", "senior", "unspecified"]
Education = Literal["bachelor", "master", "phd", "unspecified"]

DEFAULT_REQUESTED_COUNT = 5
MAX_REQUESTED_COUNT = 20


class Candidate(BaseModel):
    """An applicant profile read from the candidate store.

    Frozen: scoring wraps it in a ScoredCandidate instead of mutating it.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    email: str
    resume: str
    github_url: str | None = None
    linkedin_url: str | None = None
    leetcode_url: str | None = None
    created_at: datetime | None = None


class JobSignals(BaseModel):
    """Structured requirements parsed out of a free-text search query."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    skills: list[str] = Field(default_factory=list)
    tech_stack: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel = "unspecified"
    education: Education = "unspecified"
    requested_count: int = Field(
        default=DEFAULT_REQUESTED_COUNT, ge=1, le=MAX_REQUESTED_COUNT
    )


class ScoredCandidate(BaseModel):
    """Wrapper that pairs a frozen Candidate with its rubric outcome."""

    model_config = ConfigDict(frozen=True)

    candidate: Candidate
    score: int = Field(default=0, ge=0, le=100)
    reasoning: str = ""
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)


class SearchResult(BaseModel):
    """Caller-facing payload of an AI candidate search."""

    query: str
    candidates: list[dict[str, Any]] = Field(default_factory=list)
    analysis: str = ""
    ai_insights: str = ""
    total_candidates: int = 0


class KeywordMatch(BaseModel):
    """A candidate found by the full-text search with its relevance points."""

    model_config = ConfigDict(frozen=True)

    candidate: Candidate
    relevance_score: int = 0


class KeywordSearchResult(BaseModel):
    """Caller-facing payload of a full-text candidate search."""

    query: str
    candidates: list[dict[str, Any]] = Field(default_factory=list)
    total_candidates: int = 0
    analysis: str = ""


class ChatReply(BaseModel):
    """A single assistant reply."""

    message: str
    timestamp: datetime = Field(default_factory=datetime.now)
    model: str
