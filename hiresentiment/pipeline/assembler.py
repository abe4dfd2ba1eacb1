"""Pack ranked candidates and summaries into the API result shapes."""

from typing import Any

from hiresentiment.core.schemas import (
    KeywordMatch,
    KeywordSearchResult,
    ScoredCandidate,
    SearchResult,
)


def candidate_view(scored: ScoredCandidate) -> dict[str, Any]:
    """Candidate fields plus relevance_score, match_reasoning, strengths, concerns."""
    view = scored.candidate.model_dump(mode="json")
    view.update(
        relevance_score=scored.score,
        match_reasoning=scored.reasoning,
        strengths=list(scored.strengths),
        concerns=list(scored.concerns),
    )
    return view


def assemble(
    query: str,
    top: list[ScoredCandidate],
    summary: str,
    insight: str | None = None,
) -> SearchResult:
    """Build the AI search payload; ai_insights falls back to the summary."""
    return SearchResult(
        query=query,
        candidates=[candidate_view(s) for s in top],
        analysis=summary,
        ai_insights=summary if insight is None else insight,
        total_candidates=len(top),
    )


def assemble_keyword_result(
    query: str,
    matches: list[KeywordMatch],
    analysis: str,
) -> KeywordSearchResult:
    """Build the full-text search payload."""
    candidates = []
    for m in matches:
        c = m.candidate
        candidates.append(
            {
                "id": c.id,
                "email": c.email,
                "resume": c.resume,
                "github_url": c.github_url,
                "linkedin_url": c.linkedin_url,
                "leetcode_url": c.leetcode_url,
                "relevance_score": m.relevance_score,
                "profile_created": c.created_at.isoformat() if c.created_at else None,
            }
        )
    return KeywordSearchResult(
        query=query,
        candidates=candidates,
        total_candidates=len(matches),
        analysis=analysis,
    )
