"""Orchestrator: wires pool source, interpreter, scorer, ranker, enricher, assembler.

Data flow:
  1. Validate query (empty or non-string → InvalidQueryError)
  2. Pool source → candidates (errors propagate, no partial results)
  3. Interpreter → JobSignals
  4. Scorer → ScoredCandidate per candidate
  5. Ranker → top N + deterministic tier summary
  6. Enricher → optional model restatement (never raises)
  7. Assembler → SearchResult
"""

import json
import logging
from collections.abc import Callable

from hiresentiment.core.config import ModelCallConfig, Settings
from hiresentiment.core.schemas import Candidate, KeywordSearchResult, SearchResult
from hiresentiment.llm import get_provider
from hiresentiment.llm.base import LLMProvider
from hiresentiment.pipeline.assembler import assemble, assemble_keyword_result
from hiresentiment.pipeline.enricher import enrich
from hiresentiment.pipeline.interpreter import interpret
from hiresentiment.pipeline.keyword_search import keyword_search, summarize_search_results
from hiresentiment.pipeline.ranker import rank
from hiresentiment.pipeline.scorer import score_candidates

logger = logging.getLogger(__name__)

# A pool source returns every applicant that has a resume, in any order.
CandidateSource = Callable[[], list[Candidate]]

EMPTY_POOL_ANALYSIS = "No candidates found in the database."
EMPTY_POOL_INSIGHTS = (
    "The database currently has no candidate profiles. "
    "Please add some candidates first."
)


class InvalidQueryError(ValueError):
    """Caller input was missing or malformed; nothing was searched."""


def require_query(query: object) -> str:
    """Return the query, or raise InvalidQueryError when it is not a non-blank string."""
    if not isinstance(query, str) or not query.strip():
        msg = "Search query is required"
        raise InvalidQueryError(msg)
    return query


def provider_for(config: ModelCallConfig) -> LLMProvider | None:
    """The configured provider, or None when model calls are disabled."""
    if not config.enabled:
        return None
    return get_provider(config.provider)


def search_candidates(
    query: str,
    fetch_candidates: CandidateSource,
    settings: Settings,
    provider: LLMProvider | None = None,
) -> SearchResult:
    """Run the AI candidate search for a single query.

    Args:
        query: Recruiter's free-text query (may hold "Job Title:" etc. lines).
        fetch_candidates: Pool source; read once per call.
        settings: Rubric, vocabulary, and enrichment settings.
        provider: Model used for summary enrichment. None skips enrichment.

    Raises:
        InvalidQueryError: If the query is empty or not a string.
    """
    query = require_query(query)
    logger.info("AI candidate search query: %r", query)

    candidates = fetch_candidates()
    if not candidates:
        return SearchResult(
            query=query,
            analysis=EMPTY_POOL_ANALYSIS,
            ai_insights=EMPTY_POOL_INSIGHTS,
        )

    signals = interpret(query, settings.vocabulary)
    logger.info(
        "Requested %d candidates; scoring %d in pool",
        signals.requested_count,
        len(candidates),
    )

    scored = score_candidates(candidates, signals, settings.scoring, settings.vocabulary)
    top, summary = rank(scored, signals.requested_count)
    insight = enrich(summary, query, top, provider, settings.enrichment)
    return assemble(query, top, summary, insight)


def search_by_keywords(
    query: str,
    fetch_candidates: CandidateSource,
    settings: Settings,
) -> KeywordSearchResult:
    """Run the full-text search mode, summarising the whole matched set.

    Raises:
        InvalidQueryError: If the query is empty or not a string.
    """
    query = require_query(query)
    logger.info("Keyword search query: %r", query)

    matches = keyword_search(fetch_candidates(), query, limit=settings.search_limit)
    analysis = summarize_search_results(
        query, [m.candidate for m in matches], settings.vocabulary
    )
    return assemble_keyword_result(query, matches, analysis)


def export_result_json(result: SearchResult | KeywordSearchResult) -> str:
    """Serialize a result to a JSON string."""
    return json.dumps(result.model_dump(mode="json"), indent=2)
