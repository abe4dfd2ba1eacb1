"""Optional LLM rephrasing of the deterministic match summary.

The model is only allowed to restate the summary. Its answer is used
when it still names at least two match tiers; on any failure (error,
timeout, empty or off-format output) the deterministic summary is
returned unchanged. Single attempt, no retries.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from hiresentiment.core.config import ModelCallConfig
from hiresentiment.core.schemas import ScoredCandidate
from hiresentiment.llm import clean_response
from hiresentiment.llm.base import SYSTEM_PROMPT, LLMProvider

logger = logging.getLogger(__name__)

TIER_KEYWORDS = ("excellent match", "strong match", "moderate match", "limited match")
MIN_TIER_KEYWORDS = 2


def build_enrichment_prompt(summary: str, query: str, top: list[ScoredCandidate]) -> str:
    """Assemble the user prompt asking the model to restate the summary verbatim."""
    return (
        f'Search Query: "{query}"\n'
        f"Top {len(top)} Candidates: {len(top)}\n\n"
        "Provide ONLY a simple match count summary in this exact format:\n"
        f'"{summary}"\n\n'
        "Do NOT provide any other text, explanations, or advice. "
        "Only the match count summary.\n"
    )


def is_valid_insight(text: str) -> bool:
    """True when the text mentions at least two of the tier keywords."""
    hits = sum(1 for keyword in TIER_KEYWORDS if keyword in text)
    return hits >= MIN_TIER_KEYWORDS


def enrich(
    summary: str,
    query: str,
    top: list[ScoredCandidate],
    provider: LLMProvider | None,
    config: ModelCallConfig,
) -> str:
    """Return the model's restatement of summary, or summary itself on any failure."""
    if not config.enabled or provider is None or not summary:
        return summary

    prompt = build_enrichment_prompt(summary, query, top)
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(
            provider.complete,
            prompt,
            config.model,
            system=SYSTEM_PROMPT,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.timeout_seconds,
        )
        raw = future.result(timeout=config.timeout_seconds)
    except Exception:
        logger.warning(
            "Summary enrichment via %s failed, keeping deterministic summary",
            provider.provider_id,
            exc_info=True,
        )
        return summary
    finally:
        # Do not wait on a call that overran its timeout.
        executor.shutdown(wait=False, cancel_futures=True)

    insight = clean_response(raw)
    if not is_valid_insight(insight):
        logger.info("Model summary did not match the expected format, discarded")
        return summary
    return insight
