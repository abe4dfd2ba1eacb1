"""Rank scored candidates and describe the top N as match tiers.

Tier counts cover only the truncated top-N list, never the whole pool:
the summary reads as "of the N you asked for".
"""

import logging

from hiresentiment.core.schemas import ScoredCandidate

logger = logging.getLogger(__name__)

# (tier name, exclusive lower bound, inclusive upper bound)
TIERS: list[tuple[str, int, int]] = [
    ("excellent", 50, 100),
    ("strong", 35, 50),
    ("moderate", 20, 35),
    ("limited", 10, 20),
]


def rank(
    scored: list[ScoredCandidate],
    requested_count: int,
) -> tuple[list[ScoredCandidate], str]:
    """Sort by score descending, keep the top N, and summarise them.

    The sort is stable, so equal scores keep their input order.
    """
    ordered = sorted(scored, key=lambda s: s.score, reverse=True)
    top = ordered[:requested_count]

    for position, s in enumerate(top, start=1):
        logger.debug(
            "%d. %s - Score: %d - %s", position, s.candidate.email, s.score, s.reasoning
        )

    return top, render_match_summary(tier_counts(top))


def tier_counts(top: list[ScoredCandidate]) -> dict[str, int]:
    """Count candidates per tier; scores of 10 or below land in no tier."""
    counts = {name: 0 for name, _, _ in TIERS}
    for s in top:
        for name, low, high in TIERS:
            if low < s.score <= high:
                counts[name] += 1
                break
    return counts


def render_match_summary(counts: dict[str, int]) -> str:
    """Render e.g. "1 excellent match, 2 strong matches"; empty if no tiers."""
    parts = []
    for name, _, _ in TIERS:
        n = counts.get(name, 0)
        if n > 0:
            parts.append(f"{n} {name} match{'es' if n > 1 else ''}")
    return ", ".join(parts)
