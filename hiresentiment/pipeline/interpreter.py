"""Turn a recruiter's free-text query into structured JobSignals.

Never raises: anything it cannot find resolves to a default
(no title, no skills, "unspecified" level/education, 5 results).
"""

import logging
import re

from hiresentiment.core.schemas import (
    DEFAULT_REQUESTED_COUNT,
    MAX_REQUESTED_COUNT,
    Education,
    ExperienceLevel,
    JobSignals,
)
from hiresentiment.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

# Tried in order against the lower-cased query; the first hit decides.
_COUNT_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"top\s+(\d+)"),
    re.compile(r"(\d+)\s+candidates?"),
    re.compile(r"(\d+)\s+developers?"),
    re.compile(r"(\d+)\s+engineers?"),
    re.compile(r"(\d+)\s+people"),
    re.compile(r"(\d+)\s+professionals?"),
]

_TITLE_LINE = re.compile(r"Job Title:\s*([^\n]+)", re.IGNORECASE)
_SKILLS_LINE = re.compile(r"Skills:\s*([^\n]+)", re.IGNORECASE)
_REQUIREMENTS_LINE = re.compile(r"Requirements:\s*([^\n]+)", re.IGNORECASE)

_NOT_SPECIFIED = "Not specified"

# (cues, result) pairs; the first pair with any cue present wins.
_EXPERIENCE_RULES: list[tuple[tuple[str, ...], ExperienceLevel]] = [
    (("senior", "lead", "principal"), "senior"),
    (("junior", "entry", "graduate"), "junior"),
    (("mid", "intermediate"), "mid"),
]

_EDUCATION_RULES: list[tuple[tuple[str, ...], Education]] = [
    (("bachelor", "degree"), "bachelor"),
    (("master", "mba"), "master"),
    (("phd", "doctorate"), "phd"),
]

# Query words at most this long are ignored by the general keyword pass.
_MIN_KEYWORD_LENGTH = 3


def interpret(query: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> JobSignals:
    """Parse a search query into JobSignals."""
    query = query or ""
    query_lower = query.lower()

    signals = JobSignals(
        title=extract_title(query),
        skills=extract_skills(query, vocabulary),
        tech_stack=extract_tech_stack(query_lower, vocabulary),
        keywords=[w for w in query_lower.split() if len(w) > _MIN_KEYWORD_LENGTH],
        experience_level=_first_match(query_lower, _EXPERIENCE_RULES),
        education=_first_match(query_lower, _EDUCATION_RULES),
        requested_count=extract_requested_count(query),
    )
    logger.debug("Interpreted query %r as %s", query, signals.model_dump())
    return signals


def extract_requested_count(query: str) -> int:
    """Return how many candidates the query asks for (1-20, default 5)."""
    query_lower = (query or "").lower()
    for pattern in _COUNT_PATTERNS:
        match = pattern.search(query_lower)
        if match:
            value = int(match.group(1))
            if 1 <= value <= MAX_REQUESTED_COUNT:
                return value
            return DEFAULT_REQUESTED_COUNT
    return DEFAULT_REQUESTED_COUNT


def extract_title(query: str) -> str | None:
    match = _TITLE_LINE.search(query)
    if not match:
        return None
    return match.group(1).strip() or None


def extract_skills(query: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Explicit "Skills:" entries first, then technologies named under "Requirements:".

    Skills are lower-cased so the two sources de-duplicate against each other.
    """
    skills: list[str] = []

    match = _SKILLS_LINE.search(query)
    if match:
        text = match.group(1).strip()
        if text != _NOT_SPECIFIED:
            for raw in text.split(","):
                skill = raw.strip().lower()
                if skill and skill not in skills:
                    skills.append(skill)

    match = _REQUIREMENTS_LINE.search(query)
    if match:
        text = match.group(1).strip()
        if text != _NOT_SPECIFIED:
            text_lower = text.lower()
            for tech in vocabulary.requirement_keywords:
                if tech in text_lower and tech not in skills:
                    skills.append(tech)

    return skills


def extract_tech_stack(query: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Every tech-stack term that appears anywhere in the query."""
    query_lower = query.lower()
    return [tech for tech in vocabulary.tech_stack if tech in query_lower]


def _first_match(text: str, rules, default="unspecified"):  # type: ignore[no-untyped-def]
    for cues, result in rules:
        if any(cue in text for cue in cues):
            return result
    return default
