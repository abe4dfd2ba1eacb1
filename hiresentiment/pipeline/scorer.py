"""Rule-based job-fit scoring for candidates.

Score range: 0-100 (clamped by truncation, not rescaled). Every rule adds
non-negative points from ScoringConfig against the lower-cased resume.
Pure: the same candidate and signals always produce the same result.
"""

import logging

from hiresentiment.core.config import ScoringConfig
from hiresentiment.core.schemas import Candidate, JobSignals, ScoredCandidate
from hiresentiment.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

MAX_SCORE = 100

SENIOR_CUES = ("senior", "lead", "principal")
MID_CUES = ("3+", "4+", "5+")
JUNIOR_CUES = ("junior", "entry", "graduate")
EXTENSIVE_EXPERIENCE_CUES = ("5+", "6+", "7+")
GOOD_EXPERIENCE_CUES = ("3+", "4+")

DEFAULT_STRENGTH = "Technical background"
LIMITED_EXPERIENCE = "Limited relevant experience"

# (exclusive lower bound, reasoning, adds the limited-experience concern)
_REASONING_BANDS: list[tuple[int, str, bool]] = [
    (50, "Excellent match with strong alignment to job requirements", False),
    (35, "Strong match with good alignment to job requirements", False),
    (20, "Moderate match with some relevant skills and experience", False),
    (10, "Limited match, may require additional training", True),
]
_POOR_MATCH = "Poor match, significant training required"


def score_candidate(
    candidate: Candidate,
    signals: JobSignals,
    config: ScoringConfig | None = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> ScoredCandidate:
    """Score a single candidate against the parsed job signals.

    Args:
        candidate: The applicant to score. Never modified.
        signals: Output of the query interpreter.
        config: Rubric point values; defaults reproduce the standard rubric.
        vocabulary: Supplies the specialized-skills list.

    Returns:
        ScoredCandidate with score, reasoning, strengths, and concerns.
    """
    config = config or ScoringConfig()
    resume = candidate.resume.lower()
    score = 0
    strengths: list[str] = []
    concerns: list[str] = []

    if signals.title:
        for token in signals.title.lower().split():
            if token in resume:
                score += config.title_token_points

    for skill in signals.skills:
        if skill.lower() in resume:
            score += config.skill_points
            strengths.append(f"{skill} experience")

    for tech in signals.tech_stack:
        if tech in resume:
            score += config.tech_stack_points
            strengths.append(f"{tech} proficiency")

    level = signals.experience_level
    if level == "senior" and _mentions(resume, SENIOR_CUES):
        score += config.senior_points
        strengths.append("Senior level experience")
    elif level == "mid" and _mentions(resume, MID_CUES):
        score += config.mid_points
        strengths.append("Mid-level experience")
    elif level == "junior" and _mentions(resume, JUNIOR_CUES):
        score += config.junior_points
        strengths.append("Junior level experience")

    for keyword in signals.keywords:
        if keyword in resume:
            score += config.keyword_points

    if signals.education != "unspecified" and signals.education in resume:
        score += config.education_points
        strengths.append("Relevant education")

    if _mentions(resume, EXTENSIVE_EXPERIENCE_CUES):
        score += config.extensive_experience_points
        strengths.append("Extensive experience")
    elif _mentions(resume, GOOD_EXPERIENCE_CUES):
        score += config.good_experience_points
        strengths.append("Good experience")

    for skill in vocabulary.specialized_skills:
        if skill in resume:
            score += config.specialized_skill_points
            strengths.append(f"{skill} expertise")

    reasoning = _POOR_MATCH
    limited = True
    for threshold, text, adds_concern in _REASONING_BANDS:
        if score > threshold:
            reasoning, limited = text, adds_concern
            break
    if limited:
        concerns.append(LIMITED_EXPERIENCE)

    return ScoredCandidate(
        candidate=candidate,
        score=min(score, MAX_SCORE),
        reasoning=reasoning,
        strengths=strengths or [DEFAULT_STRENGTH],
        concerns=concerns,
    )


def score_candidates(
    candidates: list[Candidate],
    signals: JobSignals,
    config: ScoringConfig | None = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[ScoredCandidate]:
    """Score a batch of candidates, keeping the input order."""
    return [score_candidate(c, signals, config, vocabulary) for c in candidates]


def _mentions(text: str, cues: tuple[str, ...]) -> bool:
    return any(cue in text for cue in cues)
