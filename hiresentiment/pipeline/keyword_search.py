"""Full-text candidate search without a job context.

Ranks resumes by literal substring hits of the whole query and up to four
of its words, weighted by position. Its summary describes the entire
result set, unlike the top-N tier summary in ranker.py.
"""

import logging
from datetime import datetime

from hiresentiment.core.schemas import Candidate, KeywordMatch
from hiresentiment.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

TERM_WEIGHTS = (10, 5, 3, 2, 1)
MAX_QUERY_WORDS = 4
MIN_WORD_LENGTH = 2
DEFAULT_LIMIT = 20

TOP_SKILLS_KEPT = 5
TOP_SKILLS_SHOWN = 3

# (cues, label); the first pair with any cue in the resume decides.
_EXPERIENCE_LABELS: list[tuple[tuple[str, ...], str]] = [
    (("senior", "lead", "5+", "6+", "7+"), "Senior"),
    (("junior", "entry", "0-2", "1-2"), "Junior"),
    (("mid", "3+", "4+"), "Mid-level"),
]


def build_search_terms(query: str) -> list[str]:
    """The lower-cased query, then its first four words longer than two chars.

    Unused slots hold an empty term, which matches every resume.
    """
    query_lower = query.lower()
    words = [w for w in query_lower.split() if len(w) > MIN_WORD_LENGTH]
    terms = [query_lower, *words[:MAX_QUERY_WORDS]]
    while len(terms) < len(TERM_WEIGHTS):
        terms.append("")
    return terms


def relevance_score(resume: str, terms: list[str]) -> int:
    resume_lower = resume.lower()
    return sum(
        weight for weight, term in zip(TERM_WEIGHTS, terms) if term in resume_lower
    )


def keyword_search(
    candidates: list[Candidate],
    query: str,
    limit: int = DEFAULT_LIMIT,
) -> list[KeywordMatch]:
    """Return matching candidates, most relevant first, newest first on ties."""
    terms = build_search_terms(query)
    matches = [
        KeywordMatch(candidate=c, relevance_score=relevance_score(c.resume, terms))
        for c in candidates
    ]
    matches = [m for m in matches if m.relevance_score > 0]

    # Two stable passes: secondary key first, then the primary one.
    matches.sort(key=lambda m: m.candidate.created_at or datetime.min, reverse=True)
    matches.sort(key=lambda m: m.relevance_score, reverse=True)
    logger.info("Keyword search %r matched %d candidates", query, len(matches))
    return matches[:limit]


def top_skills(
    candidates: list[Candidate],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Most frequently mentioned summary skills, by number of resumes."""
    counts: dict[str, int] = {}
    for c in candidates:
        resume = c.resume.lower()
        for skill in vocabulary.summary_skills:
            if skill in resume:
                counts[skill] = counts.get(skill, 0) + 1
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [skill for skill, _ in ranked[:TOP_SKILLS_KEPT]]


def experience_levels(candidates: list[Candidate]) -> list[str]:
    """Distinct experience labels present in the set, in first-seen order."""
    levels: list[str] = []
    for c in candidates:
        resume = c.resume.lower()
        for cues, label in _EXPERIENCE_LABELS:
            if any(cue in resume for cue in cues):
                if label not in levels:
                    levels.append(label)
                break
    return levels


def summarize_search_results(
    query: str,
    candidates: list[Candidate],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> str:
    """Describe the whole matched set: size, top skills, experience levels."""
    if not candidates:
        return (
            f'No candidates found matching "{query}". '
            "Try broadening your search terms or using different keywords."
        )

    n = len(candidates)
    analysis = f'Found {n} candidate{"" if n == 1 else "s"} matching "{query}". '

    skills = top_skills(candidates, vocabulary)
    if skills:
        analysis += f"Top skills found: {', '.join(skills[:TOP_SKILLS_SHOWN])}. "

    levels = experience_levels(candidates)
    if levels:
        analysis += f"Experience levels: {', '.join(levels)}. "

    return analysis + "Candidates are ranked by relevance to your search criteria."
