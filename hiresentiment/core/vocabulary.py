"""Fixed keyword vocabularies used by the query interpreter, scorer, and summaries.

Loaded once and treated as read-only configuration. Pass a custom
Vocabulary to swap in smaller lists (tests do this).
"""

from pydantic import BaseModel, ConfigDict

# Technologies picked out of a "Requirements:" line.
REQUIREMENT_KEYWORDS: tuple[str, ...] = (
    "java", "javascript", "python", "react", "angular", "vue", "node.js",
    "aws", "azure", "kubernetes", "docker", "sql", "mongodb", "postgresql",
    "redis", "git", "jenkins", "terraform", "ansible",
)

# Technologies picked out of anywhere in the query.
TECH_STACK_TERMS: tuple[str, ...] = (
    "react", "angular", "vue", "javascript", "typescript", "node.js", "express",
    "python", "django", "flask", "fastapi", "java", "spring", "hibernate",
    "c#", ".net", "asp.net", "php", "laravel", "symfony",
    "aws", "azure", "gcp", "kubernetes", "docker", "terraform",
    "mysql", "postgresql", "mongodb", "redis", "elasticsearch",
    "react native", "flutter", "swift", "kotlin", "android", "ios",
    "machine learning", "ai", "tensorflow", "pytorch", "pandas", "numpy",
    "blockchain", "solidity", "web3", "ethereum",
    "devops", "ci/cd", "jenkins", "gitlab", "github actions",
)

SPECIALIZED_SKILLS: tuple[str, ...] = (
    "aws", "azure", "kubernetes", "docker", "machine learning", "ai",
    "blockchain", "devops",
)

# Skills counted in the full-text search summary.
SUMMARY_SKILLS: tuple[str, ...] = (
    "react", "javascript", "python", "node.js", "typescript", "java", "c++", "c#",
    "aws", "docker", "kubernetes", "postgresql", "mongodb", "mysql", "redis",
    "machine learning", "ai", "deep learning", "tensorflow", "pytorch", "nlp",
    "devops", "ci/cd", "terraform", "ansible", "jenkins", "git", "github",
    "frontend", "backend", "full-stack", "mobile", "ios", "android", "flutter",
)


class Vocabulary(BaseModel):
    """The keyword lists one search run matches against."""

    model_config = ConfigDict(frozen=True)

    requirement_keywords: tuple[str, ...] = REQUIREMENT_KEYWORDS
    tech_stack: tuple[str, ...] = TECH_STACK_TERMS
    specialized_skills: tuple[str, ...] = SPECIALIZED_SKILLS
    summary_skills: tuple[str, ...] = SUMMARY_SKILLS


DEFAULT_VOCABULARY = Vocabulary()
