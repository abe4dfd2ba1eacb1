"""Tests for the query interpreter."""

import pytest

from hiresentiment.core.vocabulary import Vocabulary
from hiresentiment.pipeline.interpreter import (
    extract_requested_count,
    extract_skills,
    extract_tech_stack,
    extract_title,
    interpret,
)

STRUCTURED_QUERY = (
    "Job Title: Senior Backend Engineer\n"
    "Skills: Python, AWS\n"
    "Requirements: Not specified"
)


# ---------------------------------------------------------------------------
# Requested count
# ---------------------------------------------------------------------------


class TestExtractRequestedCount:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("top 3 react developers", 3),
            ("Top 1 candidate", 1),
            ("find 7 candidates with go", 7),
            ("2 developers who know rust", 2),
            ("need 4 engineers", 4),
            ("10 people for the data team", 10),
            ("3 professionals", 3),
            ("top 20 engineers", 20),
        ],
    )
    def test_patterns(self, query: str, expected: int) -> None:
        assert extract_requested_count(query) == expected

    def test_default_when_absent(self) -> None:
        assert extract_requested_count("react developers") == 5

    def test_zero_falls_back_to_default(self) -> None:
        assert extract_requested_count("top 0 developers") == 5

    def test_above_limit_falls_back_to_default(self) -> None:
        assert extract_requested_count("top 50 developers") == 5

    def test_first_matching_pattern_wins(self) -> None:
        # "top 2" is tried before "N candidates"
        assert extract_requested_count("top 2 of 9 candidates") == 2

    def test_out_of_range_first_match_does_not_try_later_patterns(self) -> None:
        assert extract_requested_count("top 30, 3 candidates") == 5

    def test_empty_query(self) -> None:
        assert extract_requested_count("") == 5


# ---------------------------------------------------------------------------
# Structured lines
# ---------------------------------------------------------------------------


class TestExtractTitle:
    def test_title_line(self) -> None:
        assert extract_title(STRUCTURED_QUERY) == "Senior Backend Engineer"

    def test_case_insensitive(self) -> None:
        assert extract_title("job title: Data Scientist") == "Data Scientist"

    def test_missing(self) -> None:
        assert extract_title("top 3 react developers") is None


class TestExtractSkills:
    def test_explicit_skills_lowercased(self) -> None:
        assert extract_skills(STRUCTURED_QUERY) == ["python", "aws"]

    def test_not_specified_skills_ignored(self) -> None:
        assert extract_skills("Skills: Not specified") == []

    def test_requirements_add_known_technologies(self) -> None:
        query = "Skills: Python\nRequirements: Experience with Docker and Kubernetes"
        assert extract_skills(query) == ["python", "kubernetes", "docker"]

    def test_requirements_do_not_duplicate_explicit_skills(self) -> None:
        query = "Skills: Docker\nRequirements: docker, terraform"
        assert extract_skills(query) == ["docker", "terraform"]

    def test_requirements_not_specified(self) -> None:
        assert extract_skills("Requirements: Not specified") == []

    def test_empty_entries_dropped(self) -> None:
        assert extract_skills("Skills: react, , vue,") == ["react", "vue"]

    def test_custom_vocabulary(self) -> None:
        vocab = Vocabulary(requirement_keywords=("elixir",))
        query = "Requirements: Elixir and Python"
        assert extract_skills(query, vocab) == ["elixir"]


class TestExtractTechStack:
    def test_scans_whole_query(self) -> None:
        stack = extract_tech_stack("top 3 react developers")
        assert "react" in stack

    def test_case_insensitive(self) -> None:
        assert "python" in extract_tech_stack("Senior PYTHON dev")

    def test_vocabulary_order(self) -> None:
        stack = extract_tech_stack("docker and python")
        assert stack.index("python") < stack.index("docker")

    def test_custom_vocabulary(self) -> None:
        vocab = Vocabulary(tech_stack=("zig",))
        assert extract_tech_stack("zig and python", vocab) == ["zig"]


# ---------------------------------------------------------------------------
# Full interpretation
# ---------------------------------------------------------------------------


class TestInterpret:
    def test_empty_query_defaults(self) -> None:
        signals = interpret("")
        assert signals.title is None
        assert signals.skills == []
        assert signals.tech_stack == []
        assert signals.keywords == []
        assert signals.experience_level == "unspecified"
        assert signals.education == "unspecified"
        assert signals.requested_count == 5

    def test_structured_query(self) -> None:
        signals = interpret(STRUCTURED_QUERY)
        assert signals.title == "Senior Backend Engineer"
        assert signals.skills == ["python", "aws"]
        assert signals.experience_level == "senior"
        assert "python" in signals.tech_stack
        assert "aws" in signals.tech_stack

    def test_react_example(self) -> None:
        signals = interpret("top 3 react developers")
        assert signals.requested_count == 3
        assert "react" in signals.tech_stack

    def test_keywords_longer_than_three_chars(self) -> None:
        signals = interpret("top 3 react developers")
        assert signals.keywords == ["react", "developers"]

    @pytest.mark.parametrize(
        ("query", "level"),
        [
            ("senior python dev", "senior"),
            ("tech lead", "senior"),
            ("principal engineer", "senior"),
            ("junior dev", "junior"),
            ("entry level", "junior"),
            ("graduate program", "junior"),
            ("mid level dev", "mid"),
            ("intermediate dev", "mid"),
            ("python dev", "unspecified"),
        ],
    )
    def test_experience_level(self, query: str, level: str) -> None:
        assert interpret(query).experience_level == level

    def test_senior_beats_junior(self) -> None:
        assert interpret("junior or senior developer").experience_level == "senior"

    def test_junior_beats_mid(self) -> None:
        assert interpret("junior to mid developer").experience_level == "junior"

    @pytest.mark.parametrize(
        ("query", "education"),
        [
            ("bachelor in CS", "bachelor"),
            ("degree required", "bachelor"),
            ("master of science", "master"),
            ("MBA preferred", "master"),
            ("PhD in ML", "phd"),
            ("doctorate holder", "phd"),
            ("no formal requirement", "unspecified"),
        ],
    )
    def test_education(self, query: str, education: str) -> None:
        assert interpret(query).education == education

    def test_bachelor_beats_master(self) -> None:
        assert interpret("master degree").education == "bachelor"

    def test_requested_count_always_in_range(self) -> None:
        for query in ("top 999", "top -3 devs", "0 people", "top 21 candidates", "x"):
            assert 1 <= interpret(query).requested_count <= 20
