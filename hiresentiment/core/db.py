"""SQLite applicant store: the candidate pool source for searches."""

import sqlite3
from datetime import datetime
from pathlib import Path

from hiresentiment.core.schemas import Candidate

_APPLICANTS_TABLE = """
CREATE TABLE IF NOT EXISTS applicants (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    email           TEXT    NOT NULL UNIQUE,
    resume          TEXT,
    github_url      TEXT,
    linkedin_url    TEXT,
    leetcode_url    TEXT,
    created_at      TEXT    NOT NULL
);
"""


def connect_db(path: str | Path) -> sqlite3.Connection:
    """Open a connection to an existing store without touching the schema."""
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    return conn


def init_db(path: str | Path) -> sqlite3.Connection:
    """Create the database and tables, returning a connection."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = connect_db(path)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute(_APPLICANTS_TABLE)
    conn.commit()
    return conn


def add_candidate(
    conn: sqlite3.Connection,
    email: str,
    resume: str | None,
    *,
    github_url: str | None = None,
    linkedin_url: str | None = None,
    leetcode_url: str | None = None,
    created_at: datetime | None = None,
) -> int:
    """Insert or update an applicant keyed by email. Returns the row ID."""
    stamp = (created_at or datetime.now()).isoformat()
    conn.execute(
        """
        INSERT INTO applicants
            (email, resume, github_url, linkedin_url, leetcode_url, created_at)
        VALUES (?, ?, ?, ?, ?, ?)
        ON CONFLICT(email)
        DO UPDATE SET
            resume = excluded.resume,
            github_url = COALESCE(excluded.github_url, github_url),
            linkedin_url = COALESCE(excluded.linkedin_url, linkedin_url),
            leetcode_url = COALESCE(excluded.leetcode_url, leetcode_url)
        """,
        (email, resume, github_url, linkedin_url, leetcode_url, stamp),
    )
    conn.commit()
    row = conn.execute("SELECT id FROM applicants WHERE email = ?", (email,)).fetchone()
    return int(row["id"])


def fetch_applicant_candidates(conn: sqlite3.Connection) -> list[Candidate]:
    """Return every applicant that has a resume on file.

    Row order carries no meaning; callers rank the result themselves.
    """
    rows = conn.execute(
        """
        SELECT id, email, resume, github_url, linkedin_url, leetcode_url, created_at
        FROM applicants
        WHERE resume IS NOT NULL
        """
    ).fetchall()
    return [_row_to_candidate(row) for row in rows]


def count_candidates(conn: sqlite3.Connection) -> int:
    """Number of applicants with a resume on file."""
    row = conn.execute(
        "SELECT COUNT(*) AS n FROM applicants WHERE resume IS NOT NULL"
    ).fetchone()
    return int(row["n"])


def _row_to_candidate(row: sqlite3.Row) -> Candidate:
    created = row["created_at"]
    return Candidate(
        id=row["id"],
        email=row["email"],
        resume=row["resume"],
        github_url=row["github_url"],
        linkedin_url=row["linkedin_url"],
        leetcode_url=row["leetcode_url"],
        created_at=datetime.fromisoformat(created) if created else None,
    )
