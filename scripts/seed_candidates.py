#!/usr/bin/env python3
"""Load applicants from a YAML file into the candidate store.

Each entry needs an email and either inline resume text or a resume_path
(.pdf, .txt, .md, relative to the YAML file). Existing emails are updated.

Usage:
    python scripts/seed_candidates.py config/sample_candidates.yaml
    python scripts/seed_candidates.py candidates.yaml --db data/other.db
"""

import argparse
import logging
import sys
from contextlib import closing
from pathlib import Path
from typing import Any

import yaml

# Ensure project root is on the path when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from hiresentiment.core.db import add_candidate, init_db
from hiresentiment.profile.extractor import extract_resume_text

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def _load_entries(path: Path) -> list[dict[str, Any]]:
    raw = yaml.safe_load(path.read_text()) or {}
    entries = raw.get("candidates", []) if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        msg = f"Expected a list of candidates in {path}"
        raise ValueError(msg)
    return entries


def _resume_for(entry: dict[str, Any], base_dir: Path) -> str:
    if entry.get("resume"):
        return str(entry["resume"])
    if entry.get("resume_path"):
        return extract_resume_text(base_dir / entry["resume_path"])
    msg = f"Candidate {entry.get('email')} has neither resume nor resume_path"
    raise ValueError(msg)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed applicants into the candidate store")
    parser.add_argument("file", help="YAML file with a 'candidates' list")
    parser.add_argument("--db", default="data/hiresentiment.db", help="SQLite DB path")
    args = parser.parse_args()

    path = Path(args.file)
    if not path.exists():
        print(f"ERROR: file not found: {path}")
        sys.exit(1)

    stored = 0
    with closing(init_db(args.db)) as conn:
        for entry in _load_entries(path):
            try:
                resume = _resume_for(entry, path.parent)
            except (FileNotFoundError, ImportError, ValueError) as e:
                logger.warning("Skipping %s: %s", entry.get("email"), e)
                continue
            add_candidate(
                conn,
                entry["email"],
                resume,
                github_url=entry.get("github_url"),
                linkedin_url=entry.get("linkedin_url"),
                leetcode_url=entry.get("leetcode_url"),
            )
            stored += 1
    print(f"Stored {stored} candidates in {args.db}")


if __name__ == "__main__":
    main()
