"""CLI entry point for the HireSentiment candidate search service."""

import argparse
import logging
import sys
from contextlib import closing

from hiresentiment.core.config import Settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="HireSentiment - rank applicants against a recruiter's query",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser(
        "search", parents=[common], help="Rank candidates for a job query",
    )
    search_parser.add_argument("query", help='e.g. "top 3 react developers"')
    search_parser.add_argument(
        "--no-ai",
        action="store_true",
        help="Skip the model call and print the deterministic summary only",
    )

    keyword_parser = subparsers.add_parser(
        "keyword-search", parents=[common], help="Full-text search over resumes",
    )
    keyword_parser.add_argument("query")

    chat_parser = subparsers.add_parser(
        "chat", parents=[common], help="Ask the recruiter assistant",
    )
    chat_parser.add_argument("message")

    add_parser = subparsers.add_parser(
        "add-candidate", parents=[common], help="Add an applicant from a resume file",
    )
    add_parser.add_argument("--email", required=True)
    add_parser.add_argument("--resume", required=True, help="Path to .pdf, .txt or .md")
    add_parser.add_argument("--github", help="GitHub profile URL")
    add_parser.add_argument("--leetcode", help="LeetCode profile URL")
    add_parser.add_argument("--linkedin", help="LinkedIn profile URL")

    subparsers.add_parser("serve", parents=[common], help="Run the REST API")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def cmd_search(args: argparse.Namespace, settings: Settings) -> None:
    """Handle search subcommand."""
    from hiresentiment.core.db import fetch_applicant_candidates, init_db
    from hiresentiment.pipeline.orchestrator import (
        export_result_json,
        provider_for,
        search_candidates,
    )

    provider = None if args.no_ai else provider_for(settings.enrichment)
    with closing(init_db(settings.database.path)) as conn:
        result = search_candidates(
            args.query, lambda: fetch_applicant_candidates(conn), settings, provider
        )
    print(export_result_json(result))


def cmd_keyword_search(args: argparse.Namespace, settings: Settings) -> None:
    """Handle keyword-search subcommand."""
    from hiresentiment.core.db import fetch_applicant_candidates, init_db
    from hiresentiment.pipeline.orchestrator import export_result_json, search_by_keywords

    with closing(init_db(settings.database.path)) as conn:
        result = search_by_keywords(
            args.query, lambda: fetch_applicant_candidates(conn), settings
        )
    print(export_result_json(result))


def cmd_chat(args: argparse.Namespace, settings: Settings) -> None:
    """Handle chat subcommand."""
    from hiresentiment.chat.assistant import reply
    from hiresentiment.pipeline.orchestrator import provider_for

    answer = reply(args.message, [], provider_for(settings.chat), settings.chat)
    print(answer.message)


def cmd_add_candidate(args: argparse.Namespace, settings: Settings) -> None:
    """Handle add-candidate subcommand."""
    from hiresentiment.core.db import add_candidate, init_db
    from hiresentiment.profile.extractor import extract_resume_text

    print(f"Extracting text from {args.resume}...")
    text = extract_resume_text(args.resume)
    print(f"Extracted {len(text)} characters.")

    with closing(init_db(settings.database.path)) as conn:
        row_id = add_candidate(
            conn,
            args.email,
            text,
            github_url=args.github,
            linkedin_url=args.linkedin,
            leetcode_url=args.leetcode,
        )
    print(f"Applicant {args.email} stored with id {row_id}")


def cmd_serve(settings: Settings) -> None:
    """Handle serve subcommand."""
    from hiresentiment.api.app import create_app

    app = create_app(settings)
    app.run(host=settings.server.host, port=settings.server.port)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = Settings.from_yaml(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "search":
            cmd_search(args, settings)
        elif args.command == "keyword-search":
            cmd_keyword_search(args, settings)
        elif args.command == "chat":
            cmd_chat(args, settings)
        elif args.command == "add-candidate":
            cmd_add_candidate(args, settings)
        else:
            cmd_serve(settings)
    except (FileNotFoundError, ImportError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
