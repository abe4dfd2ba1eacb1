"""Flask REST API for candidate search and the recruiter chat assistant."""

import logging
import sqlite3
from collections.abc import Callable
from typing import Any

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from hiresentiment.chat.assistant import reply
from hiresentiment.core.config import Settings
from hiresentiment.core.db import (
    connect_db,
    count_candidates,
    fetch_applicant_candidates,
    init_db,
)
from hiresentiment.llm.base import LLMProvider
from hiresentiment.pipeline.orchestrator import (
    InvalidQueryError,
    provider_for,
    search_by_keywords,
    search_candidates,
)

logger = logging.getLogger(__name__)

_UNSET = object()


def create_app(
    settings: Settings,
    connect: Callable[[], sqlite3.Connection] | None = None,
    *,
    enrichment_provider: LLMProvider | None | object = _UNSET,
    chat_provider: LLMProvider | None | object = _UNSET,
) -> Flask:
    """Build the Flask app.

    Each request opens its own store connection and closes it on teardown.

    Args:
        settings: Loaded settings.
        connect: Opens a connection to the applicant store. Defaults to
            settings.database.path, whose schema is created up front.
        enrichment_provider: Model for summary enrichment; defaults to the
            configured provider. Pass None to disable.
        chat_provider: Model for chat replies; same defaults as above.
    """
    app = Flask(__name__)

    if connect is None:
        init_db(settings.database.path).close()

        def connect() -> sqlite3.Connection:
            return connect_db(settings.database.path)

    if enrichment_provider is _UNSET:
        enrichment_provider = provider_for(settings.enrichment)
    if chat_provider is _UNSET:
        chat_provider = provider_for(settings.chat)

    def get_conn() -> sqlite3.Connection:
        if "conn" not in g:
            g.conn = connect()
        return g.conn

    @app.teardown_appcontext
    def close_conn(_error: BaseException | None) -> None:
        conn = g.pop("conn", None)
        if conn is not None:
            conn.close()

    def fetch_candidates():  # type: ignore[no-untyped-def]
        return fetch_applicant_candidates(get_conn())

    def json_payload() -> dict[str, Any]:
        payload = request.get_json(silent=True)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            msg = "Request body must be a JSON object"
            raise InvalidQueryError(msg)
        return payload

    @app.get("/api/health")
    def health():  # type: ignore[no-untyped-def]
        return jsonify({"success": True, "candidates": count_candidates(get_conn())})

    @app.post("/api/ai-candidates/search")
    def ai_candidate_search():  # type: ignore[no-untyped-def]
        result = search_candidates(
            json_payload().get("query"),
            fetch_candidates,
            settings,
            enrichment_provider,  # type: ignore[arg-type]
        )
        return jsonify({"success": True, "results": result.model_dump(mode="json")})

    @app.post("/api/smart-hire/search")
    def smart_hire_search():  # type: ignore[no-untyped-def]
        result = search_by_keywords(json_payload().get("query"), fetch_candidates, settings)
        return jsonify({"success": True, "results": result.model_dump(mode="json")})

    @app.post("/api/ai-chat/assistant")
    def chat_assistant():  # type: ignore[no-untyped-def]
        payload = json_payload()
        history = payload.get("conversationHistory")
        answer = reply(
            payload.get("message"),
            [] if history is None else history,
            chat_provider,  # type: ignore[arg-type]
            settings.chat,
        )
        return jsonify({"success": True, "response": answer.model_dump(mode="json")})

    @app.errorhandler(InvalidQueryError)
    def handle_bad_request(error: InvalidQueryError):  # type: ignore[no-untyped-def]
        return jsonify({"success": False, "error": str(error)}), 400

    @app.errorhandler(Exception)
    def handle_error(error: Exception):  # type: ignore[no-untyped-def]
        if isinstance(error, HTTPException):
            return jsonify({"success": False, "error": error.description}), error.code
        logger.exception("Unhandled error serving %s", request.path)
        return jsonify({"success": False, "error": str(error)}), 500

    return app
