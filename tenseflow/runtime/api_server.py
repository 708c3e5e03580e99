"""Lightweight HTTP bridge for frontend -> TenseFlow core."""

from __future__ import annotations

import json
import logging
import os
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlparse

from tenseflow.config import TenseFlowConfig, load_config_from_env
from tenseflow.generator import ExampleGenerator
from tenseflow.reference import load_reference_tables

from .analyzer import AnalysisSession, AnalyzerClient, SubmissionInFlightError
from .ui_state import build_analysis_ui_feedback, build_display_payload

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class TenseFlowApiHandler(BaseHTTPRequestHandler):
    server_version = "TenseFlowHTTP/1.0"
    config: TenseFlowConfig = TenseFlowConfig()
    generator: ExampleGenerator | None = None
    session: AnalysisSession | None = None

    def _send_json(self, payload: dict | list, status: int = 200) -> None:
        encoded = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(encoded)))
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(encoded)

    def _read_json_body(self) -> dict:
        raw_length = self.headers.get("Content-Length") or "0"
        try:
            length = int(raw_length)
        except ValueError:
            raise ValueError(f"Content-Length must be an integer, got: {raw_length!r}") from None
        if length <= 0:
            return {}
        raw = self.rfile.read(length)
        try:
            parsed = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return parsed if isinstance(parsed, dict) else {}

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        logger.info("%s - %s", self.address_string(), format % args)

    def do_OPTIONS(self) -> None:  # noqa: N802
        self.send_response(204)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

    def do_GET(self) -> None:  # noqa: N802
        path = urlparse(self.path).path
        tables = load_reference_tables(self.config.reference_version)

        if path == "/health":
            self._send_json({"status": "ok"})
            return
        if path == "/api/example":
            generator = self.generator or ExampleGenerator(self.config)
            self._send_json(build_display_payload([generator.generate_for_display()], tables))
            return
        if path == "/api/reference":
            self._send_json(tables.as_payload())
            return
        self._send_json({"status": "error", "message": f"Unknown path: {path}"}, status=404)

    def do_POST(self) -> None:  # noqa: N802
        path = urlparse(self.path).path
        if path != "/api/analyze":
            self._send_json({"status": "error", "message": f"Unknown path: {path}"}, status=404)
            return
        session = self.session or AnalysisSession(client=AnalyzerClient.from_config(self.config))
        try:
            body = self._read_json_body()
            result = session.submit(body.get("sentence"))
        except ValueError as exc:
            self._send_json({"status": "error", "message": str(exc)}, status=400)
            return
        except SubmissionInFlightError as exc:
            self._send_json({"status": "error", "message": str(exc)}, status=409)
            return
        tables = load_reference_tables(self.config.reference_version)
        payload = build_display_payload(result.examples, tables)
        payload["feedback"] = build_analysis_ui_feedback(result)
        payload["fallback"] = result.fallback
        self._send_json(payload)


def build_handler(config: TenseFlowConfig) -> type:
    """Handler class bound to one config, generator and shared analysis session."""
    return type(
        "BoundTenseFlowApiHandler",
        (TenseFlowApiHandler,),
        {
            "config": config,
            "generator": ExampleGenerator(config),
            "session": AnalysisSession(client=AnalyzerClient.from_config(config)),
        },
    )


def main() -> None:
    logging.basicConfig(level=os.getenv("TENSEFLOW_LOG_LEVEL", "INFO").upper())
    host = os.getenv("TENSEFLOW_HTTP_HOST", "127.0.0.1")
    port = _env_int("TENSEFLOW_HTTP_PORT", 8000)
    handler = build_handler(load_config_from_env())
    server = ThreadingHTTPServer((host, port), handler)
    logger.info("TenseFlow HTTP bridge listening on http://%s:%s", host, port)
    try:
        server.serve_forever()
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
