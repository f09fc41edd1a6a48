"""HTTP sidecar server for content-gate.

Runs as a lightweight stdlib HTTP server on localhost so a messaging
backend can gate messages without embedding Python.

Endpoints:
    POST /moderate   Full gate    {"content": "...", "history": [{"content": "..."}]}
    POST /validate   Validator    {"content": "..."}
    POST /detect     Detector     {"content": "..."}
    POST /redact     Redactor     {"content": "...", "mask": false}
    POST /spam       Heuristic    {"content": "...", "history": [...]}
    GET  /health     Health check

All endpoints expect/return JSON.  Bad input is a 400, anything else 500.
"""

from __future__ import annotations
import json
import os
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any

from .config import create_gate, load_default
from .formatter import warning_for
from .log import get_logger, setup_logging
from .patterns import detect
from .redactor import Redactor, RedactorConfig
from .spam import check_spam
from .validator import validate

log = get_logger(__name__)

DEFAULT_PORT = int(os.environ.get("CONTENT_GATE_PORT", "18792"))

# Shared state
_config: dict[str, Any] | None = None
_gate = None


def _get_gate():
    global _gate
    if _gate is None:
        _gate = create_gate(_config)
    return _gate


class ModerationHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the content-gate sidecar."""

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        data = json.loads(body) if body else {}
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        return data

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        log.debug("{} - {}", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok"})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            body = self._read_json()
            content = body.get("content")
            history = body.get("history") or []

            if self.path == "/moderate":
                self._respond(200, _get_gate().check(content, history).to_dict())

            elif self.path == "/validate":
                result = validate(content)
                out = result.to_dict()
                if not result.is_valid:
                    out["warning"] = warning_for(result.details)
                self._respond(200, out)

            elif self.path == "/detect":
                self._respond(200, detect(content).to_dict())

            elif self.path == "/redact":
                redactor = Redactor(RedactorConfig(mask=bool(body.get("mask", False))))
                result = redactor.sanitize(content)
                self._respond(200, {
                    "text": result.text,
                    "types": [c.value for c in result.categories],
                })

            elif self.path == "/spam":
                self._respond(200, check_spam(content, history).to_dict())

            else:
                self._respond(404, {"error": "not found"})

        except (TypeError, ValueError) as e:
            self._respond(400, {"error": str(e)})
        except Exception as e:
            log.exception("unhandled error on {}", self.path)
            self._respond(500, {"error": str(e)})


def serve(port: int = DEFAULT_PORT, config: dict[str, Any] | None = None) -> None:
    """Start the content-gate HTTP sidecar."""
    global _config, _gate
    _config = config if config is not None else load_default()
    _gate = None
    setup_logging(_config["log_level"], _config["log_file"])

    server = HTTPServer(("127.0.0.1", port), ModerationHandler)
    log.info("content-gate sidecar listening on http://127.0.0.1:{}", port)
    log.info("moderation: {}", "enabled" if _config["enabled"] else "disabled")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("shutting down")
        server.shutdown()


if __name__ == "__main__":
    import argparse
    from .config import load_from_yaml
    parser = argparse.ArgumentParser(description="content-gate HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--config", default=None, help="YAML config path")
    args = parser.parse_args()
    serve(port=args.port, config=load_from_yaml(args.config) if args.config else None)
