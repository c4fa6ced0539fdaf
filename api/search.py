from http.server import BaseHTTPRequestHandler
from datetime import datetime, timezone
from urllib.parse import urlparse, parse_qs
import json
import os
import sys


PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from larousse_models import FetchError, SearchFailedError  # noqa: E402
from larousse_search import LarousseSearch, config_from_env  # noqa: E402


def _api_log(level: str, event: str, **kwargs) -> None:
    """Structured stdout log for Vercel; all keys JSON-serializable."""
    payload = {"ts": datetime.now(timezone.utc).isoformat(), "level": level, "event": event, **{k: v for k, v in kwargs.items() if v is not None}}
    print(json.dumps(payload, default=str, ensure_ascii=False), flush=True)


class handler(BaseHTTPRequestHandler):
    def _send_json(self, payload, status=200):
        body = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        query = parse_qs(urlparse(self.path).query)
        word = query.get("word", [""])[0].strip()
        if not word:
            _api_log("WARN", "search_missing_word")
            self._send_json({"error": "word is required."}, status=400)
            return

        _api_log("INFO", "search_start", word=word)
        try:
            searcher = LarousseSearch(config=config_from_env())
        except ValueError as exc:
            _api_log("ERROR", "search_env_failed", error=str(exc))
            self._send_json({"error": str(exc)}, status=500)
            return

        try:
            result = searcher.search(word)
        except SearchFailedError as exc:
            status = exc.cause.status if isinstance(exc.cause, FetchError) else None
            _api_log("ERROR", "search_failed", word=word, upstream_status=status, error=str(exc.cause))
            self._send_json({"error": str(exc), "word": word}, status=502)
            return

        _api_log("INFO", "search_done", word=word, found=result.found, resolved=result.word)
        self._send_json(result.to_dict(), status=200)
