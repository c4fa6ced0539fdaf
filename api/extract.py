from http.server import BaseHTTPRequestHandler
from datetime import datetime, timezone
from urllib.parse import urlparse, parse_qs
import json
import os
import sys


# Ensure project root is on path so we can import the extractor
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from larousse_models import SearchFailedError  # noqa: E402
from larousse_search import LarousseSearch, config_from_env  # noqa: E402


def _api_log(level: str, event: str, **kwargs) -> None:
    """Structured stdout log for Vercel; all keys JSON-serializable."""
    payload = {"ts": datetime.now(timezone.utc).isoformat(), "level": level, "event": event, **{k: v for k, v in kwargs.items() if v is not None}}
    print(json.dumps(payload, default=str, ensure_ascii=False), flush=True)


class handler(BaseHTTPRequestHandler):
    """POST a saved Larousse page with ``?word=...&url=...`` (the resolved page URL)."""

    def do_POST(self):
        query = parse_qs(urlparse(self.path).query)
        word = query.get("word", [""])[0].strip()
        page_url = query.get("url", [""])[0].strip()
        if not word or not page_url:
            _api_log("WARN", "extract_missing_params", word=word or None, url=page_url or None)
            self._send_json({"error": "word and url query parameters are required."}, status=400)
            return

        content_length = int(self.headers.get("Content-Length", "0"))
        if content_length <= 0:
            self._send_json({"error": "Empty request body."}, status=400)
            return

        raw_body = self.rfile.read(content_length)
        if not raw_body:
            self._send_json({"error": "Empty request body."}, status=400)
            return

        charset = "utf-8"
        content_type = self.headers.get("Content-Type", "")
        if "charset=" in content_type:
            charset = content_type.split("charset=")[-1].split(";")[0].strip() or "utf-8"

        try:
            html_content = raw_body.decode(charset, errors="replace")
        except LookupError:
            self._send_json({"error": "Failed to decode request body."}, status=400)
            return

        try:
            searcher = LarousseSearch(config=config_from_env())
        except ValueError as exc:
            _api_log("ERROR", "extract_env_failed", error=str(exc))
            self._send_json({"error": str(exc)}, status=500)
            return

        try:
            result = searcher.search_document(word, page_url, html_content)
        except SearchFailedError as exc:
            _api_log("ERROR", "extract_failed", word=word, error=str(exc.cause))
            self._send_json({"error": f"Extraction failed: {exc}", "word": word}, status=502)
            return

        _api_log("INFO", "extract_done", word=word, found=result.found)
        self._send_json(result.to_dict(), status=200)

    def do_GET(self):
        self._send_json({"error": "Use POST to submit HTML."}, status=405)

    def _send_json(self, payload, status=200):
        body = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)
