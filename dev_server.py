from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import urlparse, parse_qs
import json
import logging
import os

from larousse_models import SearchFailedError
from larousse_search import LarousseSearch, config_from_env


class DevHandler(BaseHTTPRequestHandler):
    searcher = None

    def _set_headers(self, status=200):
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

    def _send_json(self, payload, status=200):
        self._set_headers(status)
        self.wfile.write(json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8"))

    def _query_param(self, name):
        query = parse_qs(urlparse(self.path).query)
        return query.get(name, [""])[0].strip()

    def do_OPTIONS(self):
        self._set_headers(204)

    def do_GET(self):
        if urlparse(self.path).path == "/search":
            return self._handle_search()

        self._send_json({"error": "Not found"}, status=404)

    def do_POST(self):
        if urlparse(self.path).path == "/extract":
            return self._handle_extract()

        self._send_json({"error": "Not found"}, status=404)

    def _handle_search(self):
        word = self._query_param("word")
        if not word:
            self._send_json({"error": "word is required."}, status=400)
            return

        try:
            result = self.searcher.search(word)
        except SearchFailedError as exc:
            self._send_json({"error": str(exc), "word": word}, status=502)
            return
        self._send_json(result.to_dict(), status=200)

    def _handle_extract(self):
        word = self._query_param("word")
        page_url = self._query_param("url")
        if not word or not page_url:
            self._send_json({"error": "word and url query parameters are required."}, status=400)
            return

        content_length = int(self.headers.get("Content-Length", "0"))
        if content_length <= 0:
            self._send_json({"error": "Empty request body."}, status=400)
            return

        raw_body = self.rfile.read(content_length)
        html_content = raw_body.decode("utf-8", errors="replace")
        try:
            result = self.searcher.search_document(word, page_url, html_content)
        except SearchFailedError as exc:
            self._send_json({"error": f"Extraction failed: {exc}", "word": word}, status=502)
            return
        self._send_json(result.to_dict(), status=200)


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    DevHandler.searcher = LarousseSearch(config=config_from_env())
    port = int(os.environ.get("DEV_SEARCH_PORT", "5005"))
    server = HTTPServer(("0.0.0.0", port), DevHandler)
    print(f"Dev API running on http://localhost:{port}")
    print(f"- GET  http://localhost:{port}/search?word=dormir")
    print(f"- POST http://localhost:{port}/extract?word=dormir&url=<resolved page url>")
    server.serve_forever()


if __name__ == "__main__":
    run()
