#!/usr/bin/env python3
"""
Larousse Search

Looks a French word up on larousse.fr and returns the extracted entry, or
the spelling suggestions when the word is unknown.
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Callable, Dict, NamedTuple, Optional
from urllib.parse import quote, urljoin

import requests

from larousse_extract import LarousseExtractor, classify_page
from larousse_models import FetchError, SearchFailedError, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "site_url": "https://www.larousse.fr/",
    "dictionary_url": "https://www.larousse.fr/dictionnaires/francais/",
    "timeout": 30,
    "user_agent": "LarousseToJSON/1.0 (Educational/Personal Use)"
}


class FetchedPage(NamedTuple):
    url: str
    status: int
    content: str


def config_from_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Read LAROUSSE_* overrides; unset or blank variables are ignored."""
    environ = os.environ if environ is None else environ
    config = {}
    for key, name in (("site_url", "LAROUSSE_SITE_URL"), ("dictionary_url", "LAROUSSE_DICTIONARY_URL")):
        value = environ.get(name, "").strip()
        if value:
            config[key] = value
    timeout = environ.get("LAROUSSE_TIMEOUT", "").strip()
    if timeout:
        try:
            config["timeout"] = float(timeout)
        except ValueError as exc:
            raise ValueError(f"Invalid LAROUSSE_TIMEOUT: {timeout!r}") from exc
    return config


def build_word_url(dictionary_url: str, word: str) -> str:
    return urljoin(dictionary_url, quote(word))


def fetch_page(url: str, timeout: float = 30, user_agent: Optional[str] = None) -> FetchedPage:
    """GET ``url`` following redirects; ``FetchedPage.url`` is the final URL."""
    headers = {"User-Agent": user_agent} if user_agent else {}
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch page {url}: {exc}", url=url) from exc

    if not response.ok:
        raise FetchError(
            f"Failed to fetch page {url}, server responded with {response.status_code}",
            url=url,
            status=response.status_code
        )

    html_text = response.content.decode("utf-8", errors="replace")
    return FetchedPage(url=response.url, status=response.status_code, content=html_text)


class LarousseSearch:
    """Fetches a Larousse page and turns it into a SearchResult.

    ``fetcher`` takes a URL and returns a ``FetchedPage``; it defaults to a
    ``requests`` GET using the configured timeout and user agent.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 fetcher: Optional[Callable[[str], FetchedPage]] = None):
        default_config = dict(DEFAULT_CONFIG)
        if config:
            default_config.update(config)
        self.config = default_config
        self.fetcher = fetcher or self._fetch

    def _fetch(self, url: str) -> FetchedPage:
        return fetch_page(url, timeout=self.config["timeout"], user_agent=self.config["user_agent"])

    def search(self, word: str) -> SearchResult:
        url = build_word_url(self.config["dictionary_url"], word)
        logger.info("Fetching %s", url)
        try:
            page = self.fetcher(url)
            resolved_url, html_content = page.url, page.content
        except Exception as exc:
            logger.warning("Search for %r failed while fetching: %s", word, exc)
            raise SearchFailedError(word, exc) from exc
        return self.search_document(word, resolved_url, html_content)

    def search_document(self, word: str, url: str, html_content: str) -> SearchResult:
        """Run the extraction on an already fetched page.

        ``url`` is the page URL after redirects.
        """
        try:
            page = classify_page(url, word)
            extractor = LarousseExtractor(html_content, config={"site_url": self.config["site_url"]})
            entry = extractor.extract_entry() if page.found else None
            suggestions = extractor.extract_suggestions(page.found)
        except Exception as exc:
            logger.warning("Search for %r failed while extracting: %s", word, exc)
            raise SearchFailedError(word, exc) from exc

        logger.debug("%r resolved to %r (found=%s)", word, page.word, page.found)
        return SearchResult(
            found=page.found,
            word=page.word,
            url=url,
            entry=entry,
            suggestions=suggestions
        )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Look a word up in the Larousse French dictionary')
    parser.add_argument('word', help='Word to look up')
    parser.add_argument('output_file', nargs='?', help='Output JSON file (optional, defaults to stdout)')
    parser.add_argument('-c', '--config', help='JSON config file path')
    parser.add_argument('--html', help='Extract from a saved HTML page instead of fetching')
    parser.add_argument('--url', help='Resolved URL of the saved page (required with --html)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if args.html and not args.url:
        parser.error('--url is required with --html')

    # Load config if provided
    config = None
    if args.config:
        try:
            with open(args.config, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Error reading config file: {e}", file=sys.stderr)
            sys.exit(1)

    searcher = LarousseSearch(config=config)
    try:
        if args.html:
            with open(args.html, 'r', encoding='utf-8') as f:
                html_content = f.read()
            result = searcher.search_document(args.word, args.url, html_content)
        else:
            result = searcher.search(args.word)
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        sys.exit(1)
    except SearchFailedError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    json_output = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    if args.output_file:
        try:
            with open(args.output_file, 'w', encoding='utf-8') as f:
                f.write(json_output)
            print(f"Output saved to: {args.output_file}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(json_output)


if __name__ == '__main__':
    main()
