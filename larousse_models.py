"""
Result types and errors for Larousse dictionary lookups.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class LarousseError(Exception):
    """Base class for every error raised while looking up a word."""


class FetchError(LarousseError):
    """The dictionary page could not be retrieved."""

    def __init__(self, message: str, url: str, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status

    @property
    def is_transport(self) -> bool:
        """True when no HTTP response was received at all."""
        return self.status is None


class MalformedUrlError(LarousseError):
    """The resolved page URL does not carry a word."""


class ExtractionError(LarousseError):
    """A required element is missing from the page layout."""


class SearchFailedError(LarousseError):
    """Raised by a search whenever any stage fails."""

    def __init__(self, word: str, cause: BaseException):
        super().__init__(
            f'Failed to get data for word "{word}": the Larousse website may be '
            f"unavailable or modified ({cause})"
        )
        self.word = word
        self.cause = cause


@dataclass(frozen=True)
class Onym:
    word: str
    url: Optional[str] = None
    info: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "url": self.url, "info": self.info}


@dataclass(frozen=True)
class Suggestion:
    word: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "url": self.url}


@dataclass(frozen=True)
class Definition:
    number: Optional[int]
    text: str
    examples: List[str] = field(default_factory=list)
    synonyms: List[Onym] = field(default_factory=list)
    antonyms: List[Onym] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "text": self.text,
            "examples": list(self.examples),
            "synonyms": [onym.to_dict() for onym in self.synonyms],
            "antonyms": [onym.to_dict() for onym in self.antonyms]
        }


@dataclass(frozen=True)
class Entry:
    spelling_groups: List[List[str]]
    grammatical_category: str
    origin: str
    definitions: List[Definition]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spellingGroups": [list(group) for group in self.spelling_groups],
            "grammaticalCategory": self.grammatical_category,
            "origin": self.origin,
            "definitions": [definition.to_dict() for definition in self.definitions]
        }


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one lookup.

    ``entry`` is set only for found pages; ``suggestions`` holds the
    homograph entries on a found page and the corrector proposals otherwise.
    """
    found: bool
    word: str
    url: str
    entry: Optional[Entry] = None
    suggestions: List[Suggestion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "found": self.found,
            "word": self.word,
            "url": self.url,
            "entry": self.entry.to_dict() if self.entry else None,
            "suggestions": [suggestion.to_dict() for suggestion in self.suggestions]
        }
