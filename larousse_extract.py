"""
Larousse Entry Extractor

Extracts the lexical content of one Larousse dictionary page (spellings,
grammatical category, origin, definitions with examples and synonyms or
antonyms) and the word suggestions shown around it.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple
from urllib.parse import unquote, urljoin, urlparse

from bs4 import BeautifulSoup

from larousse_models import (
    Definition,
    Entry,
    ExtractionError,
    MalformedUrlError,
    Onym,
    Suggestion,
)
from larousse_nodes import (
    Element,
    Node,
    Text,
    element_from_soup,
    first_text,
    reconstruct_text,
)

logger = logging.getLogger(__name__)

DEFAULT_SITE_URL = "https://www.larousse.fr/"

ENTRY_ZONE = ".Zone-Entree1"
SPELLING_SELECTOR = f"{ENTRY_ZONE} > h2"
CATEGORY_SELECTOR = f"{ENTRY_ZONE} > .CatgramDefinition"
ORIGIN_SELECTOR = f"{ENTRY_ZONE} > .OrigineDefinition"
DEFINITIONS_SELECTOR = ".Definitions"

CORRECTOR_SELECTOR = ".corrector > ul > li > h3 > a"
HOMOGRAPH_SELECTOR = (
    ".wrapper-search > article:not(.sel) ~ .banner-title > .item-result > a, "
    ".wrapper-search > section:not(.banner-title ~ section) > "
    "article:not(.sel, .sous-article) > .item-result > a"
)

# Larousse uses the "Synonymes" class for both lists; only the label before
# the list tells them apart.
SYNONYM_LABELS = ("Synonyme :", "Synonymes :")
ONYM_SEPARATOR = " - "
DEFINITION_ARTIFACT = "\u00a0:"

NUMBER_CLASS = "numDef"
CROSS_REFERENCE_CLASS = "Renvois"
EXAMPLE_CLASS = "ExempleDefinition"
ONYMS_CLASS = "Synonymes"
ANNOTATION_CLASS = "indicateurDefinition"
DEFINITION_CLASS = "DivisionDefinition"


class PageClass(NamedTuple):
    found: bool
    word: str


def classify_page(url: str, word: str) -> PageClass:
    """Tell a found page from a not-found page by its resolved URL.

    Larousse redirects a matching word to its canonical entry URL
    (``/dictionnaires/francais/dormir/26439``) and re-renders the requested
    URL when nothing matches, so a last path segment equal to the query
    means "not found".
    """
    path = urlparse(url).path
    if path.endswith("/"):
        path = path[:-1]
    segments = [unquote(segment) for segment in path.split("/")[1:]]
    if len(segments) < 2:
        raise MalformedUrlError(f'Invalid argument: failed to get word from url "{url}"')

    last = segments[-1]
    if last == word:
        return PageClass(found=False, word=word)
    if last.isdigit():
        return PageClass(found=True, word=segments[-2])
    return PageClass(found=True, word=last)


def extract_onyms(siblings: Sequence[Node], index: int, site_url: str = DEFAULT_SITE_URL) -> Tuple[str, List[Onym]]:
    """Parse the synonym or antonym list at ``siblings[index]``.

    Returns ``("synonyms", onyms)`` or ``("antonyms", onyms)``.
    """
    container = siblings[index]
    label = siblings[index - 2] if index >= 2 else None
    label_text = None
    if isinstance(label, Element) and label.children and isinstance(label.children[0], Text):
        label_text = label.children[0].data
    kind = "synonyms" if label_text in SYNONYM_LABELS else "antonyms"

    onyms = []
    children = container.children
    for position, child in enumerate(children):
        if isinstance(child, Text):
            if child.data != ONYM_SEPARATOR:
                onyms.extend(_split_text_onyms(children, position))
        elif isinstance(child, Element) and child.has_class(CROSS_REFERENCE_CLASS):
            onym = _linked_onym(child, site_url)
            if onym is not None:
                onyms.append(onym)
    return kind, onyms


def _split_text_onyms(siblings: Sequence[Node], index: int) -> List[Onym]:
    """Split a run such as ``"beau - joli"`` into onyms.

    Only the last word of the run can take the usage note that follows it.
    """
    fragments = siblings[index].data.split(ONYM_SEPARATOR)
    following = siblings[index + 1] if index + 1 < len(siblings) else None
    onyms = []
    for position, fragment in enumerate(fragments):
        word = fragment.strip()
        if not word:
            continue
        info = None
        if position == len(fragments) - 1 and isinstance(following, Element) and following.has_class(ANNOTATION_CLASS):
            info = reconstruct_text(following.children) or None
        onyms.append(Onym(word=word, info=info))
    return onyms


def _find_link(element: Element) -> Optional[Element]:
    if element.get("href") is not None:
        return element
    for child in element.children:
        if isinstance(child, Element):
            link = _find_link(child)
            if link is not None:
                return link
    return None


def _linked_onym(element: Element, site_url: str) -> Optional[Onym]:
    link = _find_link(element)
    word = first_text(link or element)
    if word is None or not word.strip():
        return None
    url = urljoin(site_url, link.get("href")) if link is not None else None
    return Onym(word=word.strip(), url=url)


def _parse_number(element: Element) -> Optional[int]:
    text = first_text(element)
    if text is None:
        return None
    token = text.strip().split(".")[0].strip()
    if not token.isdecimal():
        logger.debug("Ignoring non-numeric definition marker %r", text)
        return None
    return int(token)


def extract_definition(element: Element, site_url: str = DEFAULT_SITE_URL) -> Definition:
    """Build a Definition from one ``.DivisionDefinition`` block."""
    number = None
    text = ""
    examples = []
    onyms = {"synonyms": [], "antonyms": []}

    children = element.children
    for index, child in enumerate(children):
        if isinstance(child, Text):
            if child.data.strip():
                text += child.data
            continue
        if not isinstance(child, Element):
            continue

        if child.has_class(NUMBER_CLASS):
            number = _parse_number(child)
        elif child.has_class(CROSS_REFERENCE_CLASS):
            reference = first_text(child)
            if reference:
                text += reference.strip()
        elif child.has_class(EXAMPLE_CLASS):
            example = first_text(child)
            if example and example.strip():
                examples.append(example.strip())
        elif child.has_class(ONYMS_CLASS):
            kind, listed = extract_onyms(children, index, site_url)
            onyms[kind] = listed

    return Definition(
        number=number,
        text=text.replace(DEFINITION_ARTIFACT, "").strip(),
        examples=examples,
        synonyms=onyms["synonyms"],
        antonyms=onyms["antonyms"]
    )


class LarousseExtractor:
    """Extracts dictionary data from one Larousse page."""

    def __init__(self, html_content: str, config: Optional[Dict[str, Any]] = None):
        self.soup = BeautifulSoup(html_content, 'lxml')

        default_config = {
            "site_url": DEFAULT_SITE_URL
        }
        if config:
            default_config.update(config)
        self.config = default_config

    @property
    def site_url(self) -> str:
        return self.config["site_url"]

    def extract_entry(self) -> Entry:
        """Extract the entry of a found page."""
        return Entry(
            spelling_groups=self._extract_spelling_groups(),
            grammatical_category=self._extract_grammatical_category(),
            origin=self._extract_origin(),
            definitions=self._extract_definitions()
        )

    def extract_suggestions(self, found: bool) -> List[Suggestion]:
        """Homograph entries on a found page, corrector proposals otherwise."""
        selector = HOMOGRAPH_SELECTOR if found else CORRECTOR_SELECTOR
        suggestions = []
        for tag in self.soup.select(selector):
            link = element_from_soup(tag)
            word = first_text(link)
            href = link.get("href")
            if word is None or href is None:
                continue
            suggestions.append(Suggestion(word=word.strip(), url=urljoin(self.site_url, href)))
        logger.debug("Found %d suggestion(s) (found=%s)", len(suggestions), found)
        return suggestions

    def _extract_spelling_groups(self) -> List[List[str]]:
        groups = []
        for tag in self.soup.select(SPELLING_SELECTOR):
            group = []
            for child in element_from_soup(tag).children:
                if isinstance(child, Text) and child.data.strip():
                    group.extend(child.data.strip().split(", "))
            groups.append(group)
        return groups

    def _extract_grammatical_category(self) -> str:
        tag = self.soup.select_one(CATEGORY_SELECTOR)
        if tag is None:
            raise ExtractionError(f"Missing grammatical category ({CATEGORY_SELECTOR})")
        category = first_text(element_from_soup(tag))
        if category is None or not category.strip():
            raise ExtractionError(f"Empty grammatical category ({CATEGORY_SELECTOR})")
        return category.strip()

    def _extract_origin(self) -> str:
        tag = self.soup.select_one(ORIGIN_SELECTOR)
        if tag is None:
            return ""
        return reconstruct_text(element_from_soup(tag).children)

    def _extract_definitions(self) -> List[Definition]:
        # Later .Definitions blocks hold other forms of the word
        block = self.soup.select_one(DEFINITIONS_SELECTOR)
        if block is None:
            logger.debug("No %s block on page", DEFINITIONS_SELECTOR)
            return []
        return [
            extract_definition(child, self.site_url)
            for child in element_from_soup(block).children
            if isinstance(child, Element) and child.has_class(DEFINITION_CLASS)
        ]
