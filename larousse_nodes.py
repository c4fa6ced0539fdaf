"""
Tagged node model for dictionary page fragments.

BeautifulSoup nodes picked by selector queries are converted once into
immutable ``Text`` / ``Element`` / ``Comment`` values so extraction code
only has to tell three node kinds apart. Comments are kept so that
sibling positions match the parsed page.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString


@dataclass(frozen=True)
class Text:
    data: str


@dataclass(frozen=True)
class Comment:
    """Comment, CDATA or doctype; carries no visible text."""
    data: str


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: Tuple[Tuple[str, str], ...]
    classes: Tuple[str, ...]
    children: Tuple["Node", ...]

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for key, value in self.attrs:
            if key == name:
                return value
        return default


Node = Union[Text, Comment, Element]

PARENTHESES_RE = re.compile(r"[()]")


def from_soup(node: Union[Tag, NavigableString]) -> Node:
    """Convert a bs4 node and its descendants."""
    if isinstance(node, Tag):
        attrs = []
        for key, value in node.attrs.items():
            # Multi-valued attributes (class, rel) come back as lists
            attrs.append((key, " ".join(value) if isinstance(value, list) else value))
        return Element(
            tag=node.name,
            attrs=tuple(attrs),
            classes=tuple(node.get("class", [])),
            children=tuple(from_soup(child) for child in node.children)
        )
    if isinstance(node, PreformattedString):
        return Comment(str(node))
    return Text(str(node))


def element_from_soup(tag: Tag) -> Element:
    element = from_soup(tag)
    if not isinstance(element, Element):
        raise TypeError(f"Expected a tag, got {type(tag).__name__}")
    return element


def is_line_break(data: str) -> bool:
    """True for formatting text between tags such as ``"\\n"`` or ``"\\n  "``."""
    return "\n" in data and not data.strip()


def strip_parentheses(data: str) -> str:
    return PARENTHESES_RE.sub("", data)


def first_text(node: Node) -> Optional[str]:
    """Return the data of the first text descendant, depth first."""
    if isinstance(node, Text):
        return node.data
    if isinstance(node, Comment):
        return None
    for child in node.children:
        if isinstance(child, Text):
            return child.data
        found = first_text(child)
        if found is not None:
            return found
    return None


def reconstruct_text(nodes: Iterable[Node], strip_parens: bool = True) -> str:
    """Flatten a run of sibling nodes into one clean string.

    Elements here are inline wrappers (links, emphasis), so only their
    first text descendant is used.
    """
    parts = []
    for node in nodes:
        if isinstance(node, Text):
            if is_line_break(node.data):
                continue
            parts.append(node.data)
        else:
            text = first_text(node)
            if text is not None:
                parts.append(text)
    text = "".join(parts)
    if strip_parens:
        text = strip_parentheses(text)
    return text.strip()
