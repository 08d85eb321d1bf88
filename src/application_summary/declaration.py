"""Declaration HTML fragment → ordered text blocks.

The fragment is a restricted vocabulary: one ``div#declaration`` container
holding paragraphs, headings and (possibly nested) list items::

    <div id="declaration">
      <h2>Declaration</h2>
      <p>By submitting...</p>
      <ul><li>one<ul><li>nested</li></ul></li></ul>
    </div>
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from bs4 import BeautifulSoup, Comment, Tag

from application_summary.exceptions import MalformedDeclarationError

log = logging.getLogger(__name__)

CONTAINER_ID = "declaration"
LIST_TAGS = frozenset({"ul", "ol"})
_HEADING_RE = re.compile(r"^h[1-6]$")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class Heading:
    text: str


@dataclass(frozen=True)
class ListItem:
    text: str
    depth: int = 0


Block = Union[Paragraph, Heading, ListItem]


def clean_text(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _own_text(item: Tag) -> str:
    """Text of a list item, excluding any lists nested inside it."""
    parts: list[str] = []
    for node in item.find_all(string=True):
        if isinstance(node, Comment):
            continue
        parent = node.parent
        while parent is not None and parent is not item and parent.name not in LIST_TAGS:
            parent = parent.parent
        if parent is item:
            parts.append(str(node))
    return clean_text("".join(parts))


def _list_depth(element: Tag, container: Tag) -> int:
    depth = 0
    for parent in element.parents:
        if parent is container:
            break
        if parent.name in LIST_TAGS:
            depth += 1
    return depth


def _inside_list_item(element: Tag, container: Tag) -> bool:
    for parent in element.parents:
        if parent is container:
            return False
        if parent.name == "li":
            return True
    return False


def extract(fragment: str) -> list[Block]:
    """Parse *fragment* into paragraph, heading and list-item blocks in document order.

    Raises ``MalformedDeclarationError`` when the container is missing or
    yields nothing renderable.
    """
    if not isinstance(fragment, str) or not fragment.strip():
        raise MalformedDeclarationError("Declaration fragment is empty", fragment=str(fragment or ""))

    soup = BeautifulSoup(fragment, "html.parser")
    container = soup.find("div", id=CONTAINER_ID)
    if container is None:
        raise MalformedDeclarationError(
            f"Declaration fragment has no <div id=\"{CONTAINER_ID}\"> container",
            fragment=fragment,
        )

    blocks: list[Block] = []
    for element in container.find_all(True):
        if element.name == "li":
            blocks.append(ListItem(_own_text(element), _list_depth(element, container)))
            continue
        if _inside_list_item(element, container):
            continue
        if element.name == "p":
            blocks.append(Paragraph(clean_text(element.get_text())))
        elif _HEADING_RE.match(element.name):
            blocks.append(Heading(clean_text(element.get_text())))

    if not blocks:
        raise MalformedDeclarationError(
            "Declaration container holds no paragraphs, headings or list items",
            fragment=fragment,
        )
    log.debug("Extracted %d declaration blocks", len(blocks))
    return blocks
