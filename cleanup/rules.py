"""MediaWiki embellishment rules applied to a parsed document tree.

Three passes, run in this order by ``Cleaner.process``:

    1. ``drop_edit_sections()`` -- removes the ``[edit]`` link containers
       that only make sense inside the wiki UI.
    2. ``promote_anchor_ids()`` -- folds the legacy ``<a name=...>`` jump
       target sitting before an ``h2``-``h4`` into the heading's ``id``.
    3. ``drop_furniture()`` -- removes print footers, category links,
       sidebars, page footers, head styles and scripts.

Every pass mutates the soup in place and returns how many elements it
removed or rewrote.  A pass that matches nothing is not an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from bs4 import Comment, NavigableString, PageElement, Tag

from models.matchers import ElementMatch, match_attr, match_tag

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

logger = logging.getLogger("cleanup")

EDIT_SECTION = match_attr("div", "class", "editsection")

ANCHOR_HEADINGS = ("h2", "h3", "h4")

FURNITURE: tuple[ElementMatch, ...] = (
    match_attr("div", "class", "printfooter"),
    match_attr("div", "id", "catlinks"),
    match_attr("div", "class", "visualClear"),
    match_attr("div", "id", "column-one"),
    match_attr("div", "id", "footer"),
    match_tag("style", within="head"),
    match_tag("script"),
)


def find_matches(soup: BeautifulSoup, match: ElementMatch) -> list[Tag]:
    """Return every element in *soup* matched by *match*, in document order."""
    found = soup.select(match.css())
    logger.debug("%s matched %d element(s)", match.xpath(), len(found))
    return found


def _discard(nodes: Iterable[Tag]) -> int:
    """Decompose each node once.

    Nodes listed twice, or already destroyed along with a decomposed
    ancestor, are skipped.
    """
    removed = 0
    seen: set[int] = set()
    for node in nodes:
        if id(node) in seen or node.decomposed:
            continue
        seen.add(id(node))
        node.decompose()
        removed += 1
    return removed


def drop_edit_sections(soup: BeautifulSoup) -> int:
    """Remove every ``<div class="editsection">`` subtree."""
    return _discard(find_matches(soup, EDIT_SECTION))


def _skippable(node: Optional[PageElement]) -> bool:
    """Comments and whitespace-only text do not separate siblings."""
    if isinstance(node, Comment):
        return True
    return isinstance(node, NavigableString) and not node.strip()


def _preceding_element(node: Tag) -> Optional[PageElement]:
    """Return the sibling before *node*, skipping comments and blank text."""
    prev = node.previous_sibling
    while _skippable(prev):
        prev = prev.previous_sibling
    return prev


def promote_anchor_ids(soup: BeautifulSoup) -> int:
    """Move ``<a name="X">`` preceding an ``h2``-``h4`` onto the heading.

    The heading gets ``id="X"`` (replacing any existing ``id``) and the
    anchor is removed.  Headings not directly preceded by a named anchor
    are left untouched.
    """
    headings = [h for level in ANCHOR_HEADINGS for h in soup.find_all(level)]

    promoted = 0
    for heading in headings:
        # Gone with an anchor that wrapped it
        if heading.decomposed:
            continue
        anchor = _preceding_element(heading)
        if not isinstance(anchor, Tag) or anchor.name != "a":
            continue
        name = anchor.get("name")
        if not name:
            continue
        heading["id"] = name
        anchor.decompose()
        promoted += 1
    return promoted


def drop_furniture(soup: BeautifulSoup) -> int:
    """Remove navigation and page furniture matched by ``FURNITURE``.

    All matches are collected before anything is removed, so an element
    nested inside another match (a ``<script>`` inside
    ``<div id="column-one">``) is only detached once.
    """
    nodes: list[Tag] = []
    for match in FURNITURE:
        nodes.extend(find_matches(soup, match))
    return _discard(nodes)
