"""Owner of one parsed MediaWiki document and its cleanup lifecycle.

Usage::

    with open(path, encoding="utf-8") as fh, Cleaner(fh) as cleaner:
        with open(out_path, "w", encoding="utf-8") as out:
            cleaner.render(out)

The tree is parsed when the ``Cleaner`` is built.  ``process()`` applies the
rules from ``cleanup.rules`` once; ``render()`` processes if needed and
writes XML-compatible markup.  ``release()`` (or leaving the ``with`` block)
destroys the tree, after which every tree operation raises
``ResourceReleasedError``.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import IO, Optional, Union

from bs4 import BeautifulSoup

from cleanup.config import Settings
from cleanup.errors import MissingInputError, ResourceReleasedError
from cleanup.rules import drop_edit_sections, drop_furniture, promote_anchor_ids

logger = logging.getLogger("cleanup")


class CleanerState(enum.Enum):
    """Lifecycle of a ``Cleaner``.  ``RELEASED`` is terminal."""

    UNPROCESSED = "unprocessed"
    PROCESSED = "processed"
    RELEASED = "released"


class Cleaner:
    """Strip MediaWiki embellishments from a single HTML document.

    Args:
        fh: Open text stream (or an already decoded string) holding the
            HTML.  It is read to the end during construction.
        parser: BeautifulSoup tree builder name.  Defaults to
            ``CLEANUP_PARSER`` (``lxml``).

    Raises:
        MissingInputError: If ``fh`` is ``None``.
    """

    def __init__(
        self, fh: Optional[Union[IO[str], str]], *, parser: Optional[str] = None
    ) -> None:
        self._soup: Optional[BeautifulSoup] = None
        self._state = CleanerState.RELEASED
        if fh is None:
            raise MissingInputError("Cleaner was not passed an input stream.")

        self._soup = BeautifulSoup(fh, parser or Settings.from_env().parser)
        self._state = CleanerState.UNPROCESSED

    @property
    def state(self) -> CleanerState:
        return self._state

    def _tree(self) -> BeautifulSoup:
        if self._state is CleanerState.RELEASED or self._soup is None:
            raise ResourceReleasedError("Cleaner resources were already released.")
        return self._soup

    # ------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------

    def process(self) -> None:
        """Apply the cleanup rules once.  Later calls are no-ops.

        Raises:
            ResourceReleasedError: If ``release()`` was already called.
        """
        soup = self._tree()
        if self._state is CleanerState.PROCESSED:
            return

        edit_sections = drop_edit_sections(soup)
        anchors = promote_anchor_ids(soup)
        furniture = drop_furniture(soup)

        self._state = CleanerState.PROCESSED
        logger.info(
            "document cleaned",
            extra={
                "edit_sections": edit_sections,
                "anchors": anchors,
                "furniture": furniture,
            },
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_xml(self) -> str:
        """Process if needed and return the tree as XML-compatible markup."""
        self.process()
        return self._tree().decode()

    def render(self, out: IO[str]) -> None:
        """Process if needed and write the tree to *out*.

        The markup is fully serialized before the first write.
        """
        out.write(self.to_xml())

    print_into_fh = render

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def release(self) -> None:
        """Destroy the document tree.  Safe to call more than once."""
        if self._soup is not None:
            self._soup.decompose()
            self._soup = None
        self._state = CleanerState.RELEASED

    destroy_resources = release

    def __enter__(self) -> Cleaner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        # Fallback only; callers release explicitly or through ``with``.
        if getattr(self, "_soup", None) is not None:
            self.release()


# ---------------------------------------------------------------------------
# One-shot helpers
# ---------------------------------------------------------------------------


def clean_html(markup: str, *, parser: Optional[str] = None) -> str:
    """Clean an HTML string and return the XML-compatible result."""
    with Cleaner(markup, parser=parser) as cleaner:
        return cleaner.to_xml()


def clean_file(
    src: Union[str, Path],
    dst: Union[str, Path],
    *,
    encoding: Optional[str] = None,
    parser: Optional[str] = None,
) -> None:
    """Clean the HTML file *src* into *dst*.

    Both files use *encoding* (default ``CLEANUP_ENCODING``, ``utf-8``).
    *dst* is only opened once the input has been parsed and cleaned.
    """
    encoding = encoding or Settings.from_env().encoding
    with open(src, encoding=encoding) as fh, Cleaner(fh, parser=parser) as cleaner:
        markup = cleaner.to_xml()
    with open(dst, "w", encoding=encoding) as out:
        out.write(markup)
