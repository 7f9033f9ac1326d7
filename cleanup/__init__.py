"""MediaWiki HTML cleanup: parse, strip wiki embellishments, serialize."""

from cleanup.cleaner import Cleaner, CleanerState, clean_file, clean_html
from cleanup.errors import CleanupError, MissingInputError, ResourceReleasedError
from cleanup.rules import ANCHOR_HEADINGS, EDIT_SECTION, FURNITURE

__all__ = [
    "Cleaner",
    "CleanerState",
    "clean_file",
    "clean_html",
    # Errors
    "CleanupError",
    "MissingInputError",
    "ResourceReleasedError",
    # Rule tables
    "ANCHOR_HEADINGS",
    "EDIT_SECTION",
    "FURNITURE",
]
