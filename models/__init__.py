"""Public re-exports of all model types."""

from models.matchers import ElementMatch, match_attr, match_tag

__all__ = [
    "ElementMatch",
    # Factories
    "match_attr",
    "match_tag",
]
