"""Element match patterns as frozen Pydantic v2 models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ElementMatch(BaseModel):
    """Matches elements by tag, an exact attribute value, and an ancestor tag.

    ``attribute`` and ``value`` go together: the whole attribute value must
    equal ``value`` (``class="a b"`` does not match ``value="a"``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tag: str
    attribute: Optional[str] = None
    value: Optional[str] = None
    within: Optional[str] = None

    @model_validator(mode="after")
    def _attribute_needs_value(self) -> "ElementMatch":
        if (self.attribute is None) != (self.value is None):
            raise ValueError("attribute and value must be given together")
        return self

    def css(self) -> str:
        """Return the CSS selector used to find matching elements."""
        sel = self.tag
        if self.attribute is not None:
            sel += f'[{self.attribute}="{self.value}"]'
        if self.within:
            sel = f"{self.within} {sel}"
        return sel

    def xpath(self) -> str:
        """Return the equivalent XPath expression (for logs and docs)."""
        path = f"//{self.tag}"
        if self.attribute is not None:
            path += f'[@{self.attribute}="{self.value}"]'
        if self.within:
            path = f"//{self.within}{path}"
        return path


# ---------------------------------------------------------------------------
# Helper factory functions
# ---------------------------------------------------------------------------


def match_attr(tag: str, attribute: str, value: str) -> ElementMatch:
    """Create a match on ``tag`` whose ``attribute`` equals ``value``."""
    return ElementMatch(tag=tag, attribute=attribute, value=value)


def match_tag(tag: str, within: Optional[str] = None) -> ElementMatch:
    """Create a match on every ``tag`` element, optionally under ``within``."""
    return ElementMatch(tag=tag, within=within)
