"""Environment-driven settings.

Read ``CLEANUP_PARSER``, ``CLEANUP_ENCODING`` and ``CLEANUP_LOG_LEVEL``.
The CLI loads a ``.env`` file before these are read.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    """Cleanup settings with their defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    parser: str = "lxml"
    encoding: str = "utf-8"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``CLEANUP_*`` environment variables."""
        return cls(
            parser=os.getenv("CLEANUP_PARSER", "lxml"),
            encoding=os.getenv("CLEANUP_ENCODING", "utf-8"),
            log_level=os.getenv("CLEANUP_LOG_LEVEL", "INFO"),
        )
