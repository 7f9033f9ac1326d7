"""Command-line host for the MediaWiki HTML cleaner.

Installed as ``mediawiki-cleanup``::

    mediawiki-cleanup page.html cleaned.html
    curl -s "$WIKI/page" | mediawiki-cleanup - > cleaned.html
"""

import json
import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

# Load .env from the project directory so CLEANUP_* settings are set
load_dotenv(Path(__file__).resolve().parent / ".env")

from cleanup.cleaner import Cleaner
from cleanup.config import Settings
from cleanup.errors import CleanupError


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("source", "edit_sections", "anchors", "furniture"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


logger = logging.getLogger("cleanup")


def configure_logging(level: str) -> None:
    """Send ``cleanup`` records to stderr as JSON lines at *level*."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logger.handlers = [handler]
    logger.setLevel(level.upper())
    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@click.command()
@click.argument("source", type=click.Path(allow_dash=True, path_type=Path))
@click.argument(
    "dest", required=False, default="-", type=click.Path(allow_dash=True, path_type=Path)
)
@click.option("--encoding", default=None, help="Input/output encoding (default: CLEANUP_ENCODING or utf-8)")
@click.option("--parser", default=None, help="BeautifulSoup tree builder (default: CLEANUP_PARSER or lxml)")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (default: CLEANUP_LOG_LEVEL or INFO)",
)
def cli(
    source: Path,
    dest: Path,
    encoding: str | None,
    parser: str | None,
    log_level: str | None,
) -> None:
    """Strip MediaWiki embellishments from SOURCE and write DEST.

    Use ``-`` for SOURCE to read stdin.  DEST defaults to stdout.
    """
    settings = Settings.from_env()
    configure_logging(log_level or settings.log_level)
    encoding = encoding or settings.encoding
    parser = parser or settings.parser

    logger.info("cleaning", extra={"source": str(source)})
    try:
        with click.open_file(str(source), "r", encoding=encoding) as fh:
            with Cleaner(fh, parser=parser) as cleaner:
                markup = cleaner.to_xml()
        with click.open_file(str(dest), "w", encoding=encoding) as out:
            out.write(markup)
    except (CleanupError, OSError, UnicodeError, LookupError) as exc:
        logger.error(
            "cleanup failed: %s: %s",
            type(exc).__name__,
            exc,
            extra={"source": str(source)},
        )
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    cli()
