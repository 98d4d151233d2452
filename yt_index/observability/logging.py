"""
Logging setup for yt-index.

Library modules log through the standard ``logging`` module; the
processing pipeline emits structured events through structlog. Both are
rendered by one structlog processor chain: JSON lines in production, a
console renderer in development. Output goes to stderr so that CLI JSON on
stdout stays machine readable.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from structlog.types import Processor

from yt_index.config.settings import get_settings

# Minimum levels for chatty third-party loggers
NOISY_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "asyncio": logging.WARNING,
    "urllib3": logging.WARNING,
    "transformers": logging.ERROR,
}


def _renderer(json_logs: bool) -> Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level override (defaults to settings.log_level).
        json_logs: Force JSON output on or off. Defaults to JSON in
            production only.

    Usage:
        setup_logging("DEBUG")
        logger = structlog.get_logger(__name__)
        logger.info("Transcript processed", video_id="dQw4w9WgXcQ", segments=12)
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper())
    if json_logs is None:
        json_logs = settings.is_production

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Records from logging.getLogger(__name__) share the structlog chain
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_logs),
            ],
        )
    )
    logging.basicConfig(level=log_level, handlers=[handler])

    for name, minimum in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(max(minimum, log_level))


@contextmanager
def log_context(**fields: object) -> Iterator[None]:
    """
    Bind fields to every log event emitted inside the block.

    None values are skipped, so optional identifiers can be passed as is.

    Usage:
        with log_context(video_id="dQw4w9WgXcQ"):
            logger.info("Fetching transcript")
    """
    bound = {key: value for key, value in fields.items() if value is not None}
    with structlog.contextvars.bound_contextvars(**bound):
        yield
