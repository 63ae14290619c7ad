"""structlog setup for the insights service.

Events go through stdlib ``logging`` so uvicorn and library loggers share one
output stream. JSON lines are the default; ``json_logs=False`` switches to the
human-readable console renderer for local debugging.
"""

import logging
from typing import List

import structlog
from structlog.typing import Processor

# Loggers that emit one INFO line per outbound request, including the query
# string that may carry the OpenDota API key
NOISY_LOGGERS = ("httpx", "httpcore")


def _shared_processors() -> List[Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structlog over the stdlib root logger.

    :param log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
        unknown names fall back to INFO
    :param json_logs: Render JSON lines instead of colored console output
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*_shared_processors(), renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
