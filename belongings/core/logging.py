"""
Logging setup: one root handler rendered by structlog, JSON lines in production
and aligned console output locally.

Modules keep logging through ``logging.getLogger(__name__)``; their records pass
through the same processor chain, so every line carries timestamp, level and
logger name whichever renderer is active.
"""

import logging
import sys
from typing import Any

import structlog

from belongings.config import get_settings

SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def build_formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_output:
        renderers: list[Any] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )


def setup_logging(json_output: bool | None = None) -> None:
    """Install the root handler; ``json_output`` overrides the LOG_JSON setting."""
    settings = get_settings()
    if json_output is None:
        json_output = settings.log_json

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(json_output))
    logging.root.handlers = [handler]
    logging.root.setLevel(settings.log_level.upper())
    # Uvicorn installs its own handlers; let its records reach the root handler instead.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True
