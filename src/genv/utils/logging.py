import logging
import sys
from typing import Any

import structlog

from genv.config import GenvSettings


def _processors(json_format: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def setup_logging(
    settings: GenvSettings | None = None,
    *,
    level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """Configure structured logging for the CLI

    Log lines go to stderr so they never mix with values printed on stdout.
    Explicit arguments take precedence over ``settings``.

    Args:
        settings: Settings read from GENV_* variables; defaults are used if None
        level: Log level override (DEBUG, INFO, WARNING, ERROR)
        json_format: Override for JSON output
    """
    settings = settings or GenvSettings.model_construct()
    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json_format is None else json_format
    numeric_level = getattr(logging, level_name)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)

    structlog.configure(
        processors=_processors(use_json),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a named structlog logger"""
    return structlog.get_logger(name)
