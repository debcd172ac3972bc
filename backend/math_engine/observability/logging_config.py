"""
structlog configuration for the math engine service.

Call configure_logging() once at process start (the FastAPI app does this
on import). Library modules only ever call structlog.get_logger(__name__).
"""

import logging

import structlog

from math_engine.config import settings


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure structlog processors and the stdlib root logger.

    Args:
        level: Log level name, defaults to DEBUG when settings.debug is set
            and settings.log_level otherwise
        json_output: Render JSON lines instead of console output,
            defaults to settings.log_json
    """
    level_name = level or ("DEBUG" if settings.debug else settings.log_level)
    use_json = settings.log_json if json_output is None else json_output
    numeric_level = logging.getLevelName(level_name.upper())

    logging.basicConfig(format="%(message)s", level=numeric_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
