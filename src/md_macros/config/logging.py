"""Structured logging setup."""

import logging

import structlog

from md_macros.config.settings import Settings


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Configure structlog for console or JSON output."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if json
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
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )


def ensure_logging(settings: Settings) -> None:
    """Apply *settings* unless the application already configured structlog."""
    if not structlog.is_configured():
        configure_logging(settings.log_level, settings.log_json)


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)
