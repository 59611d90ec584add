"""Structured logging setup for the application evaluator."""

from __future__ import annotations

import logging

import structlog

LOG_FORMATS = ("json", "console")


def configure_logging(level: str = "INFO", *, log_format: str = "json") -> None:
    """Configure structlog on top of stdlib logging.

    ``log_format`` selects between machine-readable JSON lines (the default,
    suited to batch runs whose output is collected) and the human-friendly
    console renderer.
    """
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format: {log_format!r}")

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(message)s")

    processors: list = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if log_format == "json":
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )
