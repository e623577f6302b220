"""
Structured logging for the App Links service, built on structlog.

Both structlog loggers and plain ``logging.getLogger(__name__)`` loggers
end up in the same stdout handler.  Events are rendered as JSON lines by
default, or as coloured console output for local development.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

SERVICE_NAME: str = "app-links"

# Third-party loggers that are noisy at INFO.
_QUIET_LOGGERS: tuple[str, ...] = ("sqlalchemy.engine", "httpx", "httpcore")


def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Stamp every event with the service name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_logging(log_level: str = "INFO", *, json_output: bool = True) -> None:
    """
    Route structlog and stdlib logging through one formatter on stdout.

    Call once per process, from the FastAPI lifespan or a script entry
    point.  Calling again replaces the root handler instead of stacking
    a second one.

    Parameters
    ----------
    log_level:
        Minimum severity name (``DEBUG``, ``INFO``, ``WARNING`` ...).
        Unknown names fall back to ``INFO``.
    json_output:
        Render JSON lines when true, human-readable console output otherwise.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a structlog logger named *name*.

    Bind per-request or per-link context with ``.bind()``::

        log = get_logger("links").bind(link_id=42)
        log.info("link_renamed", name="Docs")
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
