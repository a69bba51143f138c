"""structlog setup for the API.

Production emits one JSON object per line on stdout; DEBUG switches to the
coloured console renderer. Request-scoped values (request_id, user_id) come
from ``structlog.contextvars``.
"""

import logging
import sys
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from cureconnect.config import Settings, settings


def _build_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _select_renderer(config: Settings = settings) -> Processor:
    if config.debug:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(config: Settings = settings) -> None:
    """Route structlog and stdlib records (uvicorn, sqlalchemy) through one handler."""
    shared = _build_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_select_renderer(config),
            foreign_pre_chain=shared,
        )
    )
    logging.basicConfig(
        handlers=[handler],
        level=logging.DEBUG if config.debug else logging.INFO,
        force=True,
    )


def get_logger(name: str | None = None) -> BoundLogger:
    return structlog.get_logger(name)


@asynccontextmanager
async def async_log_timing(
    operation: str,
    logger: BoundLogger | None = None,
    level: str = "info",
    **context: Any,
) -> AsyncIterator[dict[str, Any]]:
    """Log ``"<operation> completed"`` with the elapsed milliseconds.

    The yielded dict is merged into the log event, so callers can attach
    results such as row counts. ``duration_ms`` is added on exit. If the
    block raises, ``"<operation> failed"`` is logged at error level instead
    and the exception propagates.
    """
    log = logger or get_logger(__name__)
    extra: dict[str, Any] = {}
    started = time.perf_counter()
    try:
        yield extra
    except Exception as exc:
        extra["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        log.error(
            f"{operation} failed",
            operation=operation,
            error_type=type(exc).__name__,
            **context,
            **extra,
        )
        raise

    extra["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
    emit = getattr(log, level, log.info)
    emit(f"{operation} completed", operation=operation, **context, **extra)
