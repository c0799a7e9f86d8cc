from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator, cast

import structlog
from structlog.dev import ConsoleRenderer
from structlog.stdlib import BoundLogger
from structlog.types import Processor

try:
    from range_split import __version__ as RANGE_SPLIT_VERSION
except Exception:
    RANGE_SPLIT_VERSION = os.getenv("APP_VERSION", "unknown")

DEFAULT_SERVICE_NAME = "range-split"

# Set by configure_logging; SERVICE_NAME in the environment still wins.
_service_name = DEFAULT_SERVICE_NAME


def _coerce_level(level: str | int) -> int:
    """Translate a string/int level into the numeric logging level."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, str):
            raise ValueError(f"Invalid log level: {level}")
        return int(resolved)
    return int(level)


def configure_logging(
    level: str | int = "INFO",
    json_output: bool = True,
    service_name: str | None = None,
) -> None:
    """
    Configure structlog with JSON (or console) rendering and stdlib bridge.

    ``service_name`` becomes the default bound by get_logger. The library
    itself never calls this; applications do, usually through
    RangeSplitSettings.configure_logging().
    """
    global _service_name

    numeric_level = _coerce_level(level)
    if service_name is not None:
        _service_name = service_name
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    renderer = structlog.processors.JSONRenderer() if json_output else ConsoleRenderer()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)
    logging.captureWarnings(True)


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger with service name and package version bound."""
    service_name = os.getenv("SERVICE_NAME", _service_name)
    version = os.getenv("APP_VERSION", RANGE_SPLIT_VERSION)
    return cast(
        BoundLogger,
        structlog.get_logger(name).bind(service_name=service_name, version=version),
    )


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """
    Bind contextual data for the duration of a block.

    Keys that were already bound get their previous values back on exit,
    so nested blocks (a range check inside a larger parse, say) compose.
    """
    if not kwargs:
        yield
        return

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)
    try:
        yield
    finally:
        restore = {key: previous[key] for key in kwargs if key in previous}
        structlog.contextvars.unbind_contextvars(
            *(key for key in kwargs if key not in previous)
        )
        if restore:
            structlog.contextvars.bind_contextvars(**restore)
