"""
Logging Setup.

structlog on top of the standard library, configured once per process
from config/settings/logging.yaml. Every module gets its logger from
get_logger(__name__); nothing else creates handlers.

Two outputs:
    console  - human-readable (or JSON) lines on stderr by default, so
               they stay out of the interactive shell's own output
    file     - rotating JSON Lines file, one record per line

JSON records carry timestamp, level, logger, event, func_name and
lineno, plus whatever is bound in structlog contextvars (the request
middleware binds request_id, frontend, method and path) and whatever
is passed via extra / keyword arguments.

Usage:
    from blogapi.backend.core.logging import get_logger, setup_logging

    setup_logging()                  # values from logging.yaml
    setup_logging(level="DEBUG")     # override one of them

    logger = get_logger(__name__)
    logger.info("Blog created", extra={"blog_id": 3})

    # Outside a request, say where the record came from
    log_with_source(logger, "cli", "info", "Command issued", command="GET")
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from blogapi.backend.core.config import get_app_config, resolve_project_path
from blogapi.backend.core.config_schema import FileLogSchema

VALID_SOURCES = frozenset({
    "web",
    "cli",
    "api",
    "internal",
    "unknown",
})
"""Values for the ``source`` field. Always passed explicitly, never inferred."""

# Third-party loggers that are noisy at INFO
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _resolve_log_path(configured_path: str) -> Path:
    return resolve_project_path(configured_path)


def _shared_processors() -> list[Processor]:
    """Processors applied to both structlog and plain stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(format_type: str, pre_chain: list[Processor]) -> structlog.stdlib.ProcessorFormatter:
    if format_type == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def _file_handler(file_config: FileLogSchema, formatter: logging.Formatter) -> RotatingFileHandler:
    log_path = _resolve_log_path(file_config.path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Arguments left as None take their value from logging.yaml. Calling
    this again replaces the previous handlers.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_type: 'console' or 'json' for the console handler; the
            file handler always writes JSON
        enable_console: Attach the console handler
        enable_file_logging: Attach the rotating file handler
    """
    config = get_app_config().logging

    level = level if level is not None else config.level
    format_type = format_type if format_type is not None else config.format
    if enable_console is None:
        enable_console = config.console.enabled
    if enable_file_logging is None:
        enable_file_logging = config.file.enabled

    processors = _shared_processors()

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        stream = sys.stdout if config.console.stream == "stdout" else sys.stderr
        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(_formatter(format_type, processors))
        root_logger.addHandler(console_handler)

    if enable_file_logging:
        root_logger.addHandler(_file_handler(config.file, _formatter("json", processors)))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message tagged with an explicit source.

    For records emitted outside an HTTP request, where the middleware
    has not bound a frontend (the shell and the API client).

    Raises:
        AttributeError: If level is not a logger method name
    """
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
