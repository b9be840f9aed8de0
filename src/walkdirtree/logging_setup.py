"""Logging for walkdirtree.

Module loggers are structlog wrappers around stdlib loggers under the
``walkdirtree`` namespace, so events follow the host's stdlib logging setup and
never depend on structlog's global defaults. The package logger carries a
``NullHandler``; nothing is printed until the host configures logging or calls
:func:`configure_logging`.
"""

import logging
import sys
from typing import Any, List

import structlog

PACKAGE_LOGGER_NAME = "walkdirtree"

_event_processors: List[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(log_level_str: str = "warning") -> None:
    """Render walkdirtree events on stderr at the given level.

    Replaces the handlers of the package logger with a single stream handler whose
    formatter renders structlog events through the console renderer. Unknown level
    names fall back to ``warning``. Calling it again reconfigures in place.

    Args:
        log_level_str: Level name such as ``"debug"`` or ``"info"``.
    """
    log_level = getattr(logging, log_level_str.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        foreign_pre_chain=[structlog.stdlib.add_logger_name, structlog.stdlib.add_log_level],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)

    get_logger(__name__).debug("logging_configured", level=logging.getLevelName(log_level))


logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())
