"""Structured logging for maybe_core.

Every logger handed out here is a structlog ``BoundLogger`` wrapped around
a stdlib ``logging.Logger``, so whether an event is emitted is decided by
the stdlib logging tree. Until the application configures logging (via
``configure_logging`` or ``maybe_core.init``), the stdlib default level
of WARNING keeps the decorators' debug events silent.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]

_LEVELS = logging.getLevelNamesMapping()


def _pre_chain() -> list[Any]:
    """Processors applied to both structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Reconfiguring replaces the handler installed by a previous call.

    Args:
        level: Root logging level ("DEBUG", "INFO", ...). Unknown names
            fall back to INFO.
        json_output: Emit JSON lines if True, console-formatted lines otherwise.
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_LEVELS.get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``.

    The processors are looked up when the logger is first used, so a
    logger obtained before ``configure_logging`` picks up its pipeline.

    Args:
        name: Logger name, usually the calling module's ``__name__``.
    """
    return structlog.wrap_logger(  # type: ignore[return-value]
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
