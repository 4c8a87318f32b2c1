"""Opt-in structured output for dlit's log records.

dlit modules log through stdlib ``logging.getLogger(__name__)`` and install
no handlers on import.  An application that wants to see those records calls
:func:`enable_logging`, which renders them with structlog:

- Human (default): console lines, colored when the stream is a TTY
- JSON (``log_json=True``): one JSON object per record

INVARIANT: only the ``dlit`` logger is touched.  The root logger, its
handlers and the global structlog configuration are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "dlit"

_HANDLER_NAME = "dlit.structlog"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def enable_logging(
    *,
    level: int = logging.DEBUG,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route ``dlit.*`` records at *level* and above to *stream*.

    Calling again replaces the previous handler rather than adding a second.

    Args:
        level: Minimum level for the ``dlit`` logger.
        log_json: Use the JSON renderer instead of the console renderer.
        stream: Destination; defaults to ``sys.stderr`` at call time.

    Returns:
        The installed handler.
    """
    target = stream if stream is not None else sys.stderr

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=target.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(target)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    disable_logging()
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def disable_logging() -> None:
    """Remove the handler installed by :func:`enable_logging`, if any."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
