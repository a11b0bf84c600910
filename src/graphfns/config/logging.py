"""Log rendering for applications embedding graphfns.

The library emits its events through stdlib ``logging`` under the
``graphfns`` namespace and never configures anything on import.
``configure_logging`` renders those events with structlog's
``ProcessorFormatter`` on a handler owned by the ``graphfns`` logger, so
the host's root logger and structlog setup are left untouched.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (log_json=True): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "graphfns"
HANDLER_NAME = "graphfns.structlog"


def _build_formatter(*, log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Logger:
    """Route ``graphfns`` log records to stderr through structlog.

    Safe to call repeatedly: the ``graphfns`` logger keeps a single
    handler, whose formatter is replaced on each call. Records stop at
    the ``graphfns`` logger instead of also reaching the host's handlers.

    Args:
        verbose: Enable DEBUG-level output (precondition failures).
            When False, only WARNING+ (lossy D3 conversions).
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The configured ``graphfns`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)

    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(_build_formatter(log_json=log_json))

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
