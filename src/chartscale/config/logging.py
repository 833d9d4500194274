"""
Render chartscale log records with structlog.

chartscale modules log through stdlib loggers under the ``chartscale`` namespace and
ship with only a NullHandler. configure_logging attaches one stderr handler to that
namespace whose formatter is a structlog ProcessorFormatter, so records come out as
console lines or JSON objects carrying level, logger name, timestamp, and any
``extra`` fields.

Notes:
    - Only the ``chartscale`` logger is touched. Root handlers, the root level, and
      structlog's global configuration belong to the host application and are left
      alone; ``propagate`` is switched off so records are not emitted twice.
    - Calling configure_logging again replaces the handler it installed earlier.
    - Scales log construction and configuration changes at DEBUG; forward mappings
      never log.
"""

from __future__ import annotations

import logging
import sys

import structlog

__all__ = ["configure_logging"]

_LIBRARY_LOGGER = "chartscale"
_HANDLER_NAME = "chartscale.structlog"


def _formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """
    Send ``chartscale`` log records to stderr through structlog.

    Args:
        verbose (bool): Emit DEBUG records (scale construction and configuration).
            When False only WARNING and above are shown.
        log_json (bool): Render JSON lines instead of console output.
    """
    lib = logging.getLogger(_LIBRARY_LOGGER)
    for old in [h for h in lib.handlers if h.get_name() == _HANDLER_NAME]:
        lib.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_formatter(log_json))

    lib.addHandler(handler)
    lib.setLevel(logging.DEBUG if verbose else logging.WARNING)
    lib.propagate = False
