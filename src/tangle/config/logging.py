"""structlog configuration for tangle.

All tangle modules log through stdlib ``logging.getLogger(__name__)``;
this module routes those records through structlog's ProcessorFormatter
so they render the same way as native structlog events.

Two output modes:
- Human (default): console renderer on stderr
- JSON (--log-json): one JSON object per line on stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

TANGLE_LOGGER = "tangle"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        verbose: Let ``tangle.*`` DEBUG records through (field adds,
            removals, renames, locale fallbacks). Otherwise WARNING+.
        log_json: Render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    exc_processors: list[structlog.types.Processor] = (
        [structlog.processors.format_exc_info] if log_json else []
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *exc_processors,
            _renderer(log_json),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(TANGLE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
