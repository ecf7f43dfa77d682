"""Structured logging for buildreqs.

Events are emitted with structlog and routed through the stdlib root logger
to stderr, so ``buildreqs check --format json`` keeps stdout for the build
pipeline that consumes it.

Environment:
    BUILDREQS_LOG_FORMAT: ``json`` for one JSON object per line, anything
        else for the coloured console renderer.
    BUILDREQS_LOG_LEVEL: stdlib level name; unknown names fall back to INFO.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "configure_logging",
    "get_logger",
    "log_context",
]

LOG_FORMAT_ENV_VAR = "BUILDREQS_LOG_FORMAT"
LOG_LEVEL_ENV_VAR = "BUILDREQS_LOG_LEVEL"


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _pre_chain() -> list[Processor]:
    """Processors applied to both structlog and plain stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderer(use_json: bool) -> Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Route structlog through a single stderr handler on the root logger.

    Safe to call more than once; the previous handler is replaced.

    Args:
        force_json: Render JSON even if BUILDREQS_LOG_FORMAT is unset.
        level: Log level. Defaults to BUILDREQS_LOG_LEVEL, then INFO.
    """
    use_json = force_json or os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"
    log_level = _level_from_env() if level is None else level

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(use_json),
            ],
            foreign_pre_chain=_pre_chain(),
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


@contextmanager
def log_context(**context: Any) -> Iterator[None]:
    """Attach key/value pairs to every event logged inside the block.

    Only the given keys are removed on exit; context bound by an outer
    block survives.

    Example:
        with log_context(check_run_id="3f9a1c2e"):
            log.info("requirement_installed", requirement_id="xcode")
    """
    with structlog.contextvars.bound_contextvars(**context):
        yield
