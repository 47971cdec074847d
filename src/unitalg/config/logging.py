"""structlog setup for unitalg.

Events go through the stdlib ``unitalg`` logger to stderr, rendered for the
console or as JSON lines. Nothing is written to stdout.

The library configures structlog itself only when the host application has
not: `ensure_logging` is called before a registry is built and leaves any
existing structlog configuration alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from unitalg.config.settings import UnitsSettings

_PACKAGE_LOGGER = "unitalg"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    settings: UnitsSettings | None = None,
) -> None:
    """Route unitalg diagnostics to stderr.

    Args:
        verbose: Emit debug events (redefinitions, registry size). When False,
            only warnings such as undefined references are shown.
        log_json: Render JSON lines instead of console output.
        settings: If given, its ``verbose``/``log_json`` win over the flags.
    """
    if settings is not None:
        verbose, log_json = settings.verbose, settings.log_json

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        pre_chain.append(structlog.processors.TimeStamper(fmt="iso"))
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def ensure_logging(settings: UnitsSettings | None = None) -> None:
    """Apply `configure_logging` from ``UNITALG_*`` settings unless structlog is already set up."""
    if structlog.is_configured():
        return
    if settings is None:
        from unitalg.config.settings import UnitsSettings

        settings = UnitsSettings()
    configure_logging(settings=settings)


__all__ = ["configure_logging", "ensure_logging"]
