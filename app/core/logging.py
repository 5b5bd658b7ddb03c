"""
Structured logging setup.

All modules obtain their logger with ``structlog.get_logger(__name__)``;
this module wires structlog onto the stdlib logging tree once per
process.
"""

import logging
import sys

import structlog

from app.core.config import settings

_configured = False


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog processors and the root stdlib handler.

    Safe to call more than once; only the first call has an effect.
    """
    global _configured
    if _configured:
        return

    log_level = (level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json is None else json

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True
