"""
Purpose: One-time structlog setup shared by the server and client.
Dependencies: structlog, logging.
"""

import logging
import sys

import structlog

from hexpath.core.config import LOG_LEVEL


def configure_logging(level=None, json_output=False):
    """Route structlog through stdlib logging at the given level."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    # basicConfig is a no-op once handlers exist, so set the level directly
    logging.getLogger().setLevel(level)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
