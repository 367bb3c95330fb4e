"""
Structured logging setup shared by the API service and the client ledger.
"""

import logging
import sys
from typing import Optional

import structlog

from config import get_config


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name, defaults to the LOG_LEVEL setting
        log_format: 'console' or 'json', defaults to the LOG_FORMAT setting
    """
    config = get_config()
    level = (level or config.log_level).upper()
    log_format = log_format or config.log_format

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
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
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
