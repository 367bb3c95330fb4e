#!/usr/bin/env python3
"""
Run script for the Finance Tracker API.
"""

import uvicorn
import structlog

from config import get_config
from logging_config import configure_logging


def main():
    """Start the Finance Tracker API server."""
    config = get_config()
    configure_logging()
    logger = structlog.get_logger("run")

    logger.info(
        "starting_server",
        host=config.host,
        port=config.port,
        reload=config.reload,
        docs=f"http://{config.host}:{config.port}/docs",
    )

    # Run the application
    uvicorn.run(
        "api:app",
        host=config.host,
        port=config.port,
        reload=config.reload,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
