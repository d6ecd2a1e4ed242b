#!/usr/bin/env python
"""Start the inventory API under uvicorn on $PORT."""
import logging
import os

import uvicorn

from inventory_api.core.config import get_settings
from inventory_api.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    port = int(os.environ.get("PORT", 8000))
    logger.info(f"Starting {settings.APP_TITLE} ({settings.ENVIRONMENT}) on port {port}")

    uvicorn.run(
        "inventory_api.main:app",
        host="0.0.0.0",
        port=port,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
