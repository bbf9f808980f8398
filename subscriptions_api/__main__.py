import logging

import uvicorn

from subscriptions_api.config import settings
from subscriptions_api.core.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(settings.log_level)
    logger.info(f"Server starting on {settings.server_host}:{settings.server_port}")
    uvicorn.run(
        "subscriptions_api.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
