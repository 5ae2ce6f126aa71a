"""Entrypoint: python -m recipe_feed"""
from __future__ import annotations

import uvicorn

from recipe_feed.config import settings
from recipe_feed.log_config import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "recipe_feed.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
