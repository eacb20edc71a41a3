"""
Run the recommendation API.

Usage:
    python -m distillery_backend
"""
from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .config import DEFAULT_APP_CONFIG, AppConfig


def main(config: AppConfig = DEFAULT_APP_CONFIG) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
