"""Library configuration from environment variables.

Only logging reads these settings; engine functions take their inputs
explicitly.
"""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    irisreveal_log_level: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(config: Settings | None = None) -> int:
    """Apply the configured log level to the root logger. Returns the level used."""
    config = config or settings
    level = getattr(logging, config.irisreveal_log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logging.getLogger("irisreveal").setLevel(level)
    return level
