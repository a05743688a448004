"""
Configuration management for the SDK.
"""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVICE_URL = "https://gateway.watsonplatform.net/compare-comply/api"
DEFAULT_VERSION = "2018-10-18"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="COMPARE_COMPLY_")

    url: str = DEFAULT_SERVICE_URL
    version: str = DEFAULT_VERSION
    api_key: Optional[str] = None
    timeout_seconds: int = 30
    log_level: str = "INFO"
    debug: bool = False


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the SDK."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("compare_comply")
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"compare_comply.{name}")
