"""Configuration management for retryable."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import DelayStrategy

# Load environment variables from .env file
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class GlobalConfig(BaseModel):
    """Global runtime configuration.

    These values only seed the CLI. Options passed to the retry engine
    directly keep their own defaults.
    """

    # Retry Defaults
    max_retries: int = Field(
        default_factory=lambda: int(os.getenv("RETRYABLE_MAX_RETRIES", "2"))
    )
    max_delay: Optional[float] = Field(
        default_factory=lambda: _optional_float("RETRYABLE_MAX_DELAY")
    )
    delay_strategy: DelayStrategy = Field(
        default_factory=lambda: DelayStrategy(
            os.getenv("RETRYABLE_DELAY_STRATEGY", "none").lower()
        )
    )
    delay: float = Field(
        default_factory=lambda: float(os.getenv("RETRYABLE_DELAY", "0"))
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: os.getenv("RETRYABLE_LOG_LEVEL", "INFO")
    )
    log_format: str = Field(
        default_factory=lambda: os.getenv(
            "RETRYABLE_LOG_FORMAT",
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    )


# Global configuration instance
config = GlobalConfig()


def get_config() -> GlobalConfig:
    """Get global configuration instance."""
    return config


def reload_config() -> GlobalConfig:
    """Reload configuration from environment."""
    load_dotenv(override=True)
    global config
    config = GlobalConfig()
    return config


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging from the global configuration.

    Args:
        verbose: Force DEBUG level regardless of configuration
    """
    level = logging.DEBUG if verbose else logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=config.log_format, force=True)
