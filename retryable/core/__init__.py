"""Core infrastructure for retryable."""

from .config import GlobalConfig, config, get_config, reload_config, setup_logging
from .exceptions import (
    CommandError,
    ConfigurationError,
    MaxRetryAttemptsReached,
    RetryableError,
    ValidationError,
)
from .models import DelayFunc, OnFailedAttempt, RetryOptions, RetryWhen
from .types import DelayStrategy, RetryCondition

__all__ = [
    # Types
    "DelayStrategy",
    "RetryCondition",
    # Exceptions
    "RetryableError",
    "ConfigurationError",
    "ValidationError",
    "CommandError",
    "MaxRetryAttemptsReached",
    # Models
    "RetryOptions",
    "RetryWhen",
    "DelayFunc",
    "OnFailedAttempt",
    # Config
    "GlobalConfig",
    "config",
    "get_config",
    "reload_config",
    "setup_logging",
]
