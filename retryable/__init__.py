"""retryable - Retry asynchronous operations with configurable backoff."""

from .core import (
    CommandError,
    ConfigurationError,
    DelayStrategy,
    GlobalConfig,
    MaxRetryAttemptsReached,
    RetryableError,
    RetryCondition,
    RetryOptions,
    ValidationError,
    config,
    get_config,
    reload_config,
)
from .resilience import (
    ConditionBuilder,
    RetryPolicy,
    conditions,
    delays,
    execute,
    log_failed_attempts,
    retry,
    retryable,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    "RetryPolicy",
    # Retry
    "execute",
    "retry",
    "retryable",
    "wrap",
    "delays",
    "conditions",
    "ConditionBuilder",
    "log_failed_attempts",
    # Config
    "GlobalConfig",
    "config",
    "get_config",
    "reload_config",
]
