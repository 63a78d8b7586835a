"""Core type definitions and enums for retryable."""

from enum import Enum


class DelayStrategy(str, Enum):
    """Built-in delay strategies, addressable by name."""

    NONE = "none"
    CONSTANT = "constant"
    LINEAR = "linear"
    POTENTIAL = "potential"  # Doubles per attempt after the first


class RetryCondition(str, Enum):
    """Built-in retry conditions, addressable by name."""

    ON_ANY_ERROR = "on_any_error"
    ALWAYS = "always"
    ON_NULL_RESULT = "on_null_result"
