"""Retry patterns for asynchronous operations.

This module provides:
- The retry engine (``execute`` / ``retry``)
- Built-in delay strategies and retry conditions
- A decorator for async functions and methods
- Declarative retry policies
"""

from . import conditions, delays
from .conditions import ConditionBuilder
from .decorator import retryable, wrap
from .engine import AttemptState, build_options, clamp_delay, execute, retry
from .hooks import log_failed_attempts
from .policy import DelayConfig, RetryPolicy, resolve_exception
from .wait import wait

__all__ = [
    "conditions",
    "delays",
    "ConditionBuilder",
    "AttemptState",
    "build_options",
    "clamp_delay",
    "execute",
    "retry",
    "retryable",
    "wrap",
    "log_failed_attempts",
    "DelayConfig",
    "RetryPolicy",
    "resolve_exception",
    "wait",
]
