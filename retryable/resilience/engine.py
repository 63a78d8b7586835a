"""Retry engine for asynchronous operations.

Re-invokes an operation until the retry condition is no longer met or the
retry budget is used up. The condition is consulted after every attempt,
including the first, so it also serves as the success test (e.g. retrying
on an HTTP 429 response that did not raise).
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar

from pydantic import ValidationError as PydanticValidationError

from retryable.core.exceptions import ConfigurationError, MaxRetryAttemptsReached
from retryable.core.models import RetryOptions

from . import delays
from .wait import wait

T = TypeVar("T")


@dataclass
class AttemptState:
    """Mutable state of one engine execution."""

    attempts: int = 0
    result: Any = None
    error: Optional[Exception] = None
    attempts_left: bool = True


def clamp_delay(duration: float, max_delay: Optional[float]) -> float:
    """Apply the max_delay bound when it is a positive number."""
    if max_delay:
        return min(max_delay, duration)
    return duration


def operation_name(operation: Callable[..., Any], options: RetryOptions) -> str:
    """Name used for an operation in produced errors."""
    if options.name_of_operation is not None:
        return options.name_of_operation
    return getattr(operation, "__name__", repr(operation))


async def execute(operation: Callable[[], Awaitable[T]], options: RetryOptions) -> T:
    """Execute operation, retrying as long as ``options.retry_when`` asks to.

    Args:
        operation: Zero-argument callable returning an awaitable
        options: Retry options

    Returns:
        Result of the last attempt

    Raises:
        MaxRetryAttemptsReached: If retries are used up and
            ``throw_max_attempt_error`` is set
        Exception: The error of the last attempt, unchanged
    """
    delay = options.delay or delays.none()
    state = AttemptState()

    while True:
        try:
            state.result = await operation()
            state.error = None
        except Exception as e:
            state.error = e

        if not options.retry_when(state.result, state.error):
            break

        if options.on_failed_attempt is not None:
            options.on_failed_attempt(
                state.attempts + 1,
                options.max_retries - state.attempts,
                state.result,
                state.error,
            )

        state.attempts_left = state.attempts < options.max_retries
        state.attempts += 1
        if not state.attempts_left:
            break

        duration = delay(state.attempts, state.error)
        await wait(clamp_delay(duration, options.max_delay))

    if options.throw_max_attempt_error and not state.attempts_left:
        raise MaxRetryAttemptsReached(
            f"Max re-attempts of {state.attempts} reached for operation "
            f'"{operation_name(operation, options)}".',
            state.error,
        ) from state.error

    if state.error is not None:
        raise state.error

    return state.result


def build_options(**fields: Any) -> RetryOptions:
    """Validate retry options given as keyword arguments.

    Raises:
        ConfigurationError: If the options are invalid
    """
    try:
        return RetryOptions(**fields)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid retry options:\n{e}") from e


async def retry(operation: Callable[[], Awaitable[T]], **fields: Any) -> T:
    """Execute operation with retry options given as keyword arguments.

    Example:
        ```python
        response = await retry(
            lambda: client.get(url),
            retry_when=conditions.on_any_error(),
            max_retries=3,
            delay=delays.potential(100),
        )
        ```
    """
    return await execute(operation, build_options(**fields))
