"""Built-in retry conditions.

A condition is a plain function ``(result, error) -> bool`` returning True
when another attempt is desired. It is consulted after every attempt,
including the first, so it doubles as the success test.
"""

from typing import Any, Callable, List, Optional, Tuple, Type

from retryable.core.models import RetryWhen
from retryable.core.types import RetryCondition


def on_any_error() -> RetryWhen:
    """Retry whenever the attempt raised."""

    def condition(result: Any, error: Optional[BaseException]) -> bool:
        return error is not None

    return condition


def always() -> RetryWhen:
    """Retry regardless of the outcome. Bounded only by ``max_retries``."""

    def condition(result: Any, error: Optional[BaseException]) -> bool:
        return True

    return condition


def on_null_result() -> RetryWhen:
    """Retry when the attempt returned None without raising."""

    def condition(result: Any, error: Optional[BaseException]) -> bool:
        return error is None and result is None

    return condition


def from_name(name: RetryCondition) -> RetryWhen:
    """Build a built-in condition from its name."""
    name = RetryCondition(name)
    if name == RetryCondition.ON_ANY_ERROR:
        return on_any_error()
    if name == RetryCondition.ALWAYS:
        return always()
    return on_null_result()


class ConditionBuilder:
    """Aggregates error types and result checks into one condition.

    The produced condition returns True if any registered rule matches and
    False when nothing is registered.

    Example:
        ```python
        retry_when = (
            conditions.custom()
            .on_error(ConnectionError, TimeoutError)
            .on_condition(lambda response: response.status == 429)
            .to_condition()
        )
        ```
    """

    def __init__(self) -> None:
        self._errors: Tuple[Type[BaseException], ...] = ()
        self._conditions: List[Callable[[Any], bool]] = []

    def on_error(self, *error_types: Type[BaseException]) -> "ConditionBuilder":
        """Mark errors of the given types as retryable."""
        self._errors += error_types
        return self

    def on_condition(self, condition: Callable[[Any], bool]) -> "ConditionBuilder":
        """Retry when ``condition(result)`` is true."""
        self._conditions.append(condition)
        return self

    def to_condition(self) -> RetryWhen:
        errors = self._errors
        result_conditions = tuple(self._conditions)

        def condition(result: Any, error: Optional[BaseException]) -> bool:
            if error is not None and errors and isinstance(error, errors):
                return True
            return any(check(result) for check in result_conditions)

        return condition


def custom() -> ConditionBuilder:
    """Start a custom condition."""
    return ConditionBuilder()
