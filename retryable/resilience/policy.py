"""Declarative retry policies.

A ``RetryPolicy`` describes retry options with names instead of callables,
so it can be loaded from YAML and turned into ``RetryOptions`` at runtime.
"""

import builtins
import importlib
from typing import Any, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from retryable.core.models import OnFailedAttempt, RetryOptions, RetryWhen
from retryable.core.types import DelayStrategy, RetryCondition

from . import conditions, delays


class DelayConfig(BaseModel):
    """Delay strategy configuration."""

    model_config = ConfigDict(frozen=True)

    strategy: DelayStrategy = Field(
        default=DelayStrategy.NONE, description="Built-in delay strategy"
    )
    delay: float = Field(default=0.0, ge=0.0, description="Base delay in milliseconds")


class RetryPolicy(BaseModel):
    """Serializable retry policy."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_retries: int = Field(default=2, ge=0, description="Retries after the first attempt")
    throw_max_attempt_error: bool = Field(
        default=False, description="Raise MaxRetryAttemptsReached when exhausted"
    )
    name_of_operation: Optional[str] = Field(default=None, description="Operation label")
    max_delay: Optional[float] = Field(
        default=None, ge=0.0, description="Upper bound in ms for each delay"
    )
    retry_when: Optional[RetryCondition] = Field(
        default=None, description="Built-in retry condition"
    )
    retry_on: List[str] = Field(
        default_factory=list,
        description="Exception class names (builtin or dotted path) to retry on",
    )
    delay: DelayConfig = Field(default_factory=DelayConfig, description="Delay strategy")

    @field_validator("retry_on")
    @classmethod
    def _resolvable(cls, names: List[str]) -> List[str]:
        for name in names:
            resolve_exception(name)
        return names

    @model_validator(mode="after")
    def _has_condition(self) -> "RetryPolicy":
        if self.retry_when is None and not self.retry_on:
            raise ValueError("either 'retry_when' or 'retry_on' must be set")
        return self

    def to_options(self, on_failed_attempt: Optional[OnFailedAttempt] = None) -> RetryOptions:
        """Build runtime options from this policy.

        A named condition and ``retry_on`` errors are OR-combined.
        """
        named = conditions.from_name(self.retry_when) if self.retry_when else None
        if self.retry_on:
            by_error = (
                conditions.custom()
                .on_error(*(resolve_exception(name) for name in self.retry_on))
                .to_condition()
            )
            retry_when = by_error if named is None else _either(named, by_error)
        else:
            retry_when = named

        return RetryOptions(
            max_retries=self.max_retries,
            throw_max_attempt_error=self.throw_max_attempt_error,
            name_of_operation=self.name_of_operation,
            max_delay=self.max_delay,
            retry_when=retry_when,
            delay=delays.from_strategy(self.delay.strategy, self.delay.delay),
            on_failed_attempt=on_failed_attempt,
        )


def resolve_exception(name: str) -> Type[BaseException]:
    """Resolve an exception class from a builtin name or a dotted path.

    Raises:
        ValueError: If the name does not resolve to an exception class
    """
    if "." in name:
        module_name, _, attr = name.rpartition(".")
        try:
            candidate = getattr(importlib.import_module(module_name), attr, None)
        except ImportError:
            candidate = None
    else:
        candidate = getattr(builtins, name, None)

    if not (isinstance(candidate, type) and issubclass(candidate, BaseException)):
        raise ValueError(f"'{name}' is not an exception class")
    return candidate


def _either(first: RetryWhen, second: RetryWhen) -> RetryWhen:
    def condition(result: Any, error: Optional[BaseException]) -> bool:
        return first(result, error) or second(result, error)

    return condition
