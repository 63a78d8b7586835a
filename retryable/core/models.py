"""Core Pydantic data models for retryable."""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

# (result, error) -> retry desired
RetryWhen = Callable[[Any, Optional[BaseException]], bool]

# (attempts, error) -> delay in milliseconds
DelayFunc = Callable[..., float]

# (attempt number, attempts remaining, result, error) -> ignored
OnFailedAttempt = Callable[[int, int, Any, Optional[BaseException]], Any]


class RetryOptions(BaseModel):
    """Options for a single retried invocation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    max_retries: int = Field(
        default=2, ge=0, description="Retries allowed beyond the initial attempt"
    )
    throw_max_attempt_error: bool = Field(
        default=False,
        description="Raise MaxRetryAttemptsReached when the retries are used up",
    )
    name_of_operation: Optional[str] = Field(
        default=None, description="Operation label used in produced errors"
    )
    max_delay: Optional[float] = Field(
        default=None, ge=0.0, description="Upper bound in ms for each delay"
    )
    retry_when: RetryWhen = Field(..., description="Returns True if a retry is desired")
    delay: Optional[DelayFunc] = Field(
        default=None, description="Delay in ms between attempts (no delay if None)"
    )
    on_failed_attempt: Optional[OnFailedAttempt] = Field(
        default=None, description="Called for every attempt that asks for a retry"
    )
