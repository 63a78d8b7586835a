"""Built-in delay strategies.

Every factory returns a plain function ``(attempts, error=None) -> float``
giving the delay in milliseconds before the next attempt. ``attempts`` is the
number of failed attempts so far, so the first retry is computed with 1.
Custom strategies follow the same signature and may inspect the error.
"""

from typing import Optional

from retryable.core.models import DelayFunc
from retryable.core.types import DelayStrategy


def none() -> DelayFunc:
    """No delay between retries."""

    def delay(attempts: int, error: Optional[BaseException] = None) -> float:
        return 0

    return delay


def constant(delay_ms: float) -> DelayFunc:
    """Constant delay between retries."""

    def delay(attempts: int, error: Optional[BaseException] = None) -> float:
        return delay_ms

    return delay


def linear(delay_ms: float) -> DelayFunc:
    """Linear slope per attempt."""

    def delay(attempts: int, error: Optional[BaseException] = None) -> float:
        return attempts * delay_ms

    return delay


def potential(delay_ms: float) -> DelayFunc:
    """Doubling per attempt: d, d, 2d, 4d, 8d, ..."""

    def delay(attempts: int, error: Optional[BaseException] = None) -> float:
        return 2 ** max(attempts - 1, 0) * delay_ms

    return delay


def from_strategy(strategy: DelayStrategy, delay_ms: float = 0) -> DelayFunc:
    """Build a delay function from its strategy name.

    Args:
        strategy: Built-in strategy
        delay_ms: Base delay in milliseconds (ignored by ``none``)

    Returns:
        Delay function
    """
    strategy = DelayStrategy(strategy)
    if strategy == DelayStrategy.NONE:
        return none()
    if strategy == DelayStrategy.CONSTANT:
        return constant(delay_ms)
    if strategy == DelayStrategy.LINEAR:
        return linear(delay_ms)
    return potential(delay_ms)
