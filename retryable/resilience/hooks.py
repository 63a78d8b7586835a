"""Ready-made ``on_failed_attempt`` callbacks."""

import logging
from typing import Any, Optional

from retryable.core.models import OnFailedAttempt

logger = logging.getLogger(__name__)


def log_failed_attempts(
    log: Optional[logging.Logger] = None,
    level: int = logging.WARNING,
    name: Optional[str] = None,
) -> OnFailedAttempt:
    """Build a callback that logs every attempt asking for a retry.

    Args:
        log: Logger to write to (defaults to this module's logger)
        level: Log level for the records
        name: Operation label included in the message

    Returns:
        Callback suitable for ``RetryOptions.on_failed_attempt``
    """
    target = log or logger
    label = f"'{name}'" if name else "operation"

    def on_failed_attempt(
        attempt: int, remaining: int, result: Any, error: Optional[BaseException]
    ) -> None:
        if error is not None:
            target.log(
                level,
                f"Attempt {attempt} of {label} failed "
                f"({remaining} retries left): {type(error).__name__}: {error}",
            )
        else:
            target.log(
                level,
                f"Attempt {attempt} of {label} returned {result!r}, "
                f"retry requested ({remaining} retries left)",
            )

    return on_failed_attempt
