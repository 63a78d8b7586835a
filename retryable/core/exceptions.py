"""Custom exceptions for retryable."""

from typing import Optional


class RetryableError(Exception):
    """Base exception for all retryable errors."""

    pass


class ConfigurationError(RetryableError):
    """Raised when retry options or a policy file are invalid."""

    pass


class ValidationError(RetryableError):
    """Raised when a policy definition fails validation."""

    pass


class CommandError(RetryableError):
    """Raised when a command run by the CLI exits with a non-zero status."""

    def __init__(self, command: str, returncode: int):
        self.command = command
        self.returncode = returncode
        super().__init__(f"Command '{command}' exited with status {returncode}")


class MaxRetryAttemptsReached(RetryableError):
    """Raised when the maximum retry attempts of an operation are reached.

    Only raised when ``throw_max_attempt_error`` is enabled. The last error
    thrown by the operation, if any, is kept in ``cause`` and is also the
    ``__cause__`` of this exception when raised by the retry engine.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        if cause is not None:
            message += f" Caused by thrown error: {cause}"
        else:
            message += " Caused by: unfulfilled retry condition"
        self.message = message
        super().__init__(message)
