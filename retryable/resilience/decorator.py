"""Declarative retry for async functions and methods."""

import functools
from typing import Any, Awaitable, Callable, Optional, TypeVar

from retryable.core.models import RetryOptions

from .engine import build_options, execute

T = TypeVar("T")


def wrap(
    operation: Callable[..., Awaitable[T]], options: RetryOptions
) -> Callable[..., Awaitable[T]]:
    """Return a callable that routes every call of operation through the retry engine.

    Without a ``name_of_operation``, diagnostics name the wrapped operation
    itself rather than the per-call closure handed to the engine.

    Args:
        operation: Async callable to wrap
        options: Retry options applied to every call

    Returns:
        Async callable taking the same arguments as operation
    """
    if options.name_of_operation is None:
        options = options.model_copy(
            update={"name_of_operation": getattr(operation, "__name__", repr(operation))}
        )

    @functools.wraps(operation)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        return await execute(lambda: operation(*args, **kwargs), options)

    return wrapper


def _default_name(func: Callable[..., Any]) -> str:
    """``Owner#method`` for methods, the plain name for functions."""
    qualname = getattr(func, "__qualname__", None) or getattr(
        func, "__name__", repr(func)
    )
    owner, _, name = qualname.rpartition(".")
    if not owner or owner.endswith("<locals>"):
        return name
    return f"{owner.rpartition('.')[2]}#{name}"


def retryable(options: Optional[RetryOptions] = None, **fields: Any) -> Callable[[Any], Any]:
    """Decorator retrying an async function or method.

    Accepts either a ready ``RetryOptions`` or its fields as keyword
    arguments, or both, in which case the keyword arguments override the
    object's fields. The merged options are validated once, when the
    decorator is created. Applied to anything that is not callable, it
    returns the value untouched.

    Example:
        ```python
        class Client:
            @retryable(retry_when=conditions.on_any_error(), max_retries=3)
            async def fetch(self, key: str) -> bytes:
                ...
        ```

    Raises:
        ConfigurationError: If the options are invalid
    """
    if options is None:
        options = build_options(**fields)
    elif fields:
        options = build_options(**{**dict(options), **fields})

    def decorator(target: Any) -> Any:
        if not callable(target):
            return target

        named = options
        if named.name_of_operation is None:
            named = named.model_copy(update={"name_of_operation": _default_name(target)})
        return wrap(target, named)

    return decorator
