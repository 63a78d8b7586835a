"""Unit tests for retry options and policies."""

import pytest
from pydantic import ValidationError

from retryable.core.models import RetryOptions
from retryable.core.types import DelayStrategy, RetryCondition
from retryable.resilience import conditions
from retryable.resilience.policy import DelayConfig, RetryPolicy, resolve_exception


class TestRetryOptions:
    """Test RetryOptions model."""

    def test_defaults(self):
        options = RetryOptions(retry_when=conditions.always())

        assert options.max_retries == 2
        assert options.throw_max_attempt_error is False
        assert options.name_of_operation is None
        assert options.max_delay is None
        assert options.delay is None
        assert options.on_failed_attempt is None

    def test_retry_when_required(self):
        with pytest.raises(ValidationError):
            RetryOptions()

    def test_retry_when_must_be_callable(self):
        with pytest.raises(ValidationError):
            RetryOptions(retry_when="always")

    def test_negative_values_rejected(self):
        with pytest.raises(ValidationError):
            RetryOptions(retry_when=conditions.always(), max_retries=-1)
        with pytest.raises(ValidationError):
            RetryOptions(retry_when=conditions.always(), max_delay=-5)

    def test_frozen(self):
        options = RetryOptions(retry_when=conditions.always())

        with pytest.raises(ValidationError):
            options.max_retries = 5


class TestRetryPolicy:
    """Test RetryPolicy model."""

    def test_defaults(self):
        policy = RetryPolicy(retry_when=RetryCondition.ON_ANY_ERROR)

        assert policy.max_retries == 2
        assert policy.retry_on == []
        assert policy.delay == DelayConfig()
        assert policy.delay.strategy == DelayStrategy.NONE

    def test_requires_a_condition(self):
        with pytest.raises(ValidationError) as exc_info:
            RetryPolicy(max_retries=3)

        assert "retry_when" in str(exc_info.value)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            RetryPolicy(retry_when="always", retries=3)

    def test_rejects_unknown_exception(self):
        with pytest.raises(ValidationError):
            RetryPolicy(retry_on=["NoSuchError"])

    def test_to_options_with_named_condition(self):
        policy = RetryPolicy(
            retry_when="on_null_result",
            max_retries=4,
            max_delay=50,
            throw_max_attempt_error=True,
            name_of_operation="lookup",
            delay={"strategy": "potential", "delay": 10},
        )

        options = policy.to_options()

        assert options.max_retries == 4
        assert options.max_delay == 50
        assert options.throw_max_attempt_error is True
        assert options.name_of_operation == "lookup"
        assert options.retry_when(None, None) is True
        assert options.retry_when(1, None) is False
        assert options.delay(3) == 40

    def test_to_options_with_retry_on(self):
        options = RetryPolicy(retry_on=["TimeoutError", "ConnectionError"]).to_options()

        assert options.retry_when(None, TimeoutError()) is True
        assert options.retry_when(None, ConnectionResetError()) is True
        assert options.retry_when(None, ValueError()) is False
        assert options.retry_when(None, None) is False

    def test_to_options_combines_condition_and_retry_on(self):
        options = RetryPolicy(
            retry_when="on_null_result", retry_on=["TimeoutError"]
        ).to_options()

        assert options.retry_when(None, None) is True
        assert options.retry_when(1, TimeoutError()) is True
        assert options.retry_when(1, ValueError()) is False

    def test_to_options_attaches_callback(self):
        def callback(attempt, remaining, result, error):
            pass

        options = RetryPolicy(retry_when="always").to_options(on_failed_attempt=callback)

        assert options.on_failed_attempt is callback


class TestResolveException:
    """Test exception name resolution."""

    def test_builtin_name(self):
        assert resolve_exception("TimeoutError") is TimeoutError

    def test_dotted_path(self):
        import asyncio

        assert resolve_exception("asyncio.TimeoutError") is asyncio.TimeoutError

    @pytest.mark.parametrize("name", ["NoSuchError", "len", "no.such.Module", "os.path"])
    def test_invalid_names(self, name):
        with pytest.raises(ValueError):
            resolve_exception(name)
