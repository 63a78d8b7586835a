"""Unit tests for built-in retry conditions."""

import pytest

from retryable.core.types import RetryCondition
from retryable.resilience import conditions
from retryable.resilience.conditions import ConditionBuilder


class TestBuiltinConditions:
    """Test built-in conditions."""

    def test_on_any_error(self):
        condition = conditions.on_any_error()

        assert condition(None, Exception()) is True
        assert condition(None, None) is False
        assert condition(1, None) is False

    def test_always(self):
        condition = conditions.always()

        assert condition(None, Exception()) is True
        assert condition(1, None) is True

    def test_on_null_result(self):
        condition = conditions.on_null_result()

        assert condition(None, Exception()) is False
        assert condition(1, None) is False
        assert condition(None, None) is True

    def test_on_null_result_accepts_falsy_values(self):
        """Only None counts as a null result."""
        condition = conditions.on_null_result()

        assert condition(0, None) is False
        assert condition("", None) is False
        assert condition([], None) is False

    @pytest.mark.parametrize(
        "name,result,error,expected",
        [
            (RetryCondition.ON_ANY_ERROR, None, ValueError(), True),
            (RetryCondition.ALWAYS, 1, None, True),
            (RetryCondition.ON_NULL_RESULT, None, None, True),
            ("on_null_result", 1, None, False),
        ],
    )
    def test_from_name(self, name, result, error, expected):
        assert conditions.from_name(name)(result, error) is expected


class TestCustomConditions:
    """Test the condition builder."""

    def test_returns_builder(self):
        custom = conditions.custom()

        assert isinstance(custom, ConditionBuilder)
        assert callable(custom.to_condition)

    def test_false_by_default(self):
        condition = conditions.custom().to_condition()

        assert condition(None, None) is False
        assert condition(None, RuntimeError()) is False

    def test_on_error_marks_error_types_retryable(self):
        condition = conditions.custom().on_error(TypeError).to_condition()

        assert condition(None, Exception("retry me not")) is False
        assert condition(None, TypeError("retry me")) is True

    def test_on_error_matches_subclasses(self):
        condition = conditions.custom().on_error(OSError).to_condition()

        assert condition(None, ConnectionRefusedError()) is True

    def test_on_error_accepts_several_types(self):
        condition = (
            conditions.custom().on_error(TimeoutError, ConnectionError).to_condition()
        )

        assert condition(None, TimeoutError()) is True
        assert condition(None, ConnectionError()) is True
        assert condition(None, ValueError()) is False

    def test_on_condition_checks_result(self):
        condition = (
            conditions.custom()
            .on_condition(lambda result: not isinstance(result, int))
            .on_condition(lambda result: result > 10)
            .to_condition()
        )

        assert condition(None, None) is True
        assert condition(11, None) is True
        assert condition(1, None) is False

    def test_rules_are_or_combined(self):
        """Error types and result checks are combined with OR."""
        condition = (
            conditions.custom()
            .on_error(TimeoutError)
            .on_condition(lambda response: response == 429)
            .to_condition()
        )

        assert condition(429, None) is True
        assert condition(200, TimeoutError()) is True
        assert condition(200, None) is False
        assert condition(200, ValueError()) is False

    def test_condition_is_snapshot_of_rules(self):
        """Rules added after to_condition do not affect earlier conditions."""
        builder = conditions.custom()
        condition = builder.to_condition()
        builder.on_error(ValueError)

        assert condition(None, ValueError()) is False
        assert builder.to_condition()(None, ValueError()) is True
