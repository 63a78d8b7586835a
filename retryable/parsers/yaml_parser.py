"""YAML retry policy parser."""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from retryable.core.exceptions import ConfigurationError, ValidationError
from retryable.resilience.policy import RetryPolicy


def parse_policy(policy_path: Union[str, Path]) -> RetryPolicy:
    """Parse retry policy from YAML file.

    Args:
        policy_path: Path to policy YAML file

    Returns:
        Validated RetryPolicy

    Raises:
        ConfigurationError: If file not found or invalid YAML
        ValidationError: If policy definition is invalid

    Example:
        >>> policy = parse_policy("policies/http.yaml")
        >>> policy.max_retries
        3
    """
    path = Path(policy_path)

    if not path.exists():
        raise ConfigurationError(f"Policy file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}")

    if not isinstance(data, dict):
        raise ValidationError(f"Invalid policy definition in {path}: expected a mapping")

    try:
        return RetryPolicy.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid policy definition in {path}:\n{e}")


def validate_policy(policy_path: Union[str, Path]) -> bool:
    """Validate policy definition without raising exceptions.

    Args:
        policy_path: Path to policy YAML file

    Returns:
        True if valid, False otherwise
    """
    try:
        parse_policy(policy_path)
        return True
    except (ConfigurationError, ValidationError):
        return False


def parse_policy_from_dict(data: Dict[str, Any]) -> RetryPolicy:
    """Parse retry policy from dictionary.

    Raises:
        ValidationError: If policy definition is invalid
    """
    try:
        return RetryPolicy.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid policy definition:\n{e}")
