"""
Validation functions for configuration values.

Each validator either returns the normalized value or raises ValidationError
naming the offending field.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate that a value is a float within the given bounds.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated float value

    Raises:
        ValidationError: If validation fails
    """
    # bool is an int subclass; "interval = true" is a mistake, not 1.0
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a number, got {value!r}",
            field_name=field_name,
            value=value
        )
    try:
        float_value = float(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value!r}",
            field_name=field_name,
            value=value
        )
    if float_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and float_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    return float_value


def validate_bool(value: Any, field_name: str = "value") -> bool:
    """Validate that a value is a real boolean."""
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_enum_choice(
    value: Any,
    choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        choices: List of allowed choices
        field_name: Name of the field being validated
        case_sensitive: Whether the comparison should be case-sensitive

    Returns:
        Validated choice, as it appears in ``choices``

    Raises:
        ValidationError: If value is not in choices
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a string, got {value!r}",
            field_name=field_name,
            value=value
        )

    for choice in choices:
        if value == choice or (not case_sensitive and value.lower() == choice.lower()):
            return choice

    raise ValidationError(
        f"{field_name} must be one of {choices}, got '{value}'",
        field_name=field_name,
        value=value
    )


def validate_file_path(value: Any, field_name: str = "value") -> str:
    """
    Validate a configured file path.

    The file itself is not required to exist: pseudo-files can come and go,
    and a missing file is reported per collection cycle instead.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty path string, got {value!r}",
            field_name=field_name,
            value=value
        )
    return str(Path(value))


def validate_labels(value: Any, field_name: str = "labels") -> Dict[str, str]:
    """Validate a table of extra sample labels (string keys and values)."""
    if not isinstance(value, dict):
        raise ValidationError(
            f"{field_name} must be a table, got {value!r}",
            field_name=field_name,
            value=value
        )
    labels = {}
    for key, label_value in value.items():
        if not isinstance(label_value, (str, int, float)) or isinstance(label_value, bool):
            raise ValidationError(
                f"{field_name}.{key} must be a string or number, got {label_value!r}",
                field_name=f"{field_name}.{key}",
                value=label_value
            )
        labels[str(key)] = str(label_value)
    return labels
