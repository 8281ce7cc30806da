"""
Validation Utilities
====================

Parsing and validation of configuration values coming from text
(environment variables).
"""

from __future__ import annotations

from typing import Final, Optional


_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class ValidationError(ValueError):
    """Raised when validation fails."""
    pass


def validate_int(
    value: str | int,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
    field_name: str = "value",
) -> int:
    """
    Validate an integer value, parsing it from text if needed.

    Args:
        value: Integer or decimal text
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        field_name: Name of the field for error messages

    Returns:
        Validated integer

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")

    if isinstance(value, int):
        result = value
    elif isinstance(value, str):
        try:
            result = int(value.strip(), 10)
        except ValueError as e:
            raise ValidationError(f"{field_name} must be an integer") from e
    else:
        raise ValidationError(f"{field_name} must be an integer")

    if min_value is not None and result < min_value:
        raise ValidationError(f"{field_name} must be at least {min_value}")
    if max_value is not None and result > max_value:
        raise ValidationError(f"{field_name} must be at most {max_value}")

    return result


def validate_bool(value: str | bool, field_name: str = "value") -> bool:
    """
    Validate a boolean flag ("true"/"false", "1"/"0", "yes"/"no", "on"/"off").

    Raises:
        ValidationError: If the text is not a recognised flag
    """
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a boolean")

    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValidationError(f"{field_name} must be a boolean")


__all__ = ["ValidationError", "validate_int", "validate_bool"]
