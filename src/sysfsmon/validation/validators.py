"""
Value checks for configuration loading.

Each check returns the normalised value or raises ValidationError naming
the offending field.
"""

import math
from typing import Any, List, Optional, Union

from .exceptions import ValidationError

Number = Union[int, float]


def _reject(field_name: str, value: Any, requirement: str) -> ValidationError:
    return ValidationError(
        f"{field_name} must be {requirement}, got {value!r}",
        field_name=field_name,
        value=value
    )


def _check_bounds(number: Number, value: Any, min_value: Number,
                  max_value: Optional[Number], field_name: str) -> Number:
    if number < min_value:
        raise _reject(field_name, value, f">= {min_value}")
    if max_value is not None and number > max_value:
        raise _reject(field_name, value, f"<= {max_value}")
    return number


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate an integer within [min_value, max_value].

    Booleans are rejected even though Python treats them as integers; TOML
    `true` in a count field is a typo, not 1.

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise _reject(field_name, value, "an integer")
    try:
        number = int(value)
    except (ValueError, TypeError):
        raise _reject(field_name, value, "an integer")
    return _check_bounds(number, value, min_value, max_value, field_name)


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate a finite number of seconds or similar within [min_value, max_value].

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise _reject(field_name, value, "a number")
    try:
        number = float(value)
    except (ValueError, TypeError):
        raise _reject(field_name, value, "a number")
    if not math.isfinite(number):
        raise _reject(field_name, value, "finite")
    return _check_bounds(number, value, min_value, max_value, field_name)


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value"
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Raises:
        ValidationError: If value is not in valid_choices
    """
    if value not in valid_choices:
        raise _reject(field_name, value, f"one of {valid_choices}")
    return value


def validate_path_string(value: Any, field_name: str = "path") -> str:
    """
    Validate a configured node path.

    The node does not have to exist at load time; drivers may create it
    later. An empty string is allowed and means the node does not exist on
    this device.

    Raises:
        ValidationError: If value is not a string
    """
    if not isinstance(value, str):
        raise _reject(field_name, value, "a string")
    return value.strip()
