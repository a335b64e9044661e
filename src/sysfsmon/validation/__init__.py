"""
Validation and error handling for the sysfsmon package.

This module provides input validation and error handling
with consistent error reporting across the collector.
"""

from .exceptions import (
    ErrorSeverity,
    TimerError,
    ValidationError,
    handle_collector_error,
    handle_config_error,
    handle_error,
    handle_file_error,
)

from .validators import (
    validate_enum_choice,
    validate_path_string,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "TimerError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_file_error",
    "handle_collector_error",
    # Validators
    "validate_enum_choice",
    "validate_path_string",
    "validate_positive_float",
    "validate_positive_integer",
]
