"""
Validation and error handling for the kernelmon package.

This module provides configuration validation and the error types raised by
collection cycles, with consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    KernelStatError,
    StatFileNotFoundError,
    StatFileReadError,
    StatParseError,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_cli_error,
)

from .validators import (
    validate_bool,
    validate_enum_choice,
    validate_file_path,
    validate_labels,
    validate_positive_float,
)

__all__ = [
    # Errors
    "ErrorSeverity",
    "KernelStatError",
    "StatFileNotFoundError",
    "StatFileReadError",
    "StatParseError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "validate_bool",
    "validate_enum_choice",
    "validate_file_path",
    "validate_labels",
    "validate_positive_float",
]
