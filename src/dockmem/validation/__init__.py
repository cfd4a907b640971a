"""
Validation and error handling for the dockmem package.

This module provides the error taxonomy, input validation and error handling
with consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    DockmemError,
    ValidationError,
    DaemonConnectionError,
    ContainerError,
    StatsUnavailableError,
    SnapshotDecodeError,
    InvalidIdentifierError,
    handle_error,
    handle_config_error,
    handle_container_error,
    handle_cli_error,
)

from .validators import (
    validate_boolean,
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    # Errors
    "ErrorSeverity",
    "DockmemError",
    "ValidationError",
    "DaemonConnectionError",
    "ContainerError",
    "StatsUnavailableError",
    "SnapshotDecodeError",
    "InvalidIdentifierError",
    # Handlers
    "handle_error",
    "handle_config_error",
    "handle_container_error",
    "handle_cli_error",
    # Validators
    "validate_boolean",
    "validate_enum_choice",
    "validate_positive_float",
    "validate_positive_integer",
]
