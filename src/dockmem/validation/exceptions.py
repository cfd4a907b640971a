"""
Exception types and error handling helpers.

This module defines the error taxonomy used throughout dockmem and the small
set of helpers that log errors consistently before re-raising or exiting.

Fatal errors (the run cannot continue):
- DaemonConnectionError: the container runtime cannot be reached or the
  running containers cannot be listed.

Per-container errors (the container is skipped and the run continues):
- StatsUnavailableError: the statistics snapshot could not be fetched.
- SnapshotDecodeError: the statistics snapshot could not be decoded.
- InvalidIdentifierError: the container ID is too short to derive a short ID.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class DockmemError(Exception):
    """Base class for all errors raised by dockmem."""


class ValidationError(DockmemError):
    """
    Exception raised when validation fails.

    Used for configuration files and command-line input.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class DaemonConnectionError(DockmemError):
    """The container runtime daemon is unreachable or cannot list containers."""


class ContainerError(DockmemError):
    """
    Base class for recoverable, per-container failures.

    Attributes:
        container_id: Full ID of the container the failure belongs to.
    """

    def __init__(self, message: str, container_id: Optional[str] = None):
        super().__init__(message)
        self.container_id = container_id


class StatsUnavailableError(ContainerError):
    """The statistics snapshot for a container could not be fetched."""


class SnapshotDecodeError(ContainerError):
    """The statistics snapshot for a container could not be decoded."""


class InvalidIdentifierError(ContainerError):
    """A container ID is shorter than the short-ID length."""


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_container_error(error: ContainerError, **kwargs) -> None:
    """Log a per-container failure as a warning without re-raising."""
    kwargs.setdefault('severity', ErrorSeverity.WARNING)
    kwargs.setdefault('reraise', False)
    handle_error(error, f"container {error.container_id or '<unknown>'}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Handle CLI-related errors by logging them and exiting."""
    exit_code = kwargs.pop('exit_code', 1)
    include_traceback = kwargs.pop('include_traceback', False)

    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    if include_traceback and severity == ErrorSeverity.ERROR:
        severity = ErrorSeverity.CRITICAL
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    sys.exit(exit_code)
