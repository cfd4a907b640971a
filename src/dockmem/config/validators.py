"""
Configuration validation utilities.

This module turns the raw TOML sections into validated configuration
dataclasses. Every key is optional and falls back to the dataclass default.
"""

import logging
from typing import Any, Dict

from ..models.config import AppConfig, LoggingConfig, ReportConfig, RuntimeConfig
from ..validation import (
    ValidationError,
    validate_boolean,
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValidationError(f"[{name}] must be a table", field_name=name, value=section)
    return section


def validate_runtime_config(runtime_data: Dict[str, Any]) -> RuntimeConfig:
    """
    Validate and create a RuntimeConfig from the [runtime] section.

    Raises:
        ValidationError: If validation fails
    """
    defaults = RuntimeConfig()

    base_url = runtime_data.get("base_url", "")
    if not isinstance(base_url, str):
        raise ValidationError(
            "runtime.base_url must be a string", field_name="runtime.base_url", value=base_url
        )

    timeout = validate_positive_float(
        runtime_data.get("timeout", defaults.timeout),
        min_value=0.1,
        max_value=600.0,
        field_name="runtime.timeout",
    )

    return RuntimeConfig(base_url=base_url.strip() or None, timeout=timeout)


def validate_report_config(report_data: Dict[str, Any]) -> ReportConfig:
    """
    Validate and create a ReportConfig from the [report] section.

    Raises:
        ValidationError: If validation fails
    """
    defaults = ReportConfig()

    show_percentage = validate_boolean(
        report_data.get("show_percentage", defaults.show_percentage),
        field_name="report.show_percentage",
    )

    column_padding = validate_positive_integer(
        report_data.get("column_padding", defaults.column_padding),
        min_value=1,
        max_value=16,
        field_name="report.column_padding",
    )

    title = report_data.get("title", defaults.title)
    if not isinstance(title, str):
        raise ValidationError(
            "report.title must be a string", field_name="report.title", value=title
        )

    return ReportConfig(
        show_percentage=show_percentage,
        column_padding=column_padding,
        title=title,
    )


def validate_logging_config(logging_data: Dict[str, Any]) -> LoggingConfig:
    """
    Validate and create a LoggingConfig from the [logging] section.

    Raises:
        ValidationError: If validation fails
    """
    level = validate_enum_choice(
        logging_data.get("level", LoggingConfig().level),
        valid_choices=LOG_LEVELS,
        field_name="logging.level",
        case_sensitive=False,
    )
    return LoggingConfig(level=level)


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate the whole configuration document.

    Args:
        config_data: Parsed config.toml contents

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If any section fails validation
    """
    app_config = AppConfig(
        runtime=validate_runtime_config(_section(config_data, "runtime")),
        report=validate_report_config(_section(config_data, "report")),
        logging=validate_logging_config(_section(config_data, "logging")),
    )
    logger.debug(f"Validated configuration: {app_config}")
    return app_config
