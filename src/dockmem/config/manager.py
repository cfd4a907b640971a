"""
Configuration management and singleton pattern.

This module provides the main configuration loading and management interface,
implementing a singleton pattern to ensure configuration is loaded only once.
"""

import logging
from pathlib import Path
from typing import Optional

from ..models.config import AppConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_main_config
from .validators import validate_app_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

# This global variable will hold the single instance of the loaded AppConfig.
_CONFIG: Optional[AppConfig] = None

# Default path to the configuration file, relative to this script's location.
# Overridden by set_config_path() (e.g. from the --config CLI option).
_DEFAULT_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"
_CONFIG_FILE_PATH = _DEFAULT_CONFIG_FILE_PATH

# True once a path was set explicitly; an explicit path must exist.
_CONFIG_PATH_EXPLICIT = False


def set_config_path(config_path: Path) -> None:
    """
    Set a custom configuration file path.

    Args:
        config_path: Path to the config.toml file

    Note:
        Any cached configuration is discarded so the next get_config()
        call loads from the new path.
    """
    global _CONFIG_FILE_PATH, _CONFIG, _CONFIG_PATH_EXPLICIT
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG_PATH_EXPLICIT = True
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def reset_config_path() -> None:
    """Restore the default configuration path and clear the cache."""
    global _CONFIG_FILE_PATH, _CONFIG, _CONFIG_PATH_EXPLICIT
    _CONFIG_FILE_PATH = _DEFAULT_CONFIG_FILE_PATH
    _CONFIG_PATH_EXPLICIT = False
    _CONFIG = None


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def _load_config(config_path: Path, required: bool) -> AppConfig:
    """
    Load and validate the application configuration.

    Args:
        config_path: Path to the config.toml file
        required: If False, a missing file yields the built-in defaults

    Returns:
        Fully validated AppConfig instance

    Raises:
        FileNotFoundError: If a required configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if not required and not config_path.exists():
        logger.info(f"No configuration file at {config_path}; using built-in defaults")
        return AppConfig()

    try:
        config_data = load_main_config(config_path)
        app_config = validate_app_config(config_data)
        logger.info(f"Successfully loaded configuration from {config_path}")
        return app_config
    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except Exception as e:
        handle_config_error(
            error=e,
            context="processing configuration",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> AppConfig:
    """
    Get the global application configuration, loading it if necessary.

    The first call loads and validates the configuration file; later calls
    return the cached instance.

    Returns:
        The singleton AppConfig instance

    Raises:
        FileNotFoundError: If an explicitly set configuration file is missing
        ValidationError: If configuration validation fails
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config(_CONFIG_FILE_PATH, required=_CONFIG_PATH_EXPLICIT)
    return _CONFIG


def is_config_loaded() -> bool:
    """
    Check if configuration has been loaded and cached.
    """
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.

    Returns:
        Dictionary with configuration metadata
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(_CONFIG_FILE_PATH),
        "config_path_explicit": _CONFIG_PATH_EXPLICIT,
    }
