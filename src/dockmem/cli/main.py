"""
Command-line interface for the dockmem container memory report.

This module provides the main CLI entry point, handling command-line
arguments, configuration loading, logging setup and the construction of the
collaborators the report runner depends on.
"""

import argparse
import logging
import sys
import tomllib
from pathlib import Path
from typing import List, Optional

from ..config import get_config, set_config_path
from ..config.validators import LOG_LEVELS
from ..models.config import AppConfig
from ..reporting import Reporter
from ..runtime import DockerRuntime, NoSystemMemory, PsutilSystemMemory
from ..validation import (
    DaemonConnectionError,
    ValidationError,
    handle_cli_error,
    validate_positive_float,
)
from .orchestrator import ReportRunner

# --- Logging Setup ---
# Diagnostics go to stderr so the report on stdout stays machine-readable.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the dockmem command."""
    parser = argparse.ArgumentParser(
        prog="dockmem",
        description="Report the memory usage of all running Docker containers, largest first.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a config.toml file. Defaults to conf/config.toml if present.",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="Docker daemon URL (e.g. unix:///var/run/docker.sock). Defaults to DOCKER_HOST.",
    )
    parser.add_argument(
        "--timeout",
        type=str,
        help="Timeout in seconds for calls to the Docker daemon.",
    )
    parser.add_argument(
        "--no-percentage",
        action="store_true",
        help="Do not query system memory and omit the MEM %% column.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for diagnostics written to stderr.",
    )
    return parser


def apply_overrides(app_config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """
    Apply command-line options on top of the loaded configuration.

    Raises:
        ValidationError: If an option value is invalid
    """
    if args.base_url:
        app_config.runtime.base_url = args.base_url
    if args.timeout is not None:
        app_config.runtime.timeout = validate_positive_float(
            args.timeout, min_value=0.1, max_value=600.0, field_name="--timeout"
        )
    if args.no_percentage:
        app_config.report.show_percentage = False
    if args.log_level:
        app_config.logging.level = args.log_level
    return app_config


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for dockmem.

    Loads the configuration, connects to the Docker daemon and prints the
    memory report to stdout. Per-container failures are logged and skipped.

    Raises:
        SystemExit: With code 1 on configuration errors or when the daemon
                    cannot be reached or the containers cannot be listed.
    """
    args = build_parser().parse_args(argv)

    if args.config is not None:
        set_config_path(args.config)

    try:
        app_config = get_config()
    except (FileNotFoundError, ValidationError, tomllib.TOMLDecodeError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )

    try:
        app_config = apply_overrides(app_config, args)
    except ValidationError as e:
        handle_cli_error(
            error=e,
            context="argument validation",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )

    logging.getLogger().setLevel(app_config.logging.level)

    reporter = Reporter(
        stream=sys.stdout,
        padding=app_config.report.column_padding,
        title=app_config.report.title,
    )
    system_memory = (
        PsutilSystemMemory() if app_config.report.show_percentage else NoSystemMemory()
    )
    runtime = DockerRuntime(
        base_url=app_config.runtime.base_url,
        timeout=app_config.runtime.timeout,
    )

    try:
        with runtime:
            runtime.connect()
            ReportRunner(runtime, reporter, system_memory=system_memory).run()
    except DaemonConnectionError as e:
        handle_cli_error(
            error=e,
            context="container listing",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted; no report was written.")
        sys.exit(130)


if __name__ == "__main__":
    main_cli()
