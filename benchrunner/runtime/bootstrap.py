# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for benchrunner.

This module handles the one-time setup that happens before a run starts:
  1. Validate the environment (Python version)
  2. Configure the package logger from the runner config
  3. Log a startup record with system information

After bootstrap completes, every module's log records come out as JSON.
"""

import logging
from pathlib import Path
from typing import Optional

from benchrunner import __version__
from benchrunner.config.schema import RunnerConfig
from benchrunner.logging.logger import PACKAGE_LOGGER, get_logger
from benchrunner.runtime.environment import check_minimum_python, get_system_info


def bootstrap(config: RunnerConfig, log_level: Optional[str] = None) -> logging.Logger:
    """
    Run the bootstrap sequence and return the configured package logger.

    Args:
        config: The validated runner configuration.
        log_level: Command-line override for config.log_level.
    """
    check_minimum_python()

    log_file = Path(config.log_file) if config.log_file is not None else None
    logger = get_logger(
        PACKAGE_LOGGER,
        log_level=log_level or config.log_level,
        log_file=log_file,
    )

    system_info = get_system_info()
    logger.debug(
        "benchrunner bootstrap complete",
        extra={
            "version": __version__,
            "python_version": system_info.python_version,
            "implementation": system_info.implementation,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
        },
    )
    return logger
