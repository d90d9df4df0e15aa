# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for benchrunner.

Usage:
    bench [options] [<path>...]
    bench
    bench -q --duration 2 bench/str_*_bench.py
    bench --config bench/runner.yaml --log-level DEBUG --no-compile

When one or more paths are supplied, each is treated as a wildcard pattern
and only the benchmark files it matches are loaded. By default, every file
matching bench/**/*_bench.py is loaded.

run() is the single place where failures become exit codes. Every stage
below it raises; nothing below it calls sys.exit.
"""

import sys
from typing import Optional, Sequence

from benchrunner.cli.commands import run_bench
from benchrunner.cli.exit_codes import (
    CONFIG_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    USER_ERROR,
    VALIDATION_ERROR,
)
from benchrunner.config.exceptions import ConfigError
from benchrunner.config.loader import load_config
from benchrunner.exceptions import FileLoadError, InvalidOption, ProjectPreparationError
from benchrunner.logging.logger import PACKAGE_LOGGER, get_logger
from benchrunner.options.parser import parse
from benchrunner.runtime.bootstrap import bootstrap


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the bench command and return its exit code.

    The flow:
      1. Parse the command line (invalid flags stop here with USER_ERROR)
      2. Load the runner config, if one was given (CONFIG_ERROR on failure)
      3. Bootstrap logging and the environment
      4. Run the pipeline: prepare project, locate, load, hand off to the engine
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    logger = get_logger(PACKAGE_LOGGER)

    try:
        parsed = parse(argv)
    except InvalidOption as err:
        logger.error(
            "Invalid option",
            extra={"flag": err.flag, "value": err.value, "error": str(err)},
        )
        return USER_ERROR

    try:
        runner_config = load_config(parsed.config_path)
    except ConfigError as err:
        logger.error(
            "Configuration error",
            extra={"config": str(parsed.config_path), "error": str(err)},
        )
        return CONFIG_ERROR

    try:
        logger = bootstrap(runner_config, parsed.log_level)
        outcome = run_bench(parsed, runner_config)
    except ProjectPreparationError as err:
        logger.error("Project preparation failed", extra={"error": str(err)})
        return VALIDATION_ERROR
    except FileLoadError as err:
        logger.error(
            "Benchmark file failed to load",
            extra={"path": str(err.path), "error": str(err)},
        )
        return RUNTIME_ERROR
    except Exception as err:
        logger.error("Bench run failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR

    logger.info(
        "Bench run complete",
        extra={
            "files": len(outcome.load.files),
            "suites": len(outcome.load.suites),
            "engine_invoked": outcome.ran,
        },
    )
    return SUCCESS


def main() -> None:
    """Console script entrypoint. This is what pyproject.toml's [project.scripts] points to."""
    sys.exit(run())


if __name__ == "__main__":
    main()
