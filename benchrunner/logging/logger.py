# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for benchrunner.

Every log entry is a single JSON line: timestamped, leveled, tagged with the
logger name, plus whatever structured context the caller attached.

How this works:
  - Modules log through plain `logging.getLogger(__name__)`. Their records
    propagate up to the `benchrunner` package logger.
  - `get_logger` configures a logger with the JsonFormatter. The CLI calls it
    once for the package logger, so every module's records come out as JSON.
  - Output goes to stderr, not stdout. Stdout belongs to the benchmark
    engine, whose machine-format output may be piped into other tools.

The JSON structure looks like:
  {"ts": "2026-...", "level": "INFO", "module": "benchrunner.discovery.loader", "msg": "...", ...}
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, TextIO

PACKAGE_LOGGER = "benchrunner"


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Each log entry carries four mandatory fields:
      ts     — ISO 8601 UTC timestamp
      level  — log level name
      module — the logger name (usually the Python module path)
      msg    — the formatted message string

    Fields passed through the `extra` kwarg are merged into the object, which
    is how the pipeline attaches file paths, flag names, counts and so on.
    """

    _STANDARD_ATTRS = frozenset({
        "name",
        "msg",
        "args",
        "created",
        "relativeCreated",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "pathname",
        "filename",
        "module",
        "levelno",
        "levelname",
        "processName",
        "process",
        "threadName",
        "thread",
        "message",
        "msecs",
        "taskName",
    })

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_log_level(level_name: str) -> int:
    """Turn a level name string into the corresponding logging constant."""
    upper = level_name.upper()
    if upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def get_logger(
    name: str = PACKAGE_LOGGER,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Create (or reconfigure) a structured JSON logger.

    Calling this twice for the same name doesn't stack stream handlers; the
    second call updates the level and adds the log file if it's a new one.

    Args:
        name: Logger name. Defaults to the package logger.
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional path to a log file. If provided, logs go to both
                  the stream and the file.
        stream: Where to write. Defaults to sys.stderr at call time.

    Returns:
        A configured logging.Logger that outputs structured JSON.
    """
    logger = logging.getLogger(name)
    level = _resolve_log_level(log_level)
    logger.setLevel(level)

    formatter = JsonFormatter()

    if not _has_json_stream_handler(logger):
        stream_handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file is not None and not _has_file_handler(logger, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Handlers we did not attach keep their own levels.
    for handler in logger.handlers:
        if isinstance(handler.formatter, JsonFormatter):
            handler.setLevel(level)

    # Handlers above cover all output; keep records away from the root logger.
    logger.propagate = False

    return logger


def _has_json_stream_handler(logger: logging.Logger) -> bool:
    return any(
        type(handler) is logging.StreamHandler and isinstance(handler.formatter, JsonFormatter)
        for handler in logger.handlers
    )


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )
