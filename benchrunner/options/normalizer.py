# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Option normalizer: raw flags in, canonical configuration out.

The rules, applied while walking the raw options in command-line order:

  no_pretty      format = machine if set, pretty otherwise (last one wins)
  quiet          verbose = not quiet (last one wins)
  mem_stats      first plain occurrence wins, later ones are ignored
  sys_mem_stats  true promotes mem_stats to include_sys, false does nothing
  no_compile     pulled out of the config and returned on its own
  anything else  copied through as-is (last one wins)

sys_mem_stats=true beats every plain mem_stats value no matter which came
first on the command line. Results are fully determined by the flags given;
argument order only matters between repeats of the same flag.

Key order of the result: format, verbose, then the remaining keys in order of
first appearance.
"""

import logging
from typing import Any, Iterable

from benchrunner.options.models import CanonicalConfig, MemStats, OutputFormat, RawOption

logger = logging.getLogger(__name__)


def _pretty_to_format(pretty: bool) -> OutputFormat:
    return OutputFormat.PRETTY if pretty else OutputFormat.MACHINE


def normalize(raw_options: Iterable[RawOption]) -> tuple[CanonicalConfig, bool]:
    """
    Build the canonical configuration and the skip-compile flag.

    Returns:
        (config, skip_compile). skip_compile is False unless --no-compile was given.
    """
    options: dict[str, Any] = {
        "format": OutputFormat.PRETTY,
        "verbose": True,
    }
    include_sys = False
    skip_compile = False

    for option in raw_options:
        key, value = option.key, option.value
        if key == "no_pretty":
            options["format"] = _pretty_to_format(not value)
        elif key == "quiet":
            options["verbose"] = not value
        elif key == "mem_stats":
            options.setdefault("mem_stats", value)
        elif key == "sys_mem_stats":
            if value is True:
                include_sys = True
                options.setdefault("mem_stats", MemStats.INCLUDE_SYS)
        elif key == "no_compile":
            skip_compile = bool(value)
        else:
            options[key] = value

    if include_sys:
        options["mem_stats"] = MemStats.INCLUDE_SYS

    config = CanonicalConfig(items=tuple(options.items()))
    logger.debug(
        "Options normalized",
        extra={"config": config.as_dict(), "skip_compile": skip_compile},
    )
    return config, skip_compile
