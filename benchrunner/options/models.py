# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for command-line options.

Two shapes matter here. RawOption is what the parser saw, one entry per flag
occurrence, in command-line order. CanonicalConfig is what the engine gets:
every derived key filled in, aliases resolved, the compile switch removed.
Both are frozen; nothing downstream of the normalizer may change a run's
configuration.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional, Union

OptionValue = Union[bool, float, str]


class OutputFormat(str, Enum):
    PRETTY = "pretty"
    MACHINE = "machine"


class MemStats(str, Enum):
    """Memory statistics tier beyond plain on/off."""

    INCLUDE_SYS = "include_sys"


@dataclass(frozen=True)
class RawOption:
    """One flag occurrence: the symbolic key (e.g. `no_pretty`) and its parsed value."""

    key: str
    value: OptionValue


@dataclass(frozen=True)
class ParsedArgs:
    """
    Everything the parser extracted from the command line.

    raw_options and paths feed the run pipeline. config_path and log_level
    configure the runner itself and never reach the engine.
    """

    raw_options: tuple[RawOption, ...] = ()
    paths: tuple[str, ...] = ()
    config_path: Optional[Path] = None
    log_level: Optional[str] = None


@dataclass(frozen=True)
class CanonicalConfig:
    """
    The normalized run configuration handed to the engine.

    An ordered sequence of (key, value) pairs with dict-style read access.
    Keys are unique; order is the order the normalizer produced.
    """

    items: tuple[tuple[str, Any], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        keys = [key for key, _ in self.items]
        if len(keys) != len(set(keys)):
            raise ValueError(f"Duplicate keys in canonical config: {keys}")

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.items)

    def __getitem__(self, key: str) -> Any:
        for k, value in self.items:
            if k == key:
                return value
        raise KeyError(key)

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> list[str]:
        return [key for key, _ in self.items]

    def as_dict(self) -> dict[str, Any]:
        return dict(self.items)

    @property
    def format(self) -> OutputFormat:
        return self.get("format", OutputFormat.PRETTY)

    @property
    def verbose(self) -> bool:
        return self.get("verbose", True)

    @property
    def mem_stats(self) -> Union[bool, MemStats]:
        return self.get("mem_stats", False)
