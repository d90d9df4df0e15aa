# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Argument parser for the bench command.

Turns raw command-line tokens into RawOptions (one per flag occurrence, in
command-line order) plus the positional path patterns. The normalizer cares
about occurrence order, which argparse's Namespace throws away, so every run
flag is wired to _RecordOption, an action that appends to a shared list
instead of setting its own attribute.

Parsing is strict: an unknown flag, a float flag with a non-float value, a
valued flag with nothing after it, or a value glued onto a boolean flag all
raise InvalidOption. Nothing else in the run has happened at that point.

    bench [--config PATH] [--log-level LEVEL] [options] [<path>...]
"""

import argparse
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from benchrunner.exceptions import InvalidOption
from benchrunner.logging.logger import VALID_LOG_LEVELS
from benchrunner.options.models import OptionValue, ParsedArgs, RawOption

_RAW_DEST = "raw_options"


@dataclass(frozen=True)
class FlagSpec:
    """One recognized run flag."""

    key: str
    long: str
    short: Optional[str]
    kind: type
    help: str
    negatable: bool = False

    @property
    def option_strings(self) -> list[str]:
        return [s for s in (self.short, self.long) if s is not None]


FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec(
        "no_pretty", "--no-pretty", "-n", bool,
        "Print results in machine-readable format instead of pretty-printing them.",
    ),
    FlagSpec(
        "quiet", "--quiet", "-q", bool,
        "Don't print progress reports while the benchmarks are running.",
        negatable=True,
    ),
    FlagSpec(
        "duration", "--duration", "-d", float,
        "Minimum duration of each benchmark, in seconds.",
    ),
    FlagSpec(
        "output", "--output", "-o", str,
        "Directory for result snapshots. An empty value disables snapshots. "
        "Default: bench/snapshots.",
    ),
    FlagSpec(
        "no_compile", "--no-compile", None, bool,
        "Don't byte-compile the host project before running benchmarks.",
    ),
    FlagSpec(
        "mem_stats", "--mem-stats", "-m", bool,
        "Gather memory usage statistics.",
        negatable=True,
    ),
    FlagSpec(
        "sys_mem_stats", "--sys-mem-stats", None, bool,
        "Gather system memory statistics. Implies --mem-stats.",
        negatable=True,
    ),
)


class _RecordOption(argparse.Action):
    """Append a RawOption for every occurrence of the flag, keeping command-line order."""

    def __init__(self, option_strings: Sequence[str], dest: str, key: str, **kwargs: Any) -> None:
        self.key = key
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        value: OptionValue = self.const if self.nargs == 0 else values
        getattr(namespace, _RAW_DEST).append(RawOption(self.key, value))


class _StrictParser(argparse.ArgumentParser):
    """argparse parser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise argparse.ArgumentError(None, message)


def _typed(convert: Callable[[str], Any], flag: str) -> Callable[[str], Any]:
    """
    Wrap a converter so a bad value raises InvalidOption naming the flag.

    argparse only swallows ValueError/TypeError/ArgumentTypeError from type
    callables, so InvalidOption passes straight through parse_known_args.
    """

    def _convert(raw: str) -> Any:
        try:
            return convert(raw)
        except ValueError:
            raise InvalidOption(flag, raw) from None

    return _convert


def _finite_float(raw: str) -> float:
    """float() without the extras: no nan or inf, no digit separators, no padding."""
    if "_" in raw or raw != raw.strip():
        raise ValueError(raw)
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(raw)
    return value


_CONVERTERS: dict[type, Callable[[str], Any]] = {float: _finite_float}


def _log_level(raw: str) -> str:
    upper = raw.upper()
    if upper not in VALID_LOG_LEVELS:
        raise ValueError(raw)
    return upper


def build_parser() -> argparse.ArgumentParser:
    """Build the bench argument parser. Used for parsing and for --help."""
    parser = _StrictParser(
        prog="bench",
        usage="%(prog)s [options] [<path>...]",
        description=(
            "Run benchmarks. Each <path> is a wildcard pattern selecting benchmark "
            "files; by default every bench/**/*_bench.py file is run."
        ),
        allow_abbrev=False,
        exit_on_error=False,
    )

    runner = parser.add_argument_group("runner options")
    runner.add_argument(
        "--config",
        type=Path,
        default=None,
        dest="config_path",
        help="Path to a YAML runner configuration file.",
    )
    runner.add_argument(
        "--log-level",
        type=_typed(_log_level, "--log-level"),
        default=None,
        dest="log_level",
        help=f"Logging verbosity, one of {', '.join(VALID_LOG_LEVELS)}.",
    )

    run = parser.add_argument_group("run options")
    for spec in FLAGS:
        if spec.kind is bool:
            run.add_argument(
                *spec.option_strings,
                action=_RecordOption,
                key=spec.key,
                nargs=0,
                const=True,
                dest=_RAW_DEST,
                default=argparse.SUPPRESS,
                help=spec.help,
            )
            if spec.negatable:
                run.add_argument(
                    "--no-" + spec.long[2:],
                    action=_RecordOption,
                    key=spec.key,
                    nargs=0,
                    const=False,
                    dest=_RAW_DEST,
                    default=argparse.SUPPRESS,
                    help=argparse.SUPPRESS,
                )
        else:
            run.add_argument(
                *spec.option_strings,
                action=_RecordOption,
                key=spec.key,
                type=_typed(_CONVERTERS.get(spec.kind, spec.kind), spec.long),
                dest=_RAW_DEST,
                default=argparse.SUPPRESS,
                metavar=spec.long[2:].upper(),
                help=spec.help,
            )

    return parser


def _invalid_from_argument_error(err: argparse.ArgumentError, tokens: Sequence[str]) -> InvalidOption:
    """
    Translate an argparse error into InvalidOption.

    argparse reports the flag as e.g. "-d/--duration"; we report the long
    form, plus the value if the user glued one on with "=".
    """
    if err.argument_name is None:
        return InvalidOption(err.message)

    names = err.argument_name.split("/")
    for token in tokens:
        for name in names:
            if token.startswith(name + "="):
                return InvalidOption(names[-1], token[len(name) + 1:])
    return InvalidOption(names[-1])


def _split_unknown(extras: Sequence[str]) -> list[str]:
    """Separate leftover tokens into path patterns, rejecting anything flag-shaped."""
    paths: list[str] = []
    for token in extras:
        if token.startswith("-") and token != "-":
            flag, sep, value = token.partition("=")
            raise InvalidOption(flag, value if sep else None)
        paths.append(token)
    return paths


def parse(tokens: Sequence[str], parser: Optional[argparse.ArgumentParser] = None) -> ParsedArgs:
    """
    Parse command-line tokens into raw options and path patterns.

    A lone "--" ends flag processing: every token after it is a path pattern,
    even if it starts with a dash.

    Raises:
        InvalidOption: Unknown flag or malformed value.
    """
    tokens = list(tokens)
    trailing: list[str] = []
    if "--" in tokens:
        cut = tokens.index("--")
        tokens, trailing = tokens[:cut], tokens[cut + 1:]

    parser = parser or build_parser()
    namespace = argparse.Namespace(**{_RAW_DEST: []})

    try:
        namespace, extras = parser.parse_known_args(tokens, namespace)
    except argparse.ArgumentError as err:
        raise _invalid_from_argument_error(err, tokens) from None

    paths = _split_unknown(extras) + trailing

    return ParsedArgs(
        raw_options=tuple(getattr(namespace, _RAW_DEST)),
        paths=tuple(paths),
        config_path=namespace.config_path,
        log_level=namespace.log_level,
    )
