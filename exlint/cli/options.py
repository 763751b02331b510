"""
Command-line option parsing.

The switch table is turned into a click command that is only used to
parse; dispatching happens in exlint.cli.main. Only switches that were
actually given on the command line end up in ParsedOptions, so later
configuration layers can tell them apart from defaults.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple

import click
from click.core import ParameterSource

from exlint.core.exceptions import OptionParseError

logger = logging.getLogger(__name__)

PROG_NAME = "exlint"

_DECIMAL = re.compile(r"-?\d+", re.ASCII)

SWITCHES = {
    "all": bool,
    "all_priorities": bool,
    "checks": str,
    "config_name": str,
    "crash_on_error": bool,
    "format": str,
    "help": bool,
    "ignore_checks": str,
    "min_priority": int,
    "read_from_stdin": bool,
    "strict": bool,
    "verbose": bool,
    "version": bool,
}

ALIASES = {
    "a": "all",
    "A": "all_priorities",
    "c": "checks",
    "C": "config_name",
    "h": "help",
    "i": "ignore_checks",
    "v": "version",
}

SWITCH_HELP = {
    "all": "Show all issues, not only the most important ones",
    "all_priorities": "Show issues of every priority",
    "checks": "Only run checks whose name matches (comma-separated)",
    "config_name": "Use the named configuration profile",
    "crash_on_error": "Abort when a check crashes",
    "format": "Output format: oneline or json",
    "help": "Show help",
    "ignore_checks": "Skip checks whose name matches (comma-separated)",
    "min_priority": "Minimum priority of reported issues",
    "read_from_stdin": "Read the source to analyze from stdin",
    "strict": "Report low priority issues too",
    "verbose": "Enable verbose output",
    "version": "Show the version",
}


@dataclass(frozen=True)
class ParsedOptions:
    """Switches given on the command line plus the positional arguments."""

    switches: Dict[str, Any] = field(default_factory=dict)
    args: Tuple[str, ...] = ()


class DecimalInt(click.ParamType):
    """An optionally signed run of decimal digits, nothing else."""

    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        if not _DECIMAL.fullmatch(value):
            self.fail(f"{value!r} is not a decimal integer.", param, ctx)
        return int(value)


DECIMAL_INT = DecimalInt()


def _aliases_for(name: str):
    return [f"-{short}" for short, long_name in ALIASES.items() if long_name == name]


def _build_option(name: str, kind: type) -> click.Option:
    dashed = name.replace("_", "-")
    decls = [name]

    if kind is bool:
        decls.append(f"--{dashed}/--no-{dashed}")
    else:
        decls.append(f"--{dashed}")

    if dashed != name:
        decls.append(f"--{name}")

    decls.extend(_aliases_for(name))

    if kind is bool:
        return click.Option(decls, default=False, help=SWITCH_HELP[name])
    param_type = DECIMAL_INT if kind is int else kind
    return click.Option(decls, type=param_type, default=None, help=SWITCH_HELP[name])


def build_command() -> click.Command:
    """Build the click command describing the accepted command line."""
    params = [_build_option(name, kind) for name, kind in SWITCHES.items()]
    params.append(click.Argument(["args"], nargs=-1))

    return click.Command(
        PROG_NAME,
        params=params,
        add_help_option=False,
    )


_COMMAND = build_command()


def parse(argv: Sequence[str]) -> ParsedOptions:
    """
    Parse raw command-line arguments.

    Args:
        argv: Arguments without the program name.

    Returns:
        ParsedOptions with the explicitly given switches.

    Raises:
        OptionParseError: On an unknown switch or a malformed value.
    """
    try:
        ctx = _COMMAND.make_context(PROG_NAME, list(argv))
    except click.ClickException as e:
        raise OptionParseError(
            e.format_message(),
            details={"argv": list(argv)},
        ) from e

    switches = {
        name: value
        for name, value in ctx.params.items()
        if name != "args"
        and ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE
    }
    args = tuple(ctx.params.get("args") or ())

    logger.debug(f"Parsed switches {switches} and arguments {args}")
    return ParsedOptions(switches=switches, args=args)


def switch_usage() -> str:
    """Help text for the switches, one per line."""
    lines = []
    for name, kind in SWITCHES.items():
        flags = ", ".join(_aliases_for(name) + [f"--{name.replace('_', '-')}"])
        if kind is not bool:
            flags += " INTEGER" if kind is int else " TEXT"
        lines.append(f"  {flags:<32} {SWITCH_HELP[name]}")
    return "\n".join(lines)
