"""Turn a raw argument list into a validated search Config.

Options are recognized anywhere in the argument list, while the last two
tokens are always read positionally as QUERY and FILENAME.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TextIO

import click
from pydantic import BaseModel, ConfigDict

from minigrep.core.errors import (
    HelpRequested,
    InsufficientArguments,
    InvalidPositionalArgument,
    MalformedOptions,
)

logger = logging.getLogger(__name__)

OPTION_PREFIX = "-"

# (short, long, description)
OPTIONS: list[tuple[str, str, str]] = [
    ("i", "insensitive", "set insensitive mode"),
    ("h", "help", "print this help menu"),
]


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    filename: str
    case_sensitive: bool = True


def usage(program_name: str) -> str:
    """Render the help text shown for -h/--help."""
    rows = [(f"-{short}, --{long}", desc) for short, long, desc in OPTIONS]
    width = max(len(flags) for flags, _ in rows)
    body = "\n".join(f"    {flags.ljust(width)}   {desc}" for flags, desc in rows)
    return f"Usage: {program_name} [options] QUERY FILENAME\n\nOptions:\n{body}\n"


def _option_command() -> click.Command:
    # Flags are counted so a repeated flag can be rejected; the argument
    # swallows the positional tokens, which parse_config reads by position.
    params: list[click.Parameter] = [
        click.Option([f"-{short}", f"--{long}"], count=True, help=desc)
        for short, long, desc in OPTIONS
    ]
    params.append(click.Argument(["tokens"], nargs=-1))
    return click.Command("minigrep", params=params, add_help_option=False)


def _scan_options(program_name: str, tokens: Sequence[str]) -> set[str]:
    """Return the long names of the options present in tokens."""
    try:
        ctx = _option_command().make_context(
            program_name, list(tokens), resilient_parsing=False
        )
    except click.UsageError as e:
        raise MalformedOptions(e.format_message()) from e

    present: set[str] = set()
    for _, long, _ in OPTIONS:
        count = ctx.params[long]
        if count > 1:
            raise MalformedOptions(f"option --{long} given more than once")
        if count:
            present.add(long)
    return present


def parse_config(args: Sequence[str], out: TextIO) -> Config:
    """Build a Config from args, where args[0] is the program name.

    Raises a ConfigError subclass on failure. On -h/--help the usage text is
    written to out and HelpRequested is raised.
    """
    if len(args) < 3:
        raise InsufficientArguments("not enough arguments")

    present = _scan_options(args[0], args[1:])

    if "help" in present:
        out.write(usage(args[0]))
        raise HelpRequested("help page displayed")

    filename = args[-1]
    if filename.startswith(OPTION_PREFIX):
        raise InvalidPositionalArgument("arguments should be [options] QUERY FILENAME")

    query = args[-2]
    if query.startswith(OPTION_PREFIX):
        raise InvalidPositionalArgument("arguments should be [options] QUERY FILENAME")

    config = Config(
        query=query,
        filename=filename,
        case_sensitive="insensitive" not in present,
    )
    logger.debug("Parsed %r", config)
    return config
