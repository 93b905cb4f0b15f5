"""Typer app: the minigrep command."""

from __future__ import annotations

import sys

import typer

from minigrep.core.config import parse_config
from minigrep.core.errors import ConfigError, HelpRequested, RunError
from minigrep.core.runner import run
from minigrep.utils.output import application_error, parse_problem

app = typer.Typer(
    name="minigrep",
    help="Print the lines of FILENAME that contain QUERY.",
    add_completion=False,
)


# Option recognition and positional extraction belong to parse_config, so
# Click forwards every token untouched and its own --help is disabled.
@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def main(ctx: typer.Context) -> None:
    """Print the lines of FILENAME that contain QUERY."""
    program_name = ctx.find_root().info_name or "minigrep"
    args = [program_name, *ctx.args]

    try:
        config = parse_config(args, sys.stdout)
    except HelpRequested:
        raise typer.Exit(0)
    except ConfigError as e:
        parse_problem(str(e))
        raise typer.Exit(1)

    try:
        run(config, sys.stdout)
    except RunError as e:
        application_error(str(e))
        raise typer.Exit(1)
