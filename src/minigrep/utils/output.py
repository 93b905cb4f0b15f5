"""Console helpers for diagnostics."""

from __future__ import annotations

from rich.console import Console

error_console = Console(stderr=True)


def problem(prefix: str, msg: str) -> None:
    """Print a one-line diagnostic to stderr, verbatim."""
    error_console.print(f"{prefix}: {msg}", markup=False, highlight=False, soft_wrap=True)


def parse_problem(msg: str) -> None:
    problem("Problem parsing arguments", msg)


def application_error(msg: str) -> None:
    problem("Application error", msg)
