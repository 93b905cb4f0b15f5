"""Exception hierarchy for argument parsing and search runs."""

from __future__ import annotations


class MinigrepError(Exception):
    pass


# -- Argument parsing --


class ConfigError(MinigrepError):
    """The raw argument list could not be turned into a Config."""


class InsufficientArguments(ConfigError):
    pass


class HelpRequested(ConfigError):
    """Usage was printed on request. Not a failure: the caller exits cleanly."""


class InvalidPositionalArgument(ConfigError):
    pass


class MalformedOptions(ConfigError):
    pass


# -- Running a search --


class RunError(MinigrepError):
    """The target file could not be loaded."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"{filename}: {reason}")
        self.filename = filename
        self.reason = reason


class FileNotFound(RunError):
    pass


class FileUnreadable(RunError):
    pass


class FileNotUtf8(RunError):
    pass
