"""Load the target file, search it and print the matches."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from minigrep.core.config import Config
from minigrep.core.errors import FileNotFound, FileNotUtf8, FileUnreadable
from minigrep.core.search import search_lines

logger = logging.getLogger(__name__)


def read_contents(filename: str) -> str:
    """Read the whole file as UTF-8 text, mapping failures to RunError."""
    try:
        return Path(filename).read_bytes().decode("utf-8")
    except FileNotFoundError as e:
        raise FileNotFound(filename, "No such file or directory") from e
    except UnicodeDecodeError as e:
        raise FileNotUtf8(filename, "stream did not contain valid UTF-8") from e
    except OSError as e:
        raise FileUnreadable(filename, e.strerror or str(e)) from e


def run(config: Config, out: TextIO) -> None:
    contents = read_contents(config.filename)
    results = search_lines(config.query, contents, config.case_sensitive)
    logger.debug("%d matching line(s) in %s", len(results), config.filename)
    for line in results:
        print(line, file=out)
