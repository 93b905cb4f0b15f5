"""Shared fixtures: sample text files."""

from __future__ import annotations

from pathlib import Path

import pytest

POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """Write the sample poem to a temp file."""
    path = tmp_path / "poem.txt"
    path.write_text(POEM)
    return path


@pytest.fixture
def binary_file(tmp_path: Path) -> Path:
    """A file whose contents are not valid UTF-8."""
    path = tmp_path / "blob.bin"
    path.write_bytes(b"to\xff\xfe\n")
    return path
