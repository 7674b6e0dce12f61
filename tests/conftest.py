"""
Pytest configuration and shared fixtures.
"""

import io
import os
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.domain import SessionState
from file_manager.settings import Settings


@pytest.fixture
def temp_directory(tmp_path):
    """
    Create a temporary directory tree for testing file operations.

    Layout::

        b.txt        "bravo"
        a.txt        "alpha"
        z/           (directory)
        z/inner.md   "# inner"

    Returns:
        Absolute path to the temporary directory
    """
    (tmp_path / "b.txt").write_text("bravo")
    (tmp_path / "a.txt").write_text("alpha")
    (tmp_path / "z").mkdir()
    (tmp_path / "z" / "inner.md").write_text("# inner")
    return os.fspath(tmp_path)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def state(temp_directory):
    return SessionState(current_directory=temp_directory, user_name="tester")


@pytest.fixture
def settings(temp_directory):
    return Settings(user_name="tester", start_directory=temp_directory, chunk_size=4)


class RecordingOutput:
    """Collects text lines and raw bytes written by the dispatcher."""

    def __init__(self):
        self.lines: list[str] = []
        self.data = b""

    def text(self, message: str) -> None:
        self.lines.append(message)

    def raw(self, chunk: bytes) -> None:
        self.data += chunk


@pytest.fixture
def recording_output():
    return RecordingOutput()


@pytest.fixture
def console_buffers():
    """A plain rich console writing to a string buffer plus a bytes buffer."""
    text = io.StringIO()
    console = Console(file=text, highlight=False, color_system=None, width=200)
    return console, text, io.BytesIO()


def line_reader(*lines: str):
    """Return a read_line callable that raises EOFError once lines run out."""
    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


@pytest.fixture
def make_reader():
    return line_reader
