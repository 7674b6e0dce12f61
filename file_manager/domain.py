import os
from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: EntryKind

    def render(self) -> str:
        prefix = "d" if self.kind is EntryKind.DIRECTORY else "-"
        return f"{prefix} {self.name}"


@dataclass
class SessionState:
    """Mutable state of one shell session."""

    current_directory: str
    user_name: str


class CommandLine:
    """Domain-level command typed by the user."""

    keyword: str
    argument: str | None

    def __init__(self, raw: str):
        # only the first token after the keyword is used; no quoting support
        parts = raw.split()
        self.keyword = parts[0] if parts else ""
        self.argument = parts[1] if len(parts) > 1 else None

    def __repr__(self) -> str:
        return f"CommandLine(keyword={self.keyword!r}, argument={self.argument!r})"


def sort_listing(entries: list[DirectoryEntry]) -> list[DirectoryEntry]:
    """Directories first, then files, each group in ascending name order."""
    dirs = sorted(
        (e for e in entries if e.kind is EntryKind.DIRECTORY), key=lambda e: e.name
    )
    files = sorted(
        (e for e in entries if e.kind is EntryKind.FILE), key=lambda e: e.name
    )
    return dirs + files


def printable(text: str) -> str:
    """Replace undecodable filename bytes with backslash escapes."""
    return os.fsencode(text).decode("utf-8", errors="backslashreplace")
