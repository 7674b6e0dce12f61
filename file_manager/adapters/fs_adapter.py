"""
Local filesystem adapter implementation for the shell's file operations.
"""

import logging
import os
from collections.abc import Iterator

from typing_extensions import override

from ..domain import DirectoryEntry, EntryKind
from ..exceptions import AlreadyExistsError, from_os_error
from ..ports import FileSystemPort


class LocalFSAdapter(FileSystemPort):
    """Filesystem adapter backed by the host OS."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def check_access(self, path: str) -> None:
        """
        Verify that a path exists.

        Raises:
            NotFoundError: If nothing exists at the path
            OperationError: If the check itself fails
        """
        try:
            _ = os.stat(path)
        except (OSError, ValueError) as e:
            raise from_os_error(e) from e

    @override
    def read_dir(self, path: str) -> list[DirectoryEntry]:
        """
        Read the entries of a directory.

        Only regular files and directories are returned; symlinks are not
        followed and other entry types are skipped.

        Args:
            path: Directory to read

        Returns:
            Entries in enumeration order

        Raises:
            NotFoundError: If the directory does not exist
            OperationError: If reading fails for any other reason
        """
        entries: list[DirectoryEntry] = []
        try:
            with os.scandir(path) as it:
                for item in it:
                    if item.is_dir(follow_symlinks=False):
                        entries.append(DirectoryEntry(item.name, EntryKind.DIRECTORY))
                    elif item.is_file(follow_symlinks=False):
                        entries.append(DirectoryEntry(item.name, EntryKind.FILE))
                    else:
                        self._logger.debug(f"Skipping {item.path}: not a file or directory")
        except (OSError, ValueError) as e:
            raise from_os_error(e) from e
        return entries

    @override
    def read_chunks(self, path: str, chunk_size: int) -> Iterator[bytes]:
        """
        Yield the content of a file sequentially.

        The file is opened on first iteration, so errors surface while the
        caller consumes the stream.

        Raises:
            NotFoundError: If the file does not exist
            OperationError: If opening or reading fails
        """
        try:
            with open(path, "rb") as fh:
                while True:
                    chunk = fh.read(chunk_size)
                    if not chunk:
                        break
                    yield chunk
        except (OSError, ValueError) as e:
            raise from_os_error(e) from e

    @override
    def create_file(self, path: str) -> None:
        """
        Create an empty file if nothing exists at the path.

        Raises:
            AlreadyExistsError: If the path already exists
            OperationError: If creation fails
        """
        if os.path.lexists(path):
            raise AlreadyExistsError(f"File already exists: {path}")
        try:
            # append mode never truncates; the handle is only needed for creation
            with open(path, "a"):
                pass
        except (OSError, ValueError) as e:
            raise from_os_error(e) from e
        self._logger.debug(f"Created file {path}")
