"""
Use cases backing each shell command.
"""

import logging
from collections.abc import Iterator

from .domain import DirectoryEntry, SessionState, sort_listing
from .exceptions import InvalidInputError
from .paths import is_direct_child, parent, resolve
from .ports import FileSystemPort


def _require(argument: str | None) -> str:
    if not argument:
        raise InvalidInputError()
    return argument


class _FileSystemUseCase:
    def __init__(
        self,
        fs: FileSystemPort,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the use case.

        Args:
            fs: Port for filesystem operations
            logger: Logger instance to use for logging
        """
        self._fs = fs
        self._logger = logger or logging.getLogger(__name__)


class UpUseCase:
    """Move the session one level up without checking that the parent exists."""

    def execute(self, state: SessionState) -> str:
        state.current_directory = parent(state.current_directory)
        return state.current_directory


class ChangeDirectoryUseCase(_FileSystemUseCase):
    """Use case for changing the session's current directory."""

    def execute(self, state: SessionState, target: str | None) -> str:
        """
        Change to ``target`` if it exists.

        Args:
            state: Session whose current directory is updated
            target: Absolute or relative path typed by the user

        Returns:
            The new current directory

        Raises:
            InvalidInputError: If the argument is missing or the path does not exist
            OperationError: If the existence check fails otherwise
        """
        path = resolve(state.current_directory, _require(target))
        self._logger.info(f"Changing directory to: {path}")
        self._fs.check_access(path)
        state.current_directory = path
        return path


class ListDirectoryUseCase(_FileSystemUseCase):
    """Use case for listing the current directory."""

    def execute(self, state: SessionState) -> list[DirectoryEntry]:
        """
        List the current directory, directories first, each group sorted.

        Raises:
            NotFoundError: If the current directory no longer exists
            OperationError: If reading fails otherwise
        """
        self._logger.info(f"Listing directory: {state.current_directory}")
        entries = sort_listing(self._fs.read_dir(state.current_directory))
        self._logger.info(f"Found {len(entries)} entries")
        return entries


class ReadFileUseCase(_FileSystemUseCase):
    """Use case for streaming a file's content."""

    def __init__(
        self,
        fs: FileSystemPort,
        chunk_size: int,
        logger: logging.Logger | None = None,
    ):
        super().__init__(fs, logger)
        self._chunk_size = chunk_size

    def execute(self, state: SessionState, target: str | None) -> Iterator[bytes]:
        """
        Return a stream of the file's bytes.

        The argument is validated eagerly; filesystem errors surface while the
        returned iterator is consumed.

        Raises:
            InvalidInputError: If the argument is missing
        """
        path = resolve(state.current_directory, _require(target))
        self._logger.info(f"Reading file: {path}")
        return self._fs.read_chunks(path, self._chunk_size)


class AddFileUseCase(_FileSystemUseCase):
    """Use case for creating an empty file in the current directory."""

    def execute(self, state: SessionState, name: str | None) -> str:
        """
        Create an empty file named ``name`` in the current directory.

        Only bare names are accepted: the resolved path's parent must be the
        current directory itself.

        Returns:
            Absolute path of the created file

        Raises:
            InvalidInputError: If the argument is missing, points elsewhere, or exists
            OperationError: If creation fails otherwise
        """
        path = resolve(state.current_directory, _require(name))
        if not is_direct_child(state.current_directory, path):
            self._logger.warning(f"Refusing to create {path} outside {state.current_directory}")
            raise InvalidInputError()
        self._fs.create_file(path)
        self._logger.info(f"Created file: {path}")
        return path
