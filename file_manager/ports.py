from collections.abc import Iterator
from typing import Protocol

from .domain import DirectoryEntry


class FileSystemPort(Protocol):
    """Port for the host filesystem operations the shell relies on.

    Implementations raise the tagged errors from ``file_manager.exceptions``
    (``NotFoundError``, ``AlreadyExistsError``, ``OperationError``) rather than
    raw ``OSError``.
    """

    def check_access(self, path: str) -> None: ...

    def read_dir(self, path: str) -> list[DirectoryEntry]: ...

    def read_chunks(self, path: str, chunk_size: int) -> Iterator[bytes]: ...

    def create_file(self, path: str) -> None: ...
