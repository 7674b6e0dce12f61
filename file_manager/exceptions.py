"""
Custom exceptions for the file manager.
"""


class FileManagerError(Exception):
    """Base exception class for file manager errors."""

    pass


class InvalidInputError(FileManagerError):
    """Exception raised when a command's input cannot be acted upon."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class NotFoundError(InvalidInputError):
    """Exception raised when a required path does not exist."""

    pass


class AlreadyExistsError(InvalidInputError):
    """Exception raised when a path exists where absence was required."""

    pass


class OperationError(FileManagerError):
    """Exception raised for any other filesystem failure.

    The message is the underlying OS error text, surfaced to the user verbatim.
    """

    pass


class ConfigurationError(FileManagerError):
    """Exception raised for configuration errors."""

    pass


def from_os_error(exc: OSError | ValueError) -> FileManagerError:
    """Translate an OS-level error into the matching tagged variant.

    ``ValueError`` covers paths the OS rejects outright, such as an embedded
    null byte.
    """
    if isinstance(exc, FileNotFoundError):
        return NotFoundError(str(exc))
    if isinstance(exc, FileExistsError):
        return AlreadyExistsError(str(exc))
    return OperationError(str(exc))
