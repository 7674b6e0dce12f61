"""Map filesystem failures onto the two messages the user can see."""

from .exceptions import FileManagerError, InvalidInputError

INVALID_INPUT_MESSAGE = "Invalid input"


def error_message(exc: FileManagerError) -> str:
    """Return the user-facing text for a command failure.

    Input errors (missing argument, missing or already existing path, target
    outside the current directory) share one fixed message; everything else
    is reported with the underlying error's own text.
    """
    if isinstance(exc, InvalidInputError):
        return INVALID_INPUT_MESSAGE
    return str(exc)
