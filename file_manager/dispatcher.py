"""
Command dispatcher: routes one input line to its handler.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from .domain import CommandLine, SessionState
from .error_mapper import error_message
from .exceptions import FileManagerError
from .usecases import (
    AddFileUseCase,
    ChangeDirectoryUseCase,
    ListDirectoryUseCase,
    ReadFileUseCase,
    UpUseCase,
)

UP = "up"
CD = "cd"
LS = "ls"
CAT = "cat"
ADD = "add"


class OutputPort(Protocol):
    """Sink for everything a command prints."""

    def text(self, message: str) -> None: ...

    def raw(self, chunk: bytes) -> None: ...


class CommandDispatcher:
    """Parse a line and run the matching command to completion.

    Unknown keywords are ignored without output.
    """

    def __init__(
        self,
        state: SessionState,
        output: OutputPort,
        up: UpUseCase,
        cd: ChangeDirectoryUseCase,
        ls: ListDirectoryUseCase,
        cat: ReadFileUseCase,
        add: AddFileUseCase,
        logger: logging.Logger | None = None,
    ):
        self._state = state
        self._output = output
        self._up_uc = up
        self._cd_uc = cd
        self._ls_uc = ls
        self._cat_uc = cat
        self._add_uc = add
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[str | None], None]] = {
            UP: self._up,
            CD: self._cd,
            LS: self._ls,
            CAT: self._cat,
            ADD: self._add,
        }

    @property
    def keywords(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, raw: str) -> bool:
        """
        Run one command line.

        Args:
            raw: Line as typed by the user

        Returns:
            True if the keyword was recognised, False if the line was ignored
        """
        cmd = CommandLine(raw)
        handler = self._handlers.get(cmd.keyword)
        if handler is None:
            self._logger.debug(f"Ignoring unknown command: {cmd.keyword!r}")
            return False
        self._logger.debug(f"Dispatching {cmd!r}")
        handler(cmd.argument)
        return True

    def print_current_directory(self) -> None:
        self._output.text(f"You are currently in, {self._state.current_directory}")

    def _report(self, exc: FileManagerError) -> None:
        self._logger.warning(f"Command failed: {exc}")
        self._output.text(error_message(exc))

    def _up(self, _argument: str | None) -> None:
        self._up_uc.execute(self._state)
        self.print_current_directory()

    def _cd(self, argument: str | None) -> None:
        try:
            self._cd_uc.execute(self._state, argument)
        except FileManagerError as e:
            self._report(e)
        self.print_current_directory()

    def _ls(self, _argument: str | None) -> None:
        try:
            entries = self._ls_uc.execute(self._state)
            self._output.text("\n".join(entry.render() for entry in entries))
        except FileManagerError as e:
            self._report(e)
        self.print_current_directory()

    def _cat(self, argument: str | None) -> None:
        try:
            for chunk in self._cat_uc.execute(self._state, argument):
                self._output.raw(chunk)
        except FileManagerError as e:
            # the stream never reached its end, so no prompt follows
            self._report(e)
            return
        self.print_current_directory()

    def _add(self, argument: str | None) -> None:
        try:
            self._add_uc.execute(self._state, argument)
        except FileManagerError as e:
            self._report(e)
        self.print_current_directory()
