"""
Dependency injection container for wiring a shell session.
"""

import logging
from collections.abc import Callable
from typing import Any, BinaryIO

from rich.console import Console

from .adapters.fs_adapter import LocalFSAdapter
from .dispatcher import CommandDispatcher
from .domain import SessionState
from .ports import FileSystemPort
from .settings import Settings
from .shell import ConsoleOutput, Shell
from .usecases import (
    AddFileUseCase,
    ChangeDirectoryUseCase,
    ListDirectoryUseCase,
    ReadFileUseCase,
    UpUseCase,
)


class DependencyContainer:
    """
    Container for managing the session's dependencies using dependency injection.
    """

    def __init__(
        self,
        settings: Settings,
        console: Console | None = None,
        binary: BinaryIO | None = None,
        read_line: Callable[[], str] = input,
    ):
        self._settings = settings
        self._console = console
        self._binary = binary
        self._read_line = read_line
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_session_state(self) -> SessionState:
        if "session_state" not in self._instances:
            self._instances["session_state"] = SessionState(
                current_directory=self._settings.start_directory,
                user_name=self._settings.user_name,
            )
        return self._instances["session_state"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get filesystem adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFSAdapter(self._logger)
        return self._instances["file_system"]

    def get_output(self) -> ConsoleOutput:
        if "output" not in self._instances:
            console = self._console or Console(highlight=False, soft_wrap=True)
            self._instances["output"] = ConsoleOutput(console, self._binary)
        return self._instances["output"]

    def get_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher with all command use cases injected.

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            fs = self.get_file_system()
            self._instances["dispatcher"] = CommandDispatcher(
                state=self.get_session_state(),
                output=self.get_output(),
                up=UpUseCase(),
                cd=ChangeDirectoryUseCase(fs, self._logger),
                ls=ListDirectoryUseCase(fs, self._logger),
                cat=ReadFileUseCase(fs, self._settings.chunk_size, self._logger),
                add=AddFileUseCase(fs, self._logger),
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def get_shell(self) -> Shell:
        if "shell" not in self._instances:
            self._instances["shell"] = Shell(
                state=self.get_session_state(),
                dispatcher=self.get_dispatcher(),
                output=self.get_output(),
                read_line=self._read_line,
                logger=self._logger,
            )
        return self._instances["shell"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
