"""
Interactive session shell: banner, read loop and shutdown.
"""

import logging
import sys
from collections.abc import Callable
from typing import BinaryIO

from rich.console import Console

from .dispatcher import CommandDispatcher
from .domain import SessionState, printable


class ConsoleOutput:
    """Write command output through a rich console, bytes to a binary stream."""

    def __init__(self, console: Console, binary: BinaryIO | None = None):
        self._console = console
        self._binary = binary

    def notice(self, message: str) -> None:
        self._console.print(
            printable(message),
            style="bold",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def text(self, message: str) -> None:
        # written verbatim: rich would strip control codes and expand tabs in names
        _ = self._console.file.write(printable(message) + "\n")
        self._console.file.flush()

    def raw(self, chunk: bytes) -> None:
        binary = self._binary or sys.stdout.buffer
        self._console.file.flush()
        _ = binary.write(chunk)
        binary.flush()


class Shell:
    """Line-driven file manager session."""

    def __init__(
        self,
        state: SessionState,
        dispatcher: CommandDispatcher,
        output: ConsoleOutput,
        read_line: Callable[[], str] = input,
        logger: logging.Logger | None = None,
    ):
        self._state = state
        self._dispatcher = dispatcher
        self._output = output
        self._read_line = read_line
        self._logger = logger or logging.getLogger(__name__)

    @property
    def welcome_message(self) -> str:
        return f"Welcome to the File Manager, {self._state.user_name}!"

    @property
    def goodbye_message(self) -> str:
        return f"Thank you for using File Manager, {self._state.user_name}, goodbye!"

    def run(self) -> int:
        """
        Run the session until interrupted or input ends.

        Returns:
            Process exit status
        """
        self._output.notice(self.welcome_message)
        self._dispatcher.print_current_directory()

        while True:
            try:
                line = self._read_line()
                self._dispatcher.dispatch(line)
            except (KeyboardInterrupt, EOFError) as e:
                self._logger.info(f"Session ending ({type(e).__name__})")
                break
            except Exception as e:
                # a failed command never ends the session
                self._logger.error(f"Unexpected error while handling input: {e}")
                self._output.text(str(e))

        self._output.notice(f"\n{self.goodbye_message}")
        return 0
