import logging
import sys
import termios
import tty
from typing import BinaryIO, Optional

from ..core.entry import LauncherEntry
from ..core.errors import KeyReadError
from ..core.renderer import Renderer, RendererConfig

logger = logging.getLogger(__name__)

# Continuation lines start under the command column
CONTINUATION_INDENT = "    "


class TerminalRenderer(Renderer):
    """Interactive menu drawn on stderr and erased after one keypress."""

    def __init__(self, config: Optional[RendererConfig] = None):
        super().__init__(config)

        # Terminal control codes
        self.terminal_codes = {
            "reset": "\033[0m",
            "key_color": "\033[33m\033[1m",  # Bold yellow
            "hide_cursor": "\033[?25l",
            "show_cursor": "\033[?25h",
            "clear_line": "\033[2K",
            "previous_line": "\033[F",
            "first_column": "\033[G",
        }

    def _write(self, text: str) -> None:
        self.config.output.write(text)
        self.config.output.flush()

    def render_frame(self, entries: list[LauncherEntry]) -> int:
        """
        Draw the menu, one entry per block of lines.

        Args:
            entries: Entries with keys assigned

        Returns:
            int: Number of terminal lines drawn
        """
        line_count = 0
        parts = []
        for entry in entries:
            line_count += entry.line_count
            command = entry.command.replace("\n", "\n" + CONTINUATION_INDENT)
            parts.append(
                f"\n {self.terminal_codes['key_color']}{entry.key}"
                f"{self.terminal_codes['reset']} {command}"
            )
        self._write("".join(parts))
        return line_count

    def read_key(self) -> str:
        """
        Block until exactly one byte arrives on the input stream.

        A terminal is switched to cbreak mode for the read so the key does
        not wait for Enter; a pipe is read as is.

        Returns:
            str: The pressed key

        Raises:
            KeyReadError: If the stream is closed or unreadable
        """
        stream = self._input_stream()
        old_settings = None
        try:
            if stream.isatty():
                fd = stream.fileno()
                old_settings = termios.tcgetattr(fd)
                tty.setcbreak(fd)
            data = stream.read(1)
        except (OSError, termios.error) as e:
            raise KeyReadError(f"Could not read key from stdin: {e}") from e
        finally:
            if old_settings is not None:
                self._restore_terminal(stream, old_settings)

        if not data:
            raise KeyReadError("Could not read key from stdin")
        # One byte maps to one character, like the keys in KEY_ALPHABET
        return chr(data[0])

    def _input_stream(self) -> BinaryIO:
        if self.config.input is not None:
            return self.config.input
        # Python sets sys.stdin to None when file descriptor 0 is closed
        if sys.stdin is None:
            raise KeyReadError("Could not read key from stdin: stdin is closed")
        return sys.stdin.buffer

    @staticmethod
    def _restore_terminal(stream: BinaryIO, old_settings: list) -> None:
        try:
            termios.tcsetattr(stream.fileno(), termios.TCSADRAIN, old_settings)
        except (OSError, termios.error) as e:
            raise KeyReadError(f"Could not restore terminal settings: {e}") from e

    def erase(self, line_count: int) -> None:
        """Clear the menu lines bottom-up and show the cursor again."""
        codes = self.terminal_codes
        self._write(
            (codes["clear_line"] + codes["previous_line"]) * max(line_count - 1, 0)
            + codes["clear_line"]
            + codes["first_column"]
            + codes["show_cursor"]
        )

    def select(self, entries: list[LauncherEntry]) -> Optional[LauncherEntry]:
        """
        Show the menu, wait for a key and erase the menu again.

        The cursor is restored on every path out, including a failed read.

        Returns:
            LauncherEntry: The entry bound to the pressed key, or None
        """
        self._write(self.terminal_codes["hide_cursor"])
        line_count = 0
        try:
            line_count = self.render_frame(entries)
            key = self.read_key()
        finally:
            self.erase(line_count)

        logger.debug("Pressed %r", key)
        return next((entry for entry in entries if entry.key == key), None)

    def run(self, entries: list[LauncherEntry]) -> None:
        entry = self.select(entries)
        if entry is not None:
            self.emit(entry.command)
