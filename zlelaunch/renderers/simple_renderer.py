from ..core.entry import LauncherEntry
from ..core.renderer import Renderer


class SimpleRenderer(Renderer):
    """Bulk output: every command null-terminated, no menu and no keypress."""

    def run(self, entries: list[LauncherEntry]) -> None:
        for entry in entries:
            self.emit(entry.command, terminator="\0")
