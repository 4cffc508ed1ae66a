import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import BinaryIO, Optional, TextIO

from .entry import LauncherEntry


@dataclass
class RendererConfig:
    """Streams a renderer talks to.

    Attributes:
        output: Menu and terminal control codes (stderr)
        input: Raw keystrokes, None for the process stdin looked up on read
        result: Selected commands for the calling shell (stdout)
    """
    output: TextIO = field(default_factory=lambda: sys.stderr)
    input: Optional[BinaryIO] = None
    result: TextIO = field(default_factory=lambda: sys.stdout)


class Renderer(ABC):

    def __init__(self, config: Optional[RendererConfig] = None):
        self.config = config or RendererConfig()

    @abstractmethod
    def run(self, entries: list[LauncherEntry]) -> None:
        pass

    def emit(self, command: str, terminator: str = "\n") -> None:
        self.config.result.write(command + terminator)
        self.config.result.flush()
