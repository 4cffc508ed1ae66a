import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_EDITOR = "vim"
EDITOR_VARIABLE = "EDITOR"
EDIT_KEY = "z"


@dataclass
class LauncherConfig:
    editor: str = DEFAULT_EDITOR
    edit_key: str = EDIT_KEY

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LauncherConfig":
        """Build the configuration from environment variables."""
        environ = os.environ if environ is None else environ
        return cls(editor=environ.get(EDITOR_VARIABLE, DEFAULT_EDITOR))

    def edit_command(self, filename: str) -> str:
        """Shell command that opens the configuration file in the editor."""
        return f"{self.editor} {filename}"
