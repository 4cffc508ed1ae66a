from dataclasses import dataclass
from typing import Optional

from .errors import KeyAlreadyAssignedError


@dataclass
class LauncherEntry:
    """An entry in the launcher menu.

    Attributes:
        command: Shell command, may span several lines
        key: Key that selects the command, None until assigned
    """
    command: str
    key: Optional[str] = None

    def __post_init__(self):
        if self.key is not None:
            self._check_key(self.key)

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"Key must be a single character, got {key!r}")

    @property
    def has_key(self) -> bool:
        return self.key is not None

    @property
    def line_count(self) -> int:
        """Number of terminal lines the entry occupies in the menu."""
        return self.command.count("\n") + 1

    def assign_key(self, key: str) -> None:
        """Set the key. An entry's key can only be set once."""
        self._check_key(key)
        if self.key is not None:
            raise KeyAlreadyAssignedError(
                f"Entry {self.command!r} already has key {self.key!r}"
            )
        self.key = key
