"""
Automatic key assignment.

Keys are handed out from a fixed alphabet ordered by how easy each
letter is to reach, home row first.
"""
from collections.abc import Collection, Sequence

from .entry import LauncherEntry
from .errors import KeyspaceExhaustedError

KEY_ALPHABET = "aoeuhtnsidpyfgcrlqjkxbmwvz"


def assign_keys(entries: Sequence[LauncherEntry], reserved_keys: Collection[str]) -> None:
    """
    Give every entry without a key the next free letter of KEY_ALPHABET.

    A single cursor runs over the alphabet for the whole pass and is never
    rewound, so a letter is handed out at most once even though assigned
    letters are not added to reserved_keys.

    Args:
        entries: Entries to complete, modified in place
        reserved_keys: Letters that must never be assigned

    Raises:
        KeyspaceExhaustedError: If the alphabet runs out
    """
    letters = iter(KEY_ALPHABET)
    for entry in entries:
        # Only keyless entries advance the cursor
        if entry.has_key:
            continue
        key = next((c for c in letters if c not in reserved_keys), None)
        if key is None:
            raise KeyspaceExhaustedError(
                f"Ran out of keys at {entry.command!r}, "
                f"at most {len(KEY_ALPHABET)} letters are available"
            )
        entry.assign_key(key)
