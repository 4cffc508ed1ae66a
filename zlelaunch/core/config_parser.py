"""
Configuration parser for launcher entries.

This module turns the YAML configuration file into launcher entries.
The file holds a list where each element is either a plain command
string or a mapping with a required ``command`` and an optional ``key``:

    - cargo test --examples --frozen
    - key: c
      command: cargo clippy --no-deps

Several YAML documents separated by ``---`` are read in order and their
entries concatenated.
"""
import logging
import re
from typing import Any, Optional

import yaml

from .config import EDIT_KEY
from .entry import LauncherEntry
from .errors import ConfigShapeError, ConfigSyntaxError

logger = logging.getLogger(__name__)

BOOL_TAG = "tag:yaml.org,2002:bool"


class ConfigLoader(yaml.SafeLoader):
    """SafeLoader that only reads true/false as booleans.

    Words like yes, no, on and off stay strings, so ``- on`` is a command
    and ``key: no`` selects the n key.
    """


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ConfigLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)

# Always reserved so the edit entry can claim it
SEED_KEY = EDIT_KEY

COMMAND_FIELD = "command"
KEY_FIELD = "key"


def load_documents(text: str) -> list[Any]:
    """
    Load every YAML document in the configuration text.

    Args:
        text: Raw configuration file contents

    Returns:
        list: One parsed value per document, empty for empty text

    Raises:
        ConfigSyntaxError: If the text is not valid YAML
    """
    try:
        return list(yaml.load_all(text, Loader=ConfigLoader))
    except yaml.YAMLError as e:
        raise ConfigSyntaxError(f"Failed to parse YAML configuration: {e}") from e


def parse_documents(docs: list[Any]) -> tuple[list[LauncherEntry], list[str]]:
    """
    Parse loaded YAML documents into launcher entries.

    Args:
        docs: Documents as returned by load_documents

    Returns:
        tuple: The entries in document order, and the reserved keys
        (the seed key followed by every accepted explicit key)

    Raises:
        ConfigShapeError: If a document is not a list, or an element is
            neither a string nor a mapping
    """
    entries: list[LauncherEntry] = []
    reserved_keys: list[str] = [SEED_KEY]

    for doc in docs:
        # An empty document has nothing to contribute
        if doc is None:
            continue
        if not isinstance(doc, list):
            raise ConfigShapeError(f"Expected array, found {doc!r}")

        for idx, element in enumerate(doc):
            if isinstance(element, str):
                entries.append(LauncherEntry(element))
            elif isinstance(element, dict):
                entry = _parse_mapping(idx, element, reserved_keys)
                if entry is not None:
                    entries.append(entry)
            else:
                raise ConfigShapeError(
                    f"Expected string or mapping at index {idx}, found: {element!r}"
                )

    logger.debug("Parsed %d entries, reserved keys: %s", len(entries), "".join(reserved_keys))
    return entries, reserved_keys


def _parse_mapping(idx: int, element: dict[Any, Any], reserved_keys: list[str]) -> Optional[LauncherEntry]:
    """Parse a mapping element, reserving its explicit key if it is free."""
    if COMMAND_FIELD not in element:
        logger.warning(
            'Missing required key "%s" at index %d, found %r', COMMAND_FIELD, idx, element
        )
        return None

    command = element[COMMAND_FIELD]
    if not isinstance(command, str):
        raise ConfigShapeError(
            f'Expected string for "{COMMAND_FIELD}" at index {idx}, found: {command!r}'
        )

    entry = LauncherEntry(command)
    if KEY_FIELD in element:
        key_value = element[KEY_FIELD]
        if not isinstance(key_value, str) or not key_value:
            raise ConfigShapeError(
                f'Expected non-empty string for "{KEY_FIELD}" at index {idx}, found: {key_value!r}'
            )
        key = key_value[0]
        # First explicit claim wins, later ones fall back to automatic keys
        if key not in reserved_keys:
            entry.assign_key(key)
            reserved_keys.append(key)
        else:
            logger.debug("Key %r at index %d is already reserved", key, idx)

    return entry


def parse_yaml(text: str) -> tuple[list[LauncherEntry], list[str]]:
    """Load and parse configuration text in one step."""
    return parse_documents(load_documents(text))
