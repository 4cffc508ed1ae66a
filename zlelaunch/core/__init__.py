"""Core launcher components.

This package contains the data model and the configuration pipeline:
- entry.py: LauncherEntry, one command and its key
- config_parser.py: YAML configuration to entries and reserved keys
- keys.py: Automatic key assignment from the key alphabet
- renderer.py: Renderer base class and stream configuration
"""

from .config import LauncherConfig
from .config_parser import SEED_KEY, load_documents, parse_documents, parse_yaml
from .entry import LauncherEntry
from .errors import (
    ConfigError,
    ConfigShapeError,
    ConfigSyntaxError,
    KeyAlreadyAssignedError,
    KeyReadError,
    KeyspaceExhaustedError,
    LauncherError,
)
from .keys import KEY_ALPHABET, assign_keys
from .renderer import Renderer, RendererConfig

__all__ = [
    "LauncherConfig",
    "SEED_KEY",
    "load_documents",
    "parse_documents",
    "parse_yaml",
    "LauncherEntry",
    "ConfigError",
    "ConfigShapeError",
    "ConfigSyntaxError",
    "KeyAlreadyAssignedError",
    "KeyReadError",
    "KeyspaceExhaustedError",
    "LauncherError",
    "KEY_ALPHABET",
    "assign_keys",
    "Renderer",
    "RendererConfig",
]
