"""
YAML-configured command launcher for shell key bindings.

Install and add to .zshrc:

    ctrl_e_menu() { zle -U "$(read -ek | zlelaunch .ctrl_e.yml)
    " }
    zle -N ctrl_e_menu
    bindkey '^e' ctrl_e_menu

Pressing <ctrl>+e lists the configured commands on stderr, each with a
key. Pressing a key prints the matching command on stdout, which zle
pushes onto the command line.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from . import __version__
from .core.config import LauncherConfig
from .core.config_parser import load_documents, parse_documents
from .core.entry import LauncherEntry
from .core.errors import LauncherError
from .core.keys import assign_keys
from .core.log import init_logging
from .core.renderer import Renderer, RendererConfig
from .renderers.simple_renderer import SimpleRenderer
from .renderers.terminal_renderer import TerminalRenderer

logger = logging.getLogger(__name__)


def read_config(filename: str) -> list[Any]:
    """
    Read and load the configuration file.

    A file that cannot be read counts as an empty configuration, so the
    edit entry is still offered to create it.
    """
    try:
        text = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read file, create?")
        logger.debug("Reading %s failed: %s", filename, e)
        return []
    return load_documents(text)


def build_entries(
    filename: str, config: LauncherConfig
) -> tuple[list[LauncherEntry], list[str]]:
    """Parse the configuration and append the edit entry last."""
    entries, reserved_keys = parse_documents(read_config(filename))
    entries.append(LauncherEntry(config.edit_command(filename), key=config.edit_key))
    return entries, reserved_keys


def launch(
    filename: str,
    print0: bool = False,
    config: Optional[LauncherConfig] = None,
    renderer_config: Optional[RendererConfig] = None,
) -> None:
    """
    Run one launcher cycle.

    Args:
        filename: Path to the YAML configuration
        print0: Print every command null-terminated instead of the menu
        config: Launcher settings, read from the environment by default
        renderer_config: Streams to use, the process streams by default

    Raises:
        LauncherError: On any fatal condition
    """
    config = config or LauncherConfig.from_env()
    entries, reserved_keys = build_entries(filename, config)

    renderer: Renderer
    if print0:
        # Keys are irrelevant in bulk mode
        renderer = SimpleRenderer(renderer_config)
    else:
        assign_keys(entries, reserved_keys)
        renderer = TerminalRenderer(renderer_config)
    renderer.run(entries)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zlelaunch",
        description="Pick a shell command from a YAML list with a single keypress",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        help="YAML file listing the commands",
    )
    parser.add_argument(
        "--print0",
        action="store_true",
        help="Print every command terminated by a null byte and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    init_logging(verbose=args.verbose)

    if args.filename is None:
        logger.error("missing filename argument")
        return 1

    try:
        launch(args.filename, print0=args.print0)
    except LauncherError as e:
        logger.error("error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
