"""
Exception hierarchy for the launcher.

Every fatal condition raises a subclass of LauncherError. Recoverable
conditions (a mapping without a command, a missing configuration file)
are logged where they are detected and never raised.
"""


class LauncherError(Exception):
    """Base class for fatal launcher errors."""


class ConfigError(LauncherError):
    """The configuration could not be turned into launcher entries."""


class ConfigSyntaxError(ConfigError):
    """The configuration text is not valid YAML."""


class ConfigShapeError(ConfigError):
    """A configuration document or element has the wrong shape."""


class KeyspaceExhaustedError(LauncherError):
    """More keyless entries than letters left in the key alphabet."""


class KeyReadError(LauncherError):
    """No key could be read from standard input."""


class KeyAlreadyAssignedError(LauncherError):
    """An entry's key was set a second time."""
