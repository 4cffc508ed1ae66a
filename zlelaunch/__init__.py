"""YAML-configured command launcher for shell key bindings."""

__version__ = "0.1.0"
