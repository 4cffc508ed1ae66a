"""
Basic test fixtures for the zlelaunch test suite.

Provides sample configurations and in-memory streams for the renderers.
"""

import io
import logging
import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from zlelaunch.core.log import LOGGER_NAME
from zlelaunch.core.renderer import RendererConfig


SAMPLE_YAML = """
- python test.py
- key: a
  command: pytest -s
- key: h
  command: echo hej
"""


@pytest.fixture
def sample_yaml():
    """The three-entry configuration used throughout the suite."""
    return SAMPLE_YAML


@pytest.fixture
def config_file(tmp_path):
    """Write the sample configuration to a temporary file."""
    path = tmp_path / ".ctrl_e.yml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    return path


def make_streams(keys: bytes = b"") -> RendererConfig:
    """Renderer streams backed by memory, with `keys` waiting on input."""
    return RendererConfig(
        output=io.StringIO(),
        input=io.BytesIO(keys),
        result=io.StringIO(),
    )


@pytest.fixture
def streams():
    """Factory for in-memory renderer streams."""
    return make_streams


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo init_logging so caplog sees records from every test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
