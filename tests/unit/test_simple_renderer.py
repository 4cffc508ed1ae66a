"""
Unit tests for the bulk SimpleRenderer.
"""
from zlelaunch.core.entry import LauncherEntry
from zlelaunch.renderers.simple_renderer import SimpleRenderer


def test_commands_null_terminated(streams):
    config = streams()
    entries = [
        LauncherEntry("python test.py"),
        LauncherEntry("pytest -s", key="a"),
        LauncherEntry("vim .ctrl_e.yml", key="z"),
    ]

    SimpleRenderer(config).run(entries)

    assert config.result.getvalue() == "python test.py\0pytest -s\0vim .ctrl_e.yml\0"


def test_no_menu_and_no_read(streams):
    config = streams(b"a")

    SimpleRenderer(config).run([LauncherEntry("echo one\necho two")])

    assert config.result.getvalue() == "echo one\necho two\0"
    assert config.output.getvalue() == ""
    assert config.input.read() == b"a"
