"""Test configuration for aptview"""

import sys
from pathlib import Path
import pytest

# Add the src directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from aptview.core.exceptions import CommandError  # noqa: E402


INSTALLED_OUTPUT = """\

WARNING: apt does not have a stable CLI interface. Use with caution in scripts.

Listing... Done
pkg-a/stable 1.0 amd64 [installed,automatic]
pkg-b/stable 2.0 amd64 [installed,upgradable to: 2.1]
pkg-c/stable,now 3.0 all [residual-config]
pkg-d/stable 0.9 amd64 [installed]
N: There are 3 additional versions. Please use the '-a' switch to see them.
"""

UPGRADABLE_OUTPUT = """\
Listing...
pkg-b/stable 2.1 amd64 [upgradable from: 2.0]
pkg-e/stable-security 5.4 amd64 [upgradable from: 5.3]
"""


class FakeRunner:
    """Runner returning canned output and recording calls"""

    def __init__(self, outputs=None, error=None):
        self.outputs = outputs or {}
        self.error = error
        self.calls = []

    def __call__(self, command, target=None):
        self.calls.append((command, target))
        if self.error is not None:
            raise self.error
        return self.outputs[command]


class RecordingDisplay:
    """Display collecting render calls"""

    def __init__(self):
        self.renders = []

    def render(self, schema, sort_key, records, marked=()):
        self.renders.append((schema, sort_key, list(records)))
        self.marked = list(marked)


@pytest.fixture
def installed_output():
    return INSTALLED_OUTPUT


@pytest.fixture
def upgradable_output():
    return UPGRADABLE_OUTPUT


@pytest.fixture
def fake_runner():
    """Runner knowing the installed and upgradable listings"""
    return FakeRunner(
        {
            "apt list --installed": INSTALLED_OUTPUT,
            "apt list --upgradable": UPGRADABLE_OUTPUT,
        }
    )


@pytest.fixture
def failing_runner():
    return FakeRunner(error=CommandError("Command failed", details="ssh: no route"))


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def config_file(tmp_path):
    """Write a config file and return its path"""

    def write(content: str):
        path = tmp_path / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return write
