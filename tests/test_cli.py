# Tests for the command-line interface

import pytest
from click.testing import CliRunner

from aptview import __version__
from aptview.cli import cli
from aptview.commands import list_command
from aptview.core.config import CONFIG_ENV
from aptview.core.exceptions import CommandError


@pytest.fixture
def cli_runner(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "missing.toml"))
    return CliRunner()


@pytest.fixture
def patched_runner(monkeypatch, fake_runner):
    """Make every session use the fake runner"""
    monkeypatch.setattr(list_command, "CommandRunner", lambda: fake_runner)
    return fake_runner


def test_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_installed(cli_runner, patched_runner):
    """Test the default listing renders records and the summary"""
    result = cli_runner.invoke(cli, ["list"])

    assert result.exit_code == 0, result.output
    assert patched_runner.calls == [("apt list --installed", None)]
    for name in ("pkg-a", "pkg-b", "pkg-c", "pkg-d"):
        assert name in result.output
    assert "Upgradable" in result.output
    assert "Residual config" in result.output


def test_list_alias_upgradable_remote(cli_runner, patched_runner):
    result = cli_runner.invoke(cli, ["ls", "-u", "-H", "admin@server"])

    assert result.exit_code == 0, result.output
    assert patched_runner.calls == [("apt list --upgradable", "admin@server")]
    assert "pkg-e" in result.output


def test_list_config_target(cli_runner, patched_runner, config_file):
    path = config_file('[list]\ntarget = "admin@server"\n')
    result = cli_runner.invoke(cli, ["list", "--config", str(path)])

    assert result.exit_code == 0, result.output
    assert patched_runner.calls == [("apt list --installed", "admin@server")]


def test_list_bad_sort_column(cli_runner, patched_runner):
    """Test that a bad sort column fails before running anything"""
    result = cli_runner.invoke(cli, ["list", "--sort", "Size"])

    assert result.exit_code == 1
    assert "Unknown column" in result.output
    assert patched_runner.calls == []


def test_list_command_failure(cli_runner, patched_runner):
    patched_runner.error = CommandError("Command failed", details="ssh: no route")
    result = cli_runner.invoke(cli, ["list", "-H", "admin@server"])

    assert result.exit_code == 1
    assert "Command failed" in result.output
    assert "ssh: no route" in result.output


def test_summary(cli_runner, patched_runner):
    result = cli_runner.invoke(cli, ["stats"])

    assert result.exit_code == 0, result.output
    assert "packages listed by apt list --installed" in result.output
    assert "Auto-installed" in result.output
    assert "pkg-a" not in result.output


def test_resolve_command_precedence():
    settings = list_command.Settings(command="apt list --manual-installed")

    assert list_command.resolve_command(settings) == "apt list --manual-installed"
    assert list_command.resolve_command(settings, upgradable=True) == "apt list --upgradable"
    assert list_command.resolve_command(settings, show_all=True) == "apt list"
    assert (
        list_command.resolve_command(settings, upgradable=True, command="apt list -a")
        == "apt list -a"
    )


def test_build_session_reverse():
    settings = list_command.Settings()
    session = list_command.build_session(settings, sort="Version", reverse=True)

    assert session.schema.sort_key.column == "Version"
    assert session.schema.sort_key.descending is True


def test_upgradable_summary_in_fresh_process(cli_runner, patched_runner):
    """Test that counters an upgradable listing cannot know are not shown as 0"""
    result = cli_runner.invoke(cli, ["summary", "-u"])

    assert result.exit_code == 0, result.output
    assert result.output.count("unknown") == 3
