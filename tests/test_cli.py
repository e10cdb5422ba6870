"""Tests for the root CLI group."""

from __future__ import annotations

from click.testing import CliRunner

from homesite import __version__
from homesite.cli import cli


class TestCli:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_help_without_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        for name in ("projects", "wishlist", "resume"):
            assert name in result.stdout

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["blog"])
        assert result.exit_code != 0
