"""Tests for the resume command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from homesite.cli import cli


class TestResume:
    def test_json(self, cli_runner: CliRunner, content_root: Path) -> None:
        (content_root / "posts" / "resume.yaml").write_text(
            "education:\n  - what: BSc\n    where: Uni\n    when: '2019'\n", encoding="utf-8"
        )

        result = cli_runner.invoke(cli, ["--root", str(content_root), "--json", "resume"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"]["education"][0]["where"] == "Uni"

    def test_missing(self, cli_runner: CliRunner, content_root: Path) -> None:
        result = cli_runner.invoke(cli, ["--root", str(content_root), "resume"])
        assert result.exit_code == 1
        assert "Resume file not found" in result.stderr
