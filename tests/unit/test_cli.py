"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bantam.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands from an empty directory so no stray bantam.toml is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BANTAM_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def tree_file(project_dir: Path) -> Path:
    path = project_dir / "tree.json"
    path.write_text(
        json.dumps(
            {
                "kind": "call",
                "function": {"kind": "name", "name": "f"},
                "args": [{"kind": "name", "name": "a"}, {"kind": "name", "name": "b"}],
            }
        )
    )
    return path


class TestTokensCommand:
    def test_default_sample(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["tokens"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Token(name, 'b')",
            "Token(punctuator, '+')",
            "Token(name, 'a')",
        ]

    def test_until_exhausted(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["tokens", "x1 + 2y", "--limit", "0"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Token(name, 'x')",
            "Token(punctuator, '+')",
            "Token(name, 'y')",
            "None",
        ]

    def test_limit_past_end_prints_none_once(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["tokens", "a", "-n", "5"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Token(name, 'a')", "None"]

    def test_sample_from_config(self, cli_runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "bantam.toml").write_text('[tokens]\nsample = "q"\nlimit = 0\n')
        result = cli_runner.invoke(app, ["tokens"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Token(name, 'q')", "None"]

    def test_bad_config(self, cli_runner: CliRunner, project_dir: Path) -> None:
        (project_dir / "bantam.toml").write_text("[tokens]\nlimit = -2\n")
        result = cli_runner.invoke(app, ["tokens"])
        assert result.exit_code == 1


class TestLogLevelOption:
    def test_unknown_level_option(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["--log-level", "LOUD", "tokens"])
        assert result.exit_code == 1

    def test_unknown_level_env(
        self, cli_runner: CliRunner, project_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BANTAM_LOG_LEVEL", "LOUD")
        result = cli_runner.invoke(app, ["tokens"])
        assert result.exit_code == 1

    def test_level_is_case_insensitive(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["--log-level", "error", "tokens", "a", "-n", "1"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["Token(name, 'a')"]


class TestRenderCommand:
    def test_render_file(self, cli_runner: CliRunner, tree_file: Path) -> None:
        result = cli_runner.invoke(app, ["render", str(tree_file)])
        assert result.exit_code == 0
        assert result.stdout.strip() == "f(a, b)"

    def test_render_stdin(self, cli_runner: CliRunner, project_dir: Path) -> None:
        document = json.dumps(
            {
                "kind": "assign",
                "name": "x",
                "right": {
                    "kind": "op",
                    "left": {"kind": "name", "name": "a"},
                    "op": "+",
                    "right": {"kind": "name", "name": "b"},
                },
            }
        )
        result = cli_runner.invoke(app, ["render", "-"], input=document)
        assert result.exit_code == 0
        assert result.stdout.strip() == "(x = (a + b))"

    def test_missing_file(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["render", "nope.json"])
        assert result.exit_code == 1

    def test_invalid_tree(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["render", "-"], input='{"kind": "assign", "name": "x"}')
        assert result.exit_code == 1


class TestPrecedenceCommand:
    def test_lists_every_level(self, cli_runner: CliRunner, project_dir: Path) -> None:
        result = cli_runner.invoke(app, ["precedence"])
        assert result.exit_code == 0
        for level in (
            "assignment",
            "conditional",
            "sum",
            "product",
            "exponent",
            "prefix",
            "postfix",
            "call",
        ):
            assert level in result.stdout


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "Bantam version" in result.stdout
