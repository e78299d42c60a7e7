"""
Тесты для CLI утилиты.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from starlette_mini.cli import cli
from starlette_mini.core.config import settings


@pytest.fixture
def runner():
    """Фикстура CLI runner."""
    return CliRunner()


class TestCLI:
    """Тесты основной CLI."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "minify" in result.output
        assert "policy" in result.output
        assert "serve" in result.output

    def test_policy(self, runner):
        result = runner.invoke(cli, ["policy"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["remove_comments"] is True
        assert data["minify_css"] is True
        assert data["minify_js"] is True
        assert data["collapse_whitespace"] is True


class TestMinifyCommand:
    """Тесты команды minify."""

    def test_minify_file(self, runner, tmp_path):
        source = tmp_path / "index.html"
        target = tmp_path / "index.min.html"
        source.write_bytes(b"<html><body><!-- comment -->  <h1>Hi</h1>  </body></html>")

        result = runner.invoke(cli, ["minify", str(source), "--output", str(target)])

        assert result.exit_code == 0
        minified = target.read_bytes()
        assert b"<!--" not in minified
        assert b"<h1>Hi</h1>" in minified

    def test_minify_stdin(self, runner):
        result = runner.invoke(cli, ["minify"], input=b"<div>  <p>x</p>  </div>")
        assert result.exit_code == 0
        assert b"<p>x" in result.stdout_bytes
        assert b"  " not in result.stdout_bytes

    def test_minify_stats(self, runner, tmp_path):
        source = tmp_path / "index.html"
        source.write_bytes(b"<div>  <!-- c -->  <p>x</p>  </div>")

        result = runner.invoke(
            cli, ["minify", str(source), "-o", str(tmp_path / "out.html"), "--stats"]
        )

        assert result.exit_code == 0
        assert "bytes" in result.output

    def test_minify_invalid_input(self, runner, tmp_path):
        source = tmp_path / "latin1.html"
        source.write_bytes(b"<p>caf\xe9</p>")

        result = runner.invoke(cli, ["minify", str(source), "-o", str(tmp_path / "out.html")])

        assert result.exit_code == 1
        assert "UTF-8" in result.output


class TestServeCommand:
    """Тесты команды serve."""

    def test_serve_uses_settings(self, runner):
        with patch("uvicorn.run") as mocked_run:
            result = runner.invoke(cli, ["serve", "--port", "8123"])

        assert result.exit_code == 0
        mocked_run.assert_called_once()
        args, kwargs = mocked_run.call_args
        assert args[0] == "starlette_mini.main:app"
        assert kwargs["port"] == 8123
        assert kwargs["host"] == settings.HOST
