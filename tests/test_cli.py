"""Tests for the flowgraph CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from flowgraph._cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestTypesCommand:
    def test_lists_every_kind(self) -> None:
        result = runner.invoke(app, ["types"])
        assert result.exit_code == 0, result.output
        for kind in ("numberLiteral", "conditional", "sink"):
            assert kind in result.output


class TestSchemaCommand:
    """Tests for the schema command."""

    def test_writes_file(self, tmp_path: Path) -> None:
        output = tmp_path / "out" / "schema.json"

        result = runner.invoke(app, ["schema", "-o", str(output)])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text())
        assert data["add"]["outputs"][0]["name"] == "sum"
        assert data["numberLiteral"]["outputs"][0]["maxConnections"] is None

    def test_indent(self, tmp_path: Path) -> None:
        output = tmp_path / "schema.json"

        result = runner.invoke(app, ["schema", "-o", str(output), "--indent", "4"])

        assert result.exit_code == 0, result.output
        assert '\n    "booleanLiteral"' in output.read_text()


class TestDemoCommand:
    """Tests for the demo command."""

    def test_default_run(self) -> None:
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0, result.output
        assert "N4 = 8.0" in result.output
        assert "Invalidated: N1, N3, N4" in result.output
        assert "N4 = 13.0" in result.output

    def test_custom_values(self) -> None:
        result = runner.invoke(app, ["demo", "--first", "1", "--second", "2", "--updated", "40"])
        assert result.exit_code == 0, result.output
        assert "N4 = 3.0" in result.output
        assert "N4 = 42.0" in result.output

    def test_uses_configured_prefix(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.flowgraph]\nid_prefix = "node"\n')
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0, result.output
        assert "node4 = 13.0" in result.output

    def test_invalid_config(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.flowgraph]\nmax_eval_depth = 0\n")
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 1
