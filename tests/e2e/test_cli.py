"""End-to-end tests for the hintsniff CLI.

Tests the complete CLI workflow over PHP files on disk: checking, fixing
and describing declarations.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hintsniff.cli.main import app

runner = CliRunner()


@pytest.fixture
def spacing_file(tmp_path: Path, php_fixtures_path: Path) -> Path:
    """Copy the spacing fixture into a scratch directory."""
    path = tmp_path / "Spacing.php"
    shutil.copy(php_fixtures_path / "Spacing.php", path)
    return path


@pytest.fixture
def clean_file(tmp_path: Path) -> Path:
    path = tmp_path / "Clean.php"
    path.write_text("<?php\n\nfunction add(int $a, int $b): int\n{\n    return $a + $b;\n}\n")
    return path


class TestCliHelp:
    """Test CLI help and basic commands."""

    def test_main_help(self):
        """Test main help displays correctly."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "describe" in result.output

    def test_check_help(self):
        result = runner.invoke(app, ["check", "--help"])
        assert result.exit_code == 0
        assert "--fix" in result.output
        assert "--json" in result.output


class TestCheckCommand:
    """Test the check command."""

    def test_check_nonexistent_path(self):
        """Test check with non-existent path fails."""
        result = runner.invoke(app, ["check", "/nonexistent/path/12345"])
        assert result.exit_code != 0

    def test_check_clean_file(self, clean_file: Path):
        result = runner.invoke(app, ["check", str(clean_file)])
        assert result.exit_code == 0
        assert "no problems found" in result.output

    def test_check_reports_problems(self, spacing_file: Path):
        result = runner.invoke(app, ["check", str(spacing_file)])
        assert result.exit_code == 1
        assert "4 problem(s) found" in result.output

    def test_check_json_output(self, spacing_file: Path):
        result = runner.invoke(app, ["check", str(spacing_file), "--json"])
        assert result.exit_code == 1

        payload = json.loads(result.stdout)
        assert payload["errors"] == []
        (report,) = payload["files"]
        assert Path(report["path"]).name == "Spacing.php"
        assert report["fixes_applied"] == 0
        assert [d["code"] for d in report["diagnostics"]][:2] == [
            "WhitespaceBeforeColon",
            "NoSpaceBetweenColonAndTypeHint",
        ]
        assert all(d["fix"] is not None for d in report["diagnostics"])

    def test_check_fix(self, spacing_file: Path):
        result = runner.invoke(app, ["check", str(spacing_file), "--fix"])
        assert result.exit_code == 0
        assert "Applied 4 fix(es)" in result.output
        assert "function nullable(): ?string" in spacing_file.read_text(encoding="utf-8")

    def test_check_directory(self, spacing_file: Path, clean_file: Path):
        result = runner.invoke(app, ["check", str(spacing_file.parent), "--json"])
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert sorted(Path(f["path"]).name for f in payload["files"]) == ["Clean.php", "Spacing.php"]

    def test_check_verbose(self, clean_file: Path):
        result = runner.invoke(app, ["--verbose", "check", str(clean_file)])
        assert result.exit_code == 0


class TestDescribeCommand:
    """Test the describe command."""

    def test_describe_json(self, clean_file: Path):
        result = runner.invoke(app, ["describe", str(clean_file), "--json"])
        assert result.exit_code == 0

        (descriptor,) = json.loads(result.stdout)
        assert descriptor["qualified_name"] == "add"
        assert [p["name"] for p in descriptor["parameters"]] == ["$a", "$b"]
        assert descriptor["return_hint"]["text"] == "int"
        assert descriptor["returns_value"] is True

    def test_describe_table(self, spacing_file: Path):
        result = runner.invoke(app, ["describe", str(spacing_file)])
        assert result.exit_code == 0
        assert "noSpace" in result.output

    def test_describe_without_declarations(self, tmp_path: Path):
        path = tmp_path / "Empty.php"
        path.write_text("<?php\necho 'hi';\n")
        result = runner.invoke(app, ["describe", str(path)])
        assert result.exit_code == 0
        assert "No declarations found" in result.output

    def test_describe_unbalanced_file(self, tmp_path: Path):
        path = tmp_path / "Broken.php"
        path.write_text("<?php\nfunction f() {\n")
        result = runner.invoke(app, ["describe", str(path)])
        assert result.exit_code == 1

    def test_describe_directory_is_rejected(self, tmp_path: Path):
        result = runner.invoke(app, ["describe", str(tmp_path)])
        assert result.exit_code != 0
