"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate scoring deeply - the unit tests do that.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(args: list[str], stdin: str = "", timeout: int = 30) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m lexprep.cli.main'
        stdin: Text fed to interactive prompts
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    result = subprocess.run(
        [sys.executable, "-m", "lexprep.cli.main", *args],
        cwd=PROJECT_ROOT,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=timeout,
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        code, stdout, stderr = run_cli_command(["--help"])

        assert code == 0, f"Help failed: {stderr}"
        assert "score" in stdout
        assert "train" in stdout

    @pytest.mark.parametrize("command", ["score", "keywords", "stats", "prepare", "import-ocr", "train", "exam"])
    def test_command_help(self, command):
        code, stdout, stderr = run_cli_command([command, "--help"])
        assert code == 0, f"{command} help failed: {stderr}"


class TestCLIScoring:
    """Test scoring and keyword commands."""

    def test_score_json(self, bank_file):
        code, stdout, stderr = run_cli_command(
            ["score", "1", "--bank", str(bank_file), "--answer", "Le conseil de prud'hommes", "--json"]
        )

        assert code == 0, f"Score failed: {stderr}"
        data = json.loads(stdout)
        assert data["score"] == 70
        assert data["foundCount"] == 2

    def test_score_rendered(self, bank_file):
        code, stdout, stderr = run_cli_command(
            ["score", "q-2", "--bank", str(bank_file), "--answer", "L'inspection du travail"]
        )

        assert code == 0, f"Score failed: {stderr}"
        assert "70%" in stdout

    def test_score_unknown_question(self, bank_file):
        code, stdout, _ = run_cli_command(["score", "404", "--bank", str(bank_file), "--answer", "x"])

        assert code == 1
        assert "not found" in stdout

    def test_missing_bank(self, tmp_path):
        code, stdout, _ = run_cli_command(["stats", "--bank", str(tmp_path / "absent.json")])

        assert code == 1
        assert "Error" in stdout

    def test_keywords(self):
        code, stdout, _ = run_cli_command(["keywords", "Le conseil, le conseil."])

        assert code == 0
        assert stdout.split() == ["le", "conseil"]

    def test_significant_keywords(self):
        code, stdout, _ = run_cli_command(["keywords", "--significant", "Le conseil de prud'hommes"])

        assert code == 0
        assert stdout.split() == ["conseil", "prud'hommes"]

    def test_stats(self, bank_file):
        code, stdout, stderr = run_cli_command(["stats", "--bank", str(bank_file)])

        assert code == 0, f"Stats failed: {stderr}"
        assert "Questions" in stdout


class TestCLIBankTooling:
    """Test bank preparation commands."""

    def test_import_then_prepare(self, tmp_path):
        sheet = tmp_path / "questions.txt"
        sheet.write_text(
            "1. Qui juge les litiges ?\nREPONSE : Le conseil de prud'hommes\n", encoding="utf-8"
        )
        raw = tmp_path / "questions.json"
        prepared = tmp_path / "questions_keywords.json"

        code, _, stderr = run_cli_command(["import-ocr", str(sheet), str(raw)])
        assert code == 0, f"Import failed: {stderr}"
        assert json.loads(raw.read_text(encoding="utf-8"))[0]["motsCles"] == []

        code, _, stderr = run_cli_command(["prepare", str(raw), str(prepared)])
        assert code == 0, f"Prepare failed: {stderr}"

        data = json.loads(prepared.read_text(encoding="utf-8"))
        assert data["questions"][0]["motsCles"] == ["conseil", "prud'hommes"]


class TestCLISessions:
    """Test interactive sessions with piped answers."""

    def test_training_session(self, bank_file):
        code, stdout, stderr = run_cli_command(
            ["train", "--bank", str(bank_file), "--count", "1", "--seed", "1"],
            stdin="une réponse\n",
        )

        assert code == 0, f"Training failed: {stderr}"
        assert "Final score" in stdout

    def test_exam_handed_in_early(self, bank_file):
        code, stdout, stderr = run_cli_command(
            ["exam", "--bank", str(bank_file), "--count", "2", "--seed", "1"],
            stdin="une réponse\n:q\n",
        )

        assert code == 0, f"Exam failed: {stderr}"
        assert "Final score" in stdout
        assert "Results" in stdout

    def test_exam_rejects_unknown_filter(self, bank_file):
        code, _, _ = run_cli_command(["exam", "--bank", str(bank_file), "--show", "maybe"])

        assert code == 2
