"""Unit tests for utility functions (solution_scaffolder.utils).

Tests cover:
- run_command (success, failure, timeout, cwd)
- ensure_dir / write_text
- format_duration
- STEP_NAMES / STEP_COLORS constants
- Rich output helpers
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from solution_scaffolder.utils import (
    STEP_COLORS,
    STEP_NAMES,
    ensure_dir,
    format_duration,
    print_command,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
    write_text,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('hello')"]
        )
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    async def test_failed_command(self):
        returncode, _, _ = await run_command(
            [sys.executable, "-c", "import sys; sys.exit(3)"]
        )
        assert returncode == 3

    @pytest.mark.unit
    async def test_returns_stderr(self):
        _, _, stderr = await run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('error_msg\\n')"]
        )
        assert stderr == "error_msg"

    @pytest.mark.unit
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    async def test_command_timeout(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert "timed out" in stderr


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


class TestFileHelpers:
    @pytest.mark.unit
    def test_ensure_dir_creates_nested(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c"
        assert ensure_dir(target) == target
        assert target.is_dir()

    @pytest.mark.unit
    def test_ensure_dir_existing(self, tmp_path: Path):
        ensure_dir(tmp_path)
        assert tmp_path.is_dir()

    @pytest.mark.unit
    def test_write_text_creates_parents(self, tmp_path: Path):
        target = tmp_path / "x" / "y.txt"
        write_text(target, "content\n")
        assert target.read_text(encoding="utf-8") == "content\n"


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (3.7, "3.7s"),
            (0, "0.0s"),
            (-5, "0.0s"),
            (65.2, "1m 5s"),
            (3661.0, "1h 1m 1s"),
        ],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected


# ---------------------------------------------------------------------------
# Step constants
# ---------------------------------------------------------------------------


class TestStepConstants:
    @pytest.mark.unit
    def test_every_step_named_and_coloured(self):
        assert sorted(STEP_NAMES) == list(range(1, 8))
        assert sorted(STEP_COLORS) == list(range(1, 8))

    @pytest.mark.unit
    def test_step_order(self):
        assert STEP_NAMES[1] == "Validating Environment"
        assert STEP_NAMES[2] == "Creating Solution Structure"
        assert STEP_NAMES[7] == "Setting Up Documentation"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_step_header(self):
        print_step_header(1)
        print_step_header(9, "Custom")

    @pytest.mark.unit
    def test_print_summary_table(self):
        print_summary_table({"Key1": "Value1", "Key2": "Value2"}, title="Test Summary")

    @pytest.mark.unit
    def test_print_success(self):
        print_success("done")

    @pytest.mark.unit
    def test_print_warning(self):
        print_warning("careful")

    @pytest.mark.unit
    def test_print_command(self, capsys):
        print_command(["dotnet", "--info"])
        assert "dotnet --info" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_error_goes_to_stderr(self, capsys):
        print_error("Missing dependency: helm")
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Missing dependency: helm" in captured.err
        assert "Missing dependency" not in captured.out
