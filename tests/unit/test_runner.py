"""Unit tests for the command runner."""

import subprocess
from unittest.mock import patch

import pytest

from svcmgr.exceptions import CommandFailedError, CommandNotFoundError
from svcmgr.services.runner import command_exists, run_command


class TestRunCommand:
    """Tests for run_command."""

    def test_returns_stdout(self) -> None:
        """run_command should return captured stdout."""
        completed = subprocess.CompletedProcess(["launchctl", "list"], 0, "PID\tStatus\tLabel\n", "")
        with patch("svcmgr.services.runner.subprocess.run", return_value=completed) as mock_run:
            output = run_command(["launchctl", "list"])

        assert output == "PID\tStatus\tLabel\n"
        mock_run.assert_called_once_with(["launchctl", "list"], capture_output=True, text=True)

    def test_missing_program(self) -> None:
        """A missing executable should raise CommandNotFoundError."""
        with patch("svcmgr.services.runner.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(CommandNotFoundError) as exc_info:
                run_command(["brew", "services", "list"])

        assert exc_info.value.program == "brew"

    def test_nonzero_exit(self) -> None:
        """A non-zero exit should raise CommandFailedError with stderr."""
        completed = subprocess.CompletedProcess(
            ["launchctl", "load", "-w", "x"], 5, "", "Load failed: 5: Input/output error\n"
        )
        with patch("svcmgr.services.runner.subprocess.run", return_value=completed):
            with pytest.raises(CommandFailedError) as exc_info:
                run_command(["launchctl", "load", "-w", "x"])

        assert exc_info.value.returncode == 5
        assert exc_info.value.stderr == "Load failed: 5: Input/output error"
        assert "Input/output error" in str(exc_info.value)

    def test_real_missing_program(self) -> None:
        """An executable that doesn't exist anywhere should be reported as missing."""
        with pytest.raises(CommandNotFoundError):
            run_command(["svcmgr-test-no-such-program"])


class TestCommandExists:
    """Tests for command_exists."""

    def test_found(self) -> None:
        with patch("svcmgr.services.runner.shutil.which", return_value="/opt/homebrew/bin/brew"):
            assert command_exists("brew")

    def test_not_found(self) -> None:
        with patch("svcmgr.services.runner.shutil.which", return_value=None):
            assert not command_exists("brew")
