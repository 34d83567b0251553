"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

from gatepass.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success(self) -> None:
        """Exit code 0 is success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success is True

    def test_failure(self) -> None:
        """Non-zero exit codes are failures."""
        assert CommandResult(stdout="", stderr="", returncode=1).success is False


class TestRunCommand:
    """Tests for run_command."""

    @patch("gatepass.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """stdout, stderr, and returncode are copied into the result."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)

        result = run_command(["xattr", "-p", "com.apple.quarantine", "/tmp/a"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=3)

    @patch("gatepass.utils.shell.subprocess.run")
    def test_passes_argv_without_shell(self, mock_run: MagicMock) -> None:
        """Arguments are passed as a list with text capture and timeout."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["xattr", "-d", "com.apple.quarantine", "/tmp/My App.app"], timeout=5.0)

        args, kwargs = mock_run.call_args
        assert args[0] == ["xattr", "-d", "com.apple.quarantine", "/tmp/My App.app"]
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["timeout"] == 5.0
        assert "shell" not in kwargs


class TestCommandExists:
    """Tests for command_exists."""

    @patch("gatepass.utils.shell.shutil.which", return_value="/usr/bin/xattr")
    def test_found(self, _mock_which: MagicMock) -> None:
        """Returns True when which finds the command."""
        assert command_exists("xattr") is True

    @patch("gatepass.utils.shell.shutil.which", return_value=None)
    def test_missing(self, _mock_which: MagicMock) -> None:
        """Returns False when which finds nothing."""
        assert command_exists("xattr") is False
