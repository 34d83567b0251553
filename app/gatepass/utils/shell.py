"""Subprocess helpers.

Commands are always run from an argv list without a shell; output is
decoded as text with undecodable bytes replaced.
"""

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of one finished command.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


def run_command(args: list[str], *, timeout: float | None = 60.0) -> CommandResult:
    """Run a command to completion and capture its output.

    A non-zero exit status is reported through the result, not raised.

    Args:
        args: Executable followed by its arguments.
        timeout: Seconds before the process is killed. None waits forever.

    Returns:
        CommandResult for the finished process.

    Raises:
        subprocess.TimeoutExpired: If the timeout elapses.
        OSError: If the executable cannot be started.
    """
    logger.debug("Running %s", shlex.join(args))
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        errors="replace",
        timeout=timeout,
    )
    return CommandResult(completed.stdout, completed.stderr, completed.returncode)


def command_exists(name: str) -> bool:
    """Whether ``name`` resolves to an executable (PATH lookup or absolute path)."""
    return shutil.which(name) is not None
