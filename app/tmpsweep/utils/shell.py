"""Shell execution utilities.

Provides safe subprocess execution with proper error handling.
"""

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    timeout: float | None = None,
    errors: str = "strict",
) -> CommandResult:
    """Execute a command and capture its output.

    Output is always captured and decoded as text; a non-zero exit
    status is reported through ``CommandResult.returncode`` rather than
    raised.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for the command. None waits forever.
        errors: How undecodable output bytes are handled, as in ``bytes.decode``.
            Pass "surrogateescape" when output echoes file names back.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
        errors=errors,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )
