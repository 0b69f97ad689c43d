"""Disk usage estimation for sweep candidates.

Sizes are measured with ``du -s --block-size=1``, which reports the
allocated size of the whole subtree in bytes.
"""

import logging
import re
import subprocess
from typing import Protocol

from tmpsweep.sweep.errors import (
    ErrorKind,
    ExecutionError,
    InvalidArgumentError,
    UnparseableOutputError,
    classify_os_error,
    classify_tool_message,
)
from tmpsweep.utils.shell import run_command

logger = logging.getLogger(__name__)

# Leading byte count followed by whitespace; the rest of the line is the path.
_DU_OUTPUT_RE = re.compile(r"^([0-9]+)\s+")

_INT64_MAX = 2**63 - 1


class SizeEstimator(Protocol):
    """Anything able to measure the size of a path in bytes."""

    def estimate_size(self, path: str) -> int:
        """Return the size of ``path`` in bytes.

        Raises:
            EstimationError: If the size cannot be determined.
            InvalidArgumentError: If ``path`` is empty.
        """
        ...


def parse_du_output(output: str) -> int:
    """Extract the byte count from ``du -s`` output.

    Args:
        output: Standard output of ``du``.

    Returns:
        Byte count reported on the first line.

    Raises:
        UnparseableOutputError: If the output does not start with an
            integer followed by whitespace, or the integer overflows int64.
    """
    match = _DU_OUTPUT_RE.match(output)
    if match is None:
        raise UnparseableOutputError(f"unrecognized du output: {output!r}", output=output)

    value = int(match.group(1))
    if value > _INT64_MAX:
        raise UnparseableOutputError(f"du size out of range: {output!r}", output=output)
    return value


class DuSizeEstimator:
    """Estimates sizes by running ``du`` on each path.

    Args:
        command: Executable to run. Defaults to ``du`` on PATH.
        timeout: Seconds to wait for each invocation. None waits forever.
    """

    def __init__(self, *, command: str = "du", timeout: float | None = None) -> None:
        self._command = command
        self._timeout = timeout

    def estimate_size(self, path: str) -> int:
        """Measure the total size of a path and everything below it.

        Args:
            path: File or directory to measure.

        Returns:
            Size in bytes.

        Raises:
            InvalidArgumentError: If ``path`` is empty.
            ExecutionError: If ``du`` is missing, times out, or exits non-zero.
                ``kind`` is PERMISSION_DENIED when ``du`` says so.
            UnparseableOutputError: If the output cannot be parsed.
        """
        if not path:
            raise InvalidArgumentError("missing path for size estimation")

        args = [self._command, "-s", "--block-size=1", path]
        try:
            result = run_command(args, timeout=self._timeout, errors="surrogateescape")
        except subprocess.TimeoutExpired as e:
            raise ExecutionError(f"{self._command} timed out after {e.timeout}s on {path}") from e
        except OSError as e:
            kind = classify_os_error(e)
            # A missing du binary is not a missing target
            if kind == ErrorKind.NOT_FOUND:
                kind = ErrorKind.OTHER
            raise ExecutionError(f"cannot run {self._command}: {e}", kind=kind) from e

        if not result.success:
            stderr = result.stderr.strip()
            raise ExecutionError(
                f"{self._command} exited with status {result.returncode}: {stderr}",
                stderr=result.stderr,
                kind=classify_tool_message(result.stderr),
            )

        size = parse_du_output(result.stdout)
        logger.debug("Estimated %s at %d bytes", path, size)
        return size
