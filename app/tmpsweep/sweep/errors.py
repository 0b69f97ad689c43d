"""Error taxonomy for the sweep pipeline.

Every failure raised by listing, estimation, or removal is a ``SweepError``
carrying an ``ErrorKind``. The kind is decided where the error is first
seen, so callers branch on ``kind`` rather than on message text.
"""

import errno
from enum import Enum


class ErrorKind(str, Enum):
    """Coarse classification of a filesystem or tool failure.

    Attributes:
        PERMISSION_DENIED: The process lacked permission for the path.
        NOT_FOUND: The path (or the tool) does not exist.
        OTHER: Anything else.
    """

    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    OTHER = "other"


_PERMISSION_ERRNOS = frozenset({errno.EACCES, errno.EPERM})


def classify_os_error(exc: OSError) -> ErrorKind:
    """Map an OSError onto an ErrorKind.

    Args:
        exc: Error raised by an OS call.

    Returns:
        PERMISSION_DENIED for EACCES/EPERM, NOT_FOUND for ENOENT, OTHER otherwise.
    """
    if isinstance(exc, PermissionError) or exc.errno in _PERMISSION_ERRNOS:
        return ErrorKind.PERMISSION_DENIED
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return ErrorKind.NOT_FOUND
    return ErrorKind.OTHER


def classify_tool_message(message: str) -> ErrorKind:
    """Classify an external tool's diagnostic text.

    External tools only report failures as text on stderr, so this is
    the one place message content is inspected.

    Args:
        message: Captured standard error of the tool.

    Returns:
        PERMISSION_DENIED if the text mentions it, OTHER otherwise.
    """
    if "permission denied" in message.lower():
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.OTHER


class SweepError(Exception):
    """Base exception for all sweep failures.

    Attributes:
        kind: Classification used to decide whether the failure is tolerated.
    """

    def __init__(self, message: str, *, kind: ErrorKind = ErrorKind.OTHER) -> None:
        super().__init__(message)
        self.kind = kind

    @property
    def is_permission_denied(self) -> bool:
        """Whether the failure was caused by missing permissions."""
        return self.kind == ErrorKind.PERMISSION_DENIED


class ConfigurationError(SweepError):
    """Raised when required input is missing or the config file is invalid."""


class InvalidArgumentError(ConfigurationError):
    """Raised when an operation is called with an unusable argument."""


class ListingError(SweepError):
    """Raised when the root directory cannot be listed."""


class EstimationError(SweepError):
    """Base exception for size estimation failures."""


class ExecutionError(EstimationError):
    """Raised when the size tool cannot run or exits with a failure.

    Attributes:
        stderr: Captured standard error of the tool, for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        stderr: str = "",
        kind: ErrorKind = ErrorKind.OTHER,
    ) -> None:
        super().__init__(message, kind=kind)
        self.stderr = stderr


class UnparseableOutputError(EstimationError):
    """Raised when the size tool's output is not understood.

    Attributes:
        output: Raw standard output of the tool.
    """

    def __init__(self, message: str, *, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class DeletionError(SweepError):
    """Raised when a candidate cannot be removed.

    Attributes:
        path: Path whose removal failed.
    """

    def __init__(self, message: str, *, path: str, kind: ErrorKind = ErrorKind.OTHER) -> None:
        super().__init__(message, kind=kind)
        self.path = path
