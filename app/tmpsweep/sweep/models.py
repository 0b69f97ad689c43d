"""Sweep domain models.

This module defines the transient data structures produced during a
single run: the raw directory listing, per-path removal outcomes, and
the summary reported at the end.
"""

import os
from dataclasses import dataclass, field

from tmpsweep.utils.units import format_bytes


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """An immediate child of the scanned root.

    Attributes:
        name: Entry name (basename, no separators).
        is_dir: True for real directories. Symlinks are never followed,
            so a symlink to a directory reports False.
    """

    name: str
    is_dir: bool

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        # Entries must name a direct child, never the root or a nested path
        if self.name in (".", "..") or os.sep in self.name:
            msg = f"Entry name must be a plain child name, got {self.name!r}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Outcome of handling a single candidate in the removal pass.

    Attributes:
        path: Absolute path of the candidate.
        removed: Whether the path was actually deleted.
        dry_run: Whether deletion was suppressed.
        error: Reason the path was skipped, None otherwise.
    """

    path: str
    removed: bool
    dry_run: bool = False
    error: str | None = None


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Result of a complete sweep run.

    Attributes:
        root: Directory that was scanned.
        candidates: Matched paths in listing order.
        total_bytes: Estimated bytes across all candidates. Candidates
            whose estimation was skipped contribute 0.
        dry_run: Whether the run left the filesystem untouched.
        estimation_skipped: Candidates whose size could not be read.
        results: One removal result per candidate handled.
    """

    root: str
    candidates: tuple[str, ...]
    total_bytes: int
    dry_run: bool
    estimation_skipped: tuple[str, ...] = field(default=())
    results: tuple[RemovalResult, ...] = field(default=())

    @property
    def candidate_count(self) -> int:
        """Number of matched candidates, whether or not they were removed."""
        return len(self.candidates)

    @property
    def removed_count(self) -> int:
        """Number of candidates actually deleted."""
        return sum(1 for r in self.results if r.removed)

    @property
    def deletion_skipped(self) -> tuple[str, ...]:
        """Candidates left in place because removal was not permitted."""
        return tuple(r.path for r in self.results if r.error is not None)

    @property
    def size_human(self) -> str:
        """Estimated total rendered with ``format_bytes``."""
        return format_bytes(self.total_bytes)
