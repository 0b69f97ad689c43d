"""Listing of the temp root and candidate selection.

Only immediate children of the root are considered; nothing below
them is inspected here.
"""

import logging
import os
from collections.abc import Iterable

from tmpsweep.sweep.errors import ListingError, classify_os_error
from tmpsweep.sweep.matcher import CruftMatcher
from tmpsweep.sweep.models import DirectoryEntry

logger = logging.getLogger(__name__)


def list_directory(root: str) -> list[DirectoryEntry]:
    """List the immediate children of a directory, sorted by name.

    Symlinks are not followed: a link to a directory is reported as a
    non-directory entry.

    Args:
        root: Directory to list.

    Returns:
        DirectoryEntry for each child.

    Raises:
        ListingError: If the directory cannot be opened or read, or the type
            of any child cannot be determined.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(root) as it:
            for entry in it:
                is_dir = entry.is_dir(follow_symlinks=False)
                entries.append(DirectoryEntry(name=entry.name, is_dir=is_dir))
    except OSError as e:
        raise ListingError(f"cannot list {root}: {e}", kind=classify_os_error(e)) from e

    entries.sort(key=lambda e: e.name)
    logger.debug("Listed %d entries in %s", len(entries), root)
    return entries


def select_candidates(
    root: str,
    entries: Iterable[DirectoryEntry],
    matcher: CruftMatcher,
) -> list[str]:
    """Build the ordered list of paths eligible for deletion.

    Args:
        root: Directory the entries were listed from.
        entries: Children of ``root`` in listing order.
        matcher: Matcher deciding eligibility.

    Returns:
        Absolute paths of eligible entries, in listing order.
    """
    base = os.path.abspath(root)
    candidates: list[str] = []
    for entry in entries:
        if matcher.is_eligible(entry.is_dir, entry.name):
            candidates.append(os.path.join(base, entry.name))
        else:
            logger.debug("Keeping %s", entry.name)
    return candidates
