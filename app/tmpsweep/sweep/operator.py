"""Recursive removal of sweep candidates."""

import logging
import os
import shutil
from pathlib import Path
from typing import Protocol

from tmpsweep.sweep.errors import (
    DeletionError,
    ErrorKind,
    InvalidArgumentError,
    classify_os_error,
)

logger = logging.getLogger(__name__)


class Remover(Protocol):
    """Anything able to delete a path and everything beneath it."""

    def remove(self, path: str) -> None:
        """Delete ``path`` recursively.

        Raises:
            DeletionError: If the path cannot be removed.
        """
        ...


class CruftRemover:
    """Deletes candidate paths from the filesystem.

    Directories are removed with ``shutil.rmtree``; files and symlinks
    (including links to directories) are unlinked, so a link target is
    never touched.
    """

    def remove(self, path: str) -> None:
        """Delete a single path and its contents.

        Args:
            path: Absolute path to delete.

        Raises:
            InvalidArgumentError: If ``path`` is relative or the filesystem root.
            DeletionError: If removal fails. ``kind`` distinguishes permission
                failures and paths that vanished before removal.
        """
        if not os.path.isabs(path):
            raise InvalidArgumentError(f"refusing to delete relative path: {path}")
        target = Path(path)
        if target == Path(target.anchor):
            raise InvalidArgumentError(f"refusing to delete filesystem root: {path}")

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                raise DeletionError(
                    f"path does not exist: {path}", path=path, kind=ErrorKind.NOT_FOUND
                )
        except OSError as e:
            raise DeletionError(
                f"cannot delete {path}: {e}", path=path, kind=classify_os_error(e)
            ) from e

        logger.debug("Deleted %s", path)
