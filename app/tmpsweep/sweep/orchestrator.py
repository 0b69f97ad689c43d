"""Sweep run orchestration.

Composes listing, matching, size estimation, and removal into a single
run. The estimation pass always finishes before the first deletion, so
the reported total describes the directory as it was found.

Permission failures during estimation or removal are reported and
skipped; every other failure aborts the run by propagating the error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from tmpsweep.sweep.errors import ConfigurationError, SweepError
from tmpsweep.sweep.estimator import DuSizeEstimator, SizeEstimator
from tmpsweep.sweep.matcher import CruftMatcher
from tmpsweep.sweep.models import DirectoryEntry, RemovalResult, RunSummary
from tmpsweep.sweep.operator import CruftRemover, Remover
from tmpsweep.sweep.scanner import list_directory, select_candidates
from tmpsweep.utils.formatting import print_info, print_success, print_warning

logger = logging.getLogger(__name__)

Lister = Callable[[str], list[DirectoryEntry]]


class CleanupOrchestrator:
    """Runs a complete sweep of one temp root.

    Attributes:
        _matcher: Decides which entries are candidates.
        _estimator: Measures candidate sizes.
        _remover: Deletes candidates outside dry-run mode.
        _lister: Lists the root directory.
    """

    def __init__(
        self,
        matcher: CruftMatcher | None = None,
        estimator: SizeEstimator | None = None,
        remover: Remover | None = None,
        lister: Lister | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            matcher: Matcher to use. Defaults to the built-in rules.
            estimator: Size estimator. Defaults to ``du``.
            remover: Remover used for live runs.
            lister: Directory lister. Defaults to ``list_directory``.
        """
        self._matcher = matcher or CruftMatcher()
        self._estimator = estimator or DuSizeEstimator()
        self._remover = remover or CruftRemover()
        self._lister = lister or list_directory

    def run(self, root: str, dry_run: bool = False) -> RunSummary:
        """Sweep a root directory.

        Args:
            root: Directory whose immediate children are considered.
            dry_run: If True, report what would be deleted without deleting.

        Returns:
            RunSummary describing the candidates, estimated total, and
            per-candidate removal outcome.

        Raises:
            ConfigurationError: If ``root`` is empty.
            ListingError: If ``root`` cannot be listed.
            EstimationError: If a size cannot be measured for a reason
                other than permissions.
            DeletionError: If a candidate cannot be removed for a reason
                other than permissions. Earlier deletions are kept.
        """
        if not root:
            raise ConfigurationError("missing required tmp root")

        entries = self._lister(root)
        candidates = select_candidates(root, entries, self._matcher)
        logger.debug("%d of %d entries in %s are candidates", len(candidates), len(entries), root)

        total_bytes, estimation_skipped = self._estimate(candidates)
        results = self._remove(candidates, dry_run)

        summary = RunSummary(
            root=root,
            candidates=tuple(candidates),
            total_bytes=total_bytes,
            dry_run=dry_run,
            estimation_skipped=tuple(estimation_skipped),
            results=tuple(results),
        )
        print_success(
            f"estimated savings ~{summary.size_human} from {summary.candidate_count} paths"
        )
        return summary

    def _estimate(self, candidates: list[str]) -> tuple[int, list[str]]:
        """Sum candidate sizes, skipping those that cannot be read.

        Returns:
            Tuple of (total bytes, paths skipped for lack of permission).
        """
        total = 0
        skipped: list[str] = []
        for path in candidates:
            try:
                total += self._estimator.estimate_size(path)
            except SweepError as e:
                if not e.is_permission_denied:
                    raise
                logger.debug("Permission denied estimating %s: %s", path, e)
                print_warning(f"skipping {path} for estimation: {e}")
                skipped.append(path)
        return total, skipped

    def _remove(self, candidates: list[str], dry_run: bool) -> list[RemovalResult]:
        """Delete candidates in order, or report them in dry-run mode."""
        results: list[RemovalResult] = []
        for path in candidates:
            if dry_run:
                print_info(f"DRY-RUN: would delete {path}")
                results.append(RemovalResult(path=path, removed=False, dry_run=True))
                continue

            print_info(f"deleting {path}")
            try:
                self._remover.remove(path)
            except SweepError as e:
                if not e.is_permission_denied:
                    raise
                logger.debug("Permission denied deleting %s: %s", path, e)
                print_warning(f"skipping {path}: {e}")
                results.append(RemovalResult(path=path, removed=False, error=str(e)))
                continue
            results.append(RemovalResult(path=path, removed=True))
        return results
