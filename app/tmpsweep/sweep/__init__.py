"""Temp directory sweep module.

This module provides the name rules, matcher, size estimation,
removal, and orchestration for sweeping disposable build and test
artifacts out of a temp directory.
"""

from tmpsweep.sweep.errors import (
    ConfigurationError,
    DeletionError,
    ErrorKind,
    EstimationError,
    ExecutionError,
    InvalidArgumentError,
    ListingError,
    SweepError,
    UnparseableOutputError,
)
from tmpsweep.sweep.estimator import DuSizeEstimator, SizeEstimator, parse_du_output
from tmpsweep.sweep.matcher import CruftMatcher
from tmpsweep.sweep.models import DirectoryEntry, RemovalResult, RunSummary
from tmpsweep.sweep.operator import CruftRemover, Remover
from tmpsweep.sweep.orchestrator import CleanupOrchestrator
from tmpsweep.sweep.rules import DEFAULT_RULES, MatchRules
from tmpsweep.sweep.scanner import list_directory, select_candidates

__all__ = [
    "DEFAULT_RULES",
    "CleanupOrchestrator",
    "ConfigurationError",
    "CruftMatcher",
    "CruftRemover",
    "DeletionError",
    "DirectoryEntry",
    "DuSizeEstimator",
    "ErrorKind",
    "EstimationError",
    "ExecutionError",
    "InvalidArgumentError",
    "ListingError",
    "MatchRules",
    "RemovalResult",
    "Remover",
    "RunSummary",
    "SizeEstimator",
    "SweepError",
    "UnparseableOutputError",
    "list_directory",
    "parse_du_output",
    "select_candidates",
]
