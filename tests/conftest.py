"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def mock_du_output() -> str:
    """Sample ``du -s --block-size=1`` output for a directory."""
    return "1482752\t/tmp/go-build3391023\n"


@pytest.fixture
def mock_du_permission_stderr() -> str:
    """Sample du stderr when part of the tree is unreadable."""
    return "du: cannot read directory '/tmp/go-build3391023/b001': Permission denied\n"


@pytest.fixture
def tmp_root(tmp_path: Path) -> Path:
    """A temp root holding a mix of disposable and unrelated entries."""
    root = tmp_path / "tmp"
    root.mkdir()
    (root / "go-build-123").mkdir()
    (root / "go-build-123" / "b001").mkdir()
    (root / "go-build-123" / "b001" / "importcfg").write_text("packagefile fmt=fmt.a\n")
    (root / "keepme").mkdir()
    (root / "keepme" / "notes.txt").write_text("important\n")
    (root / "snapshot.bin").write_bytes(b"\x00" * 64)
    (root / "gopls.abc-heap.pb.gz").write_bytes(b"\x1f\x8b")
    (root / "report.txt").write_text("unrelated\n")
    return root


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo handlers and levels installed by ``configure_logging``."""
    logger = logging.getLogger("tmpsweep")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
