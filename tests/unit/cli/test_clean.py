"""Unit tests for the clean command."""

import os
import shutil
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from tmpsweep.cli.main import app
from tmpsweep.sweep.errors import ErrorKind, ExecutionError
from typer.testing import CliRunner

runner = CliRunner()


def _estimator(size: int = 1024) -> MagicMock:
    """Create a mock DuSizeEstimator class whose instances return ``size``."""
    estimator_cls = MagicMock()
    estimator_cls.return_value.estimate_size.return_value = size
    return estimator_cls


class TestCleanCommand:
    """Tests for tmpsweep clean."""

    def test_dry_run_keeps_files(self, tmp_root: Path) -> None:
        """--dry-run reports candidates and deletes nothing."""
        with patch("tmpsweep.cli.commands.clean.DuSizeEstimator", _estimator()):
            result = runner.invoke(app, ["clean", "--tmp-root", str(tmp_root), "--dry-run"])

        assert result.exit_code == 0
        assert f"DRY-RUN: would delete {tmp_root / 'go-build-123'}" in result.output
        assert "keepme" not in result.output
        assert "estimated savings ~3K from 3 paths" in result.output
        assert (tmp_root / "go-build-123").exists()
        assert (tmp_root / "snapshot.bin").exists()

    def test_live_run_deletes_candidates(self, tmp_root: Path) -> None:
        """A live run removes eligible entries only."""
        with patch("tmpsweep.cli.commands.clean.DuSizeEstimator", _estimator()):
            result = runner.invoke(app, ["clean", "-r", str(tmp_root)])

        assert result.exit_code == 0
        assert f"deleting {tmp_root / 'snapshot.bin'}" in result.output
        assert sorted(p.name for p in tmp_root.iterdir()) == ["keepme", "report.txt"]

    def test_timeout_from_config(self, tmp_root: Path, tmp_path: Path) -> None:
        """The du timeout from the config file reaches the estimator."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("du_timeout_seconds = 7.5\n")
        estimator_cls = _estimator()

        with patch("tmpsweep.cli.commands.clean.DuSizeEstimator", estimator_cls):
            result = runner.invoke(
                app,
                ["clean", "-r", str(tmp_root), "-n", "--config", str(config_file)],
            )

        assert result.exit_code == 0
        estimator_cls.assert_called_once_with(timeout=7.5)

    def test_tmp_root_from_config(self, tmp_root: Path, tmp_path: Path) -> None:
        """Without --tmp-root the configured root is swept."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(f'tmp_root = "{tmp_root}"\n')

        with patch("tmpsweep.cli.commands.clean.DuSizeEstimator", _estimator()):
            result = runner.invoke(app, ["clean", "-n", "-c", str(config_file)])

        assert result.exit_code == 0
        assert str(tmp_root / "gopls.abc-heap.pb.gz") in result.output

    def test_rules_from_config(self, tmp_root: Path, tmp_path: Path) -> None:
        """Configured rules replace the defaults they name."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[rules]\nfile_prefixes = ["report"]\n')

        with patch("tmpsweep.cli.commands.clean.DuSizeEstimator", _estimator()):
            result = runner.invoke(
                app, ["clean", "-r", str(tmp_root), "-n", "-c", str(config_file)]
            )

        assert result.exit_code == 0
        assert "report.txt" in result.output
        assert "snapshot.bin" not in result.output

    def test_missing_root(self, tmp_path: Path) -> None:
        """An unlistable root exits with status 1."""
        with patch("tmpsweep.cli.commands.clean.DuSizeEstimator", _estimator()):
            result = runner.invoke(app, ["clean", "-r", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "ERROR:" in result.output
        assert "cannot list" in result.output

    def test_empty_root(self) -> None:
        """An empty --tmp-root is rejected."""
        result = runner.invoke(app, ["clean", "--tmp-root", ""])

        assert result.exit_code == 1
        assert "missing required tmp root" in result.output

    def test_invalid_config(self, tmp_path: Path) -> None:
        """A broken config file exits with status 1."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("not = [valid\n")

        result = runner.invoke(app, ["clean", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_estimation_failure_deletes_nothing(self, tmp_root: Path) -> None:
        """A fatal estimation error aborts before deleting."""
        estimator_cls = MagicMock()
        estimator_cls.return_value.estimate_size.side_effect = ExecutionError(
            "cannot run du: [Errno 2] No such file or directory"
        )

        with patch("tmpsweep.cli.commands.clean.DuSizeEstimator", estimator_cls):
            result = runner.invoke(app, ["clean", "-r", str(tmp_root)])

        assert result.exit_code == 1
        assert "cannot run du" in result.output
        assert (tmp_root / "go-build-123").exists()

    def test_permission_skips_are_counted(self, tmp_root: Path) -> None:
        """Deletions skipped for permissions are summarized, exit 0."""
        estimator_cls = MagicMock()
        estimator_cls.return_value.estimate_size.side_effect = ExecutionError(
            "du exited with status 1: Permission denied",
            kind=ErrorKind.PERMISSION_DENIED,
        )

        with (
            patch("tmpsweep.cli.commands.clean.DuSizeEstimator", estimator_cls),
            patch(
                "tmpsweep.sweep.operator.shutil.rmtree",
                side_effect=PermissionError(13, "Permission denied"),
            ),
        ):
            result = runner.invoke(app, ["clean", "-r", str(tmp_root)])

        assert result.exit_code == 0
        assert "estimated savings ~0B from 3 paths" in result.output
        assert "1 path(s) could not be deleted" in result.output
        assert (tmp_root / "go-build-123").exists()
        assert not (tmp_root / "snapshot.bin").exists()


@pytest.mark.skipif(
    shutil.which("du") is None or not sys.platform.startswith("linux"),
    reason="requires GNU du",
)
class TestCleanUndecodableNames:
    """Runs clean with the real du on names that are not valid UTF-8."""

    def _make_entry(self, tmp_root: Path) -> bytes:
        raw = os.path.join(os.fsencode(tmp_root), b"snapshot\xff")
        with open(raw, "wb") as f:
            f.write(b"\x00" * 128)
        return raw

    def test_dry_run(self, tmp_root: Path) -> None:
        """The entry is reported and kept."""
        raw = self._make_entry(tmp_root)

        result = runner.invoke(app, ["clean", "--dry-run", "--tmp-root", str(tmp_root)])

        assert result.exit_code == 0, result.output
        assert "would delete" in result.output
        assert "snapshot\ufffd" in result.output
        assert os.path.exists(raw)

    def test_live_run(self, tmp_root: Path) -> None:
        """The entry is deleted like any other candidate."""
        raw = self._make_entry(tmp_root)

        result = runner.invoke(app, ["clean", "--tmp-root", str(tmp_root)])

        assert result.exit_code == 0, result.output
        assert not os.path.exists(raw)
