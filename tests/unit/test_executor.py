"""Unit tests for the subprocess executor adapter."""

from __future__ import annotations

import errno
import stat
import subprocess
from pathlib import Path

import pytest
from conftest import posix_only

from tingly_launcher.adapters.executor import SubprocessExecutor, ensure_executable
from tingly_launcher.core.exceptions import (
    BinaryBusyError,
    BinaryNotFoundError,
    BinaryPermissionError,
    LaunchError,
)
from tingly_launcher.core.ports import ExecutorPort


def _script(path: Path, body: str, mode: int = 0o755) -> Path:
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(mode)
    return path


@pytest.mark.executor
@posix_only
class TestEnsureExecutable:
    """Tests for ensure_executable()."""

    def test_sets_executable_mode(self, tmp_path: Path) -> None:
        """A non-executable file becomes 0o755."""
        binary = _script(tmp_path / "tool", "exit 0", mode=0o644)

        assert ensure_executable(binary) is True
        assert stat.S_IMODE(binary.stat().st_mode) == 0o755

    def test_is_idempotent(self, tmp_path: Path) -> None:
        """An executable file is left untouched."""
        binary = _script(tmp_path / "tool", "exit 0", mode=0o700)

        assert ensure_executable(binary) is False
        assert stat.S_IMODE(binary.stat().st_mode) == 0o700

    def test_missing_file_is_ignored(self, tmp_path: Path) -> None:
        """Missing files are left for the executor to report."""
        assert ensure_executable(tmp_path / "missing") is False


@pytest.mark.executor
@posix_only
class TestRun:
    """Tests for SubprocessExecutor.run()."""

    def test_satisfies_protocol(self) -> None:
        """SubprocessExecutor should implement ExecutorPort."""
        assert isinstance(SubprocessExecutor(), ExecutorPort)

    def test_success(self, tmp_path: Path) -> None:
        """Exit status 0 is a successful result."""
        binary = _script(tmp_path / "tool", "exit 0")

        result = SubprocessExecutor().run(binary, [])

        assert result.succeeded

    def test_propagates_exit_code(self, tmp_path: Path) -> None:
        """The child's exact exit code is returned."""
        binary = _script(tmp_path / "tool", "exit 7")

        result = SubprocessExecutor().run(binary, [])

        assert result.exit_code == 7
        assert result.exit_status == 7

    def test_forwards_arguments(self, tmp_path: Path) -> None:
        """Arguments reach the child unchanged."""
        out = tmp_path / "args.txt"
        binary = _script(tmp_path / "tool", f'printf "%s\\n" "$@" > "{out}"')

        SubprocessExecutor().run(binary, ["start", "--daemon", "two words"])

        assert out.read_text().splitlines() == ["start", "--daemon", "two words"]

    def test_signal_termination(self, tmp_path: Path) -> None:
        """A child killed by a signal reports the signal name."""
        binary = _script(tmp_path / "tool", "kill -TERM $$")

        result = SubprocessExecutor().run(binary, [])

        assert result.exit_code is None
        assert result.signal == "SIGTERM"
        assert result.exit_status == 1

    def test_makes_binary_executable_before_running(self, tmp_path: Path) -> None:
        """A freshly extracted non-executable binary still runs."""
        binary = _script(tmp_path / "tool", "exit 0", mode=0o644)

        result = SubprocessExecutor(apply_permissions=True).run(binary, [])

        assert result.succeeded

    def test_missing_binary_raises(self, tmp_path: Path) -> None:
        """A missing binary raises BinaryNotFoundError."""
        binary = tmp_path / "latest" / "bin" / "tool"

        with pytest.raises(BinaryNotFoundError) as exc_info:
            SubprocessExecutor().run(binary, [])

        assert exc_info.value.binary == binary
        assert str(tmp_path / "latest") in exc_info.value.recovery_hint

    def test_permission_denied_raises(self, tmp_path: Path) -> None:
        """A non-executable binary raises BinaryPermissionError."""
        binary = _script(tmp_path / "tool", "exit 0", mode=0o644)

        with pytest.raises(BinaryPermissionError) as exc_info:
            SubprocessExecutor(apply_permissions=False).run(binary, [])

        assert "chmod" in exc_info.value.recovery_hint

    def test_text_file_busy_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """ETXTBSY is reported as a busy binary."""

        def busy(*_args: object, **_kwargs: object) -> None:
            raise OSError(errno.ETXTBSY, "Text file busy")

        monkeypatch.setattr(subprocess, "run", busy)
        binary = _script(tmp_path / "tool", "exit 0")

        with pytest.raises(BinaryBusyError):
            SubprocessExecutor().run(binary, [])

    def test_other_os_errors_raise_launch_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Unexpected OS errors become a generic LaunchError."""

        def broken(*_args: object, **_kwargs: object) -> None:
            raise OSError(errno.ENOEXEC, "Exec format error")

        monkeypatch.setattr(subprocess, "run", broken)
        binary = _script(tmp_path / "tool", "exit 0")

        with pytest.raises(LaunchError) as exc_info:
            SubprocessExecutor().run(binary, [])

        assert type(exc_info.value) is LaunchError
        assert isinstance(exc_info.value.cause, OSError)
