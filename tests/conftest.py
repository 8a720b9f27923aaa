"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import io
import stat
import sys
import zipfile
from collections.abc import Sequence
from pathlib import Path

import pytest

from tingly_launcher.config import LauncherConfig
from tingly_launcher.core.models import LaunchResult, PlatformTarget
from tingly_launcher.core.ports import ProgressCallback


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "storage: HTTP archive source")
    config.addinivalue_line("markers", "cache: Binary cache adapter")
    config.addinivalue_line("markers", "archive: Zip extraction adapter")
    config.addinivalue_line("markers", "executor: Process executor adapter")
    config.addinivalue_line("markers", "progress: Progress reporters")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="POSIX permissions and shell scripts"
)


def make_zip(entries: dict[str, bytes | None], modes: dict[str, int] | None = None) -> bytes:
    """Build an in-memory zip archive.

    Args:
        entries: Entry name to contents. Names ending in "/" with None
            contents become directory entries.
        modes: Optional POSIX mode per entry name. Entries without one
            record permission bits of 0.

    Returns:
        The archive bytes.
    """
    modes = modes or {}
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in entries.items():
            info = zipfile.ZipInfo(name)
            kind = stat.S_IFDIR if name.endswith("/") else stat.S_IFREG
            # A non-zero file type keeps zipfile from filling in 0o600
            info.external_attr = (kind | modes.get(name, 0)) << 16
            archive.writestr(info, content or b"")
    return buffer.getvalue()


class FakeSource:
    """ArchiveSourcePort double that serves canned archives and records URLs."""

    def __init__(self, data: bytes = b"", error: Exception | None = None) -> None:
        self.data = data
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url: str, progress: ProgressCallback) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        progress(len(self.data), len(self.data))
        return self.data


class FakeExecutor:
    """ExecutorPort double that records calls and returns a fixed result."""

    def __init__(
        self, result: LaunchResult | None = None, error: Exception | None = None
    ) -> None:
        self.result = result or LaunchResult(exit_code=0)
        self.error = error
        self.calls: list[tuple[Path, tuple[str, ...]]] = []

    def run(self, binary: Path, args: Sequence[str]) -> LaunchResult:
        self.calls.append((binary, tuple(args)))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def linux_target() -> PlatformTarget:
    """The linux/amd64 release target."""
    return PlatformTarget(os_name="linux", arch="amd64")


@pytest.fixture
def config(tmp_path: Path) -> LauncherConfig:
    """Launcher settings with the cache rooted in a temporary directory."""
    return LauncherConfig(
        cache_root=tmp_path / "cache",
        base_url="https://downloads.example.com/releases",
    )


@pytest.fixture
def binary_zip() -> bytes:
    """Archive containing the linux/amd64 binary and macOS metadata."""
    return make_zip(
        {
            "tingly-box-linux-amd64": b"#!/bin/sh\nexit 0\n",
            "__MACOSX/._tingly-box-linux-amd64": b"meta",
        },
        modes={"tingly-box-linux-amd64": 0o755},
    )


@pytest.fixture
def fake_source(binary_zip: bytes) -> FakeSource:
    """Archive source serving binary_zip."""
    return FakeSource(binary_zip)


@pytest.fixture
def fake_executor() -> FakeExecutor:
    """Executor that pretends the binary exited 0."""
    return FakeExecutor()
