"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from tingly_launcher.core.models import CacheEntry, ExtractionReport, LaunchResult

ProgressCallback = Callable[[int, int], None]


@runtime_checkable
class ArchiveSourcePort(Protocol):
    """Remote source of release archives (HTTP)."""

    def fetch(self, url: str, progress: ProgressCallback) -> bytes:
        """Download a whole archive into memory.

        Args:
            url: Archive URL.
            progress: Callback function(bytes_downloaded, total_bytes).
                total_bytes is 0 when the size is unknown.

        Returns:
            The archive contents.

        Raises:
            DownloadError: If the server answers with a non-success status
                or the transfer fails.
        """
        ...


@runtime_checkable
class ArchiveExtractorPort(Protocol):
    """Unpacks archive bytes into a directory."""

    def extract(
        self, data: bytes, destination: Path, *, apply_permissions: bool = True
    ) -> ExtractionReport:
        """Extract archive contents below destination.

        Args:
            data: Raw archive bytes.
            destination: Directory to extract into.
            apply_permissions: Whether to set POSIX file modes after writing.

        Returns:
            Report of extracted, skipped and conflicting entries.

        Raises:
            ArchiveError: If the archive is unreadable or a file cannot be written.
        """
        ...


@runtime_checkable
class CachePort(Protocol):
    """Local binary cache layout."""

    def entry(self, branch: str, filename: str) -> CacheEntry:
        """Return the cache entry for a binary of a version/branch."""
        ...

    def get(self, branch: str, filename: str) -> CacheEntry | None:
        """Return the cache entry if the binary is present, else None."""
        ...

    def prepare(self, entry: CacheEntry) -> None:
        """Create the directory that will hold the entry's files.

        Raises:
            CacheDirectoryError: If the directory cannot be created.
        """
        ...


@runtime_checkable
class ExecutorPort(Protocol):
    """Runs the cached binary as a child process."""

    def run(self, binary: Path, args: Sequence[str]) -> LaunchResult:
        """Run binary with args and wait for it to exit.

        Raises:
            LaunchError: If the process cannot be started.
        """
        ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Reports download progress to the user.

    This protocol defines the contract for progress display adapters.
    The core domain uses this to report progress without depending
    on any specific UI library.
    """

    def start_task(self, name: str, total: int) -> ProgressCallback:
        """Start tracking a download task.

        Args:
            name: Human-readable name for the task (archive filename).
            total: Total bytes to download, 0 if unknown.

        Returns:
            A ProgressCallback to call with (bytes_downloaded, total_bytes).
        """
        ...

    def finish_task(self, name: str) -> None:
        """Mark a task as complete.

        Args:
            name: The task name passed to start_task().
        """
        ...


class NullProgressReporter:
    """A ProgressReporter that produces no output.

    Used as the default when no progress reporting is desired.
    """

    def start_task(self, name: str, total: int) -> ProgressCallback:  # noqa: ARG002
        """Return a no-op callback."""
        return lambda _downloaded, _total: None

    def finish_task(self, name: str) -> None:
        """Do nothing."""
        _ = name  # Unused but required by protocol
