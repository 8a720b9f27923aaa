"""Core domain models for tingly_launcher.

These models are pure Python dataclasses with no I/O dependencies beyond
path existence checks. They represent the values that flow through one
launcher invocation.
"""

from __future__ import annotations

import re
import signal as signal_module
from dataclasses import dataclass, field
from pathlib import Path

from tingly_launcher.core.exceptions import InvalidVersionError


LATEST = "latest"

_VERSION_PATTERN = re.compile(r"v[0-9]+\.[0-9]+\.[0-9]+(?:-[0-9A-Za-z.-]+)?")


@dataclass(frozen=True, slots=True)
class PlatformTarget:
    """Resolved operating system and architecture of the host.

    Attributes:
        os_name: Platform name used in release assets ("linux", "macos", "windows").
        arch: Architecture name used in release assets (e.g., "amd64", "arm64").
        suffix: Executable file suffix (".exe" on Windows, empty elsewhere).

    Example:
        >>> target = PlatformTarget(os_name="linux", arch="amd64")
        >>> target.archive_filename("tingly-box")
        'tingly-box-linux-amd64.zip'
    """

    os_name: str
    arch: str
    suffix: str = ""

    @property
    def is_windows(self) -> bool:
        """Whether the target is a Windows host."""
        return self.os_name == "windows"

    def binary_filename(self, binary_name: str) -> str:
        """Name of the extracted binary for this target."""
        return f"{binary_name}-{self.os_name}-{self.arch}{self.suffix}"

    def archive_filename(self, binary_name: str) -> str:
        """Name of the release archive for this target."""
        return f"{binary_name}-{self.os_name}-{self.arch}.zip"


@dataclass(frozen=True, slots=True)
class VersionSelector:
    """Which release of the binary to fetch.

    Either the literal "latest" or a semantic version tag such as
    "v1.2.3" or "v1.2.3-rc.1".

    Attributes:
        value: The validated selector string.

    Raises:
        InvalidVersionError: If value is neither "latest" nor a version tag.
    """

    value: str = LATEST

    def __post_init__(self) -> None:
        """Validate the selector format."""
        if self.value == LATEST:
            return
        if _VERSION_PATTERN.fullmatch(self.value) is None:
            raise InvalidVersionError(self.value)

    @property
    def is_latest(self) -> bool:
        """Whether the selector tracks the release branch alias."""
        return self.value == LATEST

    def branch(self, release_branch: str = LATEST) -> str:
        """Return the URL/cache segment for this selector.

        Args:
            release_branch: Branch alias substituted for "latest".

        Returns:
            release_branch when the selector is "latest", else the version tag.
        """
        return release_branch if self.is_latest else self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """On-disk location of a cached binary.

    Attributes:
        bin_dir: Version-scoped directory holding the extracted archive.
        binary_path: Full path to the platform binary inside bin_dir.
    """

    bin_dir: Path
    binary_path: Path

    @property
    def exists(self) -> bool:
        """Whether the binary file is present.

        This is an existence-only check; no checksum is verified.
        """
        return self.binary_path.exists()


@dataclass(frozen=True, slots=True)
class DownloadTask:
    """One archive fetch and extract operation.

    Attributes:
        url: Source URL of the zip archive.
        destination: Directory the archive is extracted into.
        expected_files: Relative names the archive is expected to provide.
    """

    url: str
    destination: Path
    expected_files: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ExtractionReport:
    """Outcome of extracting one archive.

    Attributes:
        extracted: Paths of files written to disk.
        skipped: Archive entry names ignored (directories and OS metadata).
        conflicts: Target paths left untouched because a directory exists there.
    """

    extracted: tuple[Path, ...] = ()
    skipped: tuple[str, ...] = ()
    conflicts: tuple[Path, ...] = ()

    @property
    def complete(self) -> bool:
        """True when no entry was skipped because of a directory conflict."""
        return not self.conflicts


@dataclass(frozen=True, slots=True)
class BinaryInstall:
    """Result of making sure a binary is available locally.

    Attributes:
        entry: The cache entry for the binary.
        downloaded: True if the archive was fetched during this call.
        report: Extraction report when downloaded, None on a cache hit.
    """

    entry: CacheEntry
    downloaded: bool = False
    report: ExtractionReport | None = None


@dataclass(frozen=True, slots=True)
class LaunchResult:
    """Outcome of running the binary.

    Attributes:
        exit_code: The child's exit code, None if it was killed by a signal.
        signal: Name of the terminating signal (e.g., "SIGTERM"), if any.
    """

    exit_code: int | None
    signal: str | None = field(default=None)

    @classmethod
    def from_returncode(cls, returncode: int) -> LaunchResult:
        """Build a result from a subprocess return code.

        Negative return codes mean the child was terminated by a signal.
        """
        if returncode >= 0:
            return cls(exit_code=returncode)
        try:
            name = signal_module.Signals(-returncode).name
        except ValueError:
            name = f"SIG{-returncode}"
        return cls(exit_code=None, signal=name)

    @property
    def succeeded(self) -> bool:
        """Whether the child exited with status 0."""
        return self.exit_code == 0

    @property
    def exit_status(self) -> int:
        """Exit status the launcher should report for this result."""
        return self.exit_code if self.exit_code is not None else 1
