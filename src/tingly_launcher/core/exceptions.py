"""Domain exceptions for tingly_launcher.

All launcher errors inherit from LauncherError, allowing callers to catch
any launcher failure with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class LauncherError(Exception):
    """Base class for all tingly_launcher exceptions.

    Catch this to handle any error raised before or while launching.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class InvalidVersionError(LauncherError):
    """Raised when a transport version selector has an invalid format.

    Attributes:
        value: The rejected selector.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid transport version format: {value}")

    @property
    def recovery_hint(self) -> str:
        """Describe the accepted selector formats."""
        return (
            'Transport version must be either "latest", "v1.2.3", '
            'or "v1.2.3-prerelease1"'
        )


class UnsupportedPlatformError(LauncherError):
    """Raised when the host operating system has no published binary.

    Attributes:
        system: The host platform identifier.
        machine: The host architecture identifier.
    """

    def __init__(self, system: str, machine: str = "") -> None:
        self.system = system
        self.machine = machine
        super().__init__(f"Unsupported platform/arch: {system}/{machine}")

    @property
    def recovery_hint(self) -> str:
        """List the supported operating systems."""
        return "Supported platforms are Linux, macOS and Windows"


class CacheDirectoryError(LauncherError):
    """Raised when the binary cache directory cannot be created.

    Attributes:
        path: The directory that could not be created.
        cause: The underlying exception, if any.
    """

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to create directory {path}{detail}")

    @property
    def recovery_hint(self) -> str:
        """Suggest an alternative cache location."""
        return (
            f"Check permissions on {self.path.parent} "
            "or set TINGLY_BOX_CACHE_DIR to a writable directory"
        )


class DownloadError(LauncherError):
    """Raised when the release archive cannot be downloaded.

    Attributes:
        url: The URL that failed.
        status_code: HTTP status code, None for transport failures.
        reason: HTTP reason phrase, if any.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        reason: str = "",
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.cause = cause
        if status_code is not None:
            message = f"Download failed: {status_code} {reason}".rstrip()
        else:
            message = f"Download failed: {cause}"
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking connectivity and proxy settings."""
        return f"Check your network connection and proxy settings for {self.url}"


class ReleaseNotFoundError(DownloadError):
    """Raised when no archive is published for the requested version/platform."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the release exists."""
        return (
            f"Verify the release exists: {self.url}. "
            "Pass --transport-version to pick another version"
        )


class ArchiveError(LauncherError):
    """Raised when the downloaded archive cannot be extracted.

    Attributes:
        destination: The directory being extracted into.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        destination: Path,
        cause: Exception | None = None,
    ) -> None:
        self.destination = destination
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest clearing the partial extraction."""
        return f'Remove the partial download and retry: rm -rf "{self.destination}"'


class LaunchError(LauncherError):
    """Raised when the cached binary cannot be started.

    Attributes:
        binary: Path of the binary that failed to start.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        binary: Path,
        cause: Exception | None = None,
    ) -> None:
        self.binary = binary
        self.cause = cause
        super().__init__(message)


class BinaryNotFoundError(LaunchError):
    """Raised when the binary is missing at the resolved cache path."""

    def __init__(self, binary: Path, cause: Exception | None = None) -> None:
        super().__init__(f"Binary not found at: {binary}", binary=binary, cause=cause)

    @property
    def recovery_hint(self) -> str:
        """Suggest removing the cached version directory."""
        return f'Try removing the cached binary: rm -rf "{self.binary.parent.parent}"'


class BinaryPermissionError(LaunchError):
    """Raised when the operating system refuses to execute the binary."""

    def __init__(self, binary: Path, cause: Exception | None = None) -> None:
        super().__init__(
            f"Permission denied executing: {binary}", binary=binary, cause=cause
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file mode."""
        return f'Check binary permissions: chmod 755 "{self.binary}"'


class BinaryBusyError(LaunchError):
    """Raised when the binary file is busy or still being written."""

    def __init__(self, binary: Path, cause: Exception | None = None) -> None:
        super().__init__(
            f"Binary file is busy or being modified: {binary}",
            binary=binary,
            cause=cause,
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest waiting for the other writer."""
        return "Wait for other tingly-box processes to finish, then retry"
