"""File-based binary cache adapter implementing CachePort."""

from __future__ import annotations

from pathlib import Path

from tingly_launcher.core.exceptions import CacheDirectoryError
from tingly_launcher.core.models import CacheEntry


class BinaryCache:
    """Version-scoped cache of extracted release binaries.

    Binaries live under
    ``<cache_root>/<tool_name>/<version-or-branch>/bin/<binary filename>``.
    Entries are never evicted automatically.

    Attributes:
        cache_root: Platform cache directory (e.g., ~/.cache).
        tool_name: Namespace directory below cache_root.
    """

    def __init__(self, cache_root: Path, tool_name: str = "tingly-box") -> None:
        """Initialize the cache below a root directory.

        Args:
            cache_root: Platform cache directory.
            tool_name: Namespace directory created below cache_root.
        """
        self.cache_root = cache_root
        self.tool_name = tool_name

    @property
    def root(self) -> Path:
        """Directory holding every cached version of the tool."""
        return self.cache_root / self.tool_name

    def _bin_dir(self, branch: str) -> Path:
        """Get the directory an archive for branch is extracted into."""
        return self.root / branch / "bin"

    def entry(self, branch: str, filename: str) -> CacheEntry:
        """Return the cache entry for a binary, whether or not it exists.

        Args:
            branch: Version tag or branch alias namespacing the entry.
            filename: Platform-specific binary filename.

        Returns:
            CacheEntry describing where the binary lives.
        """
        bin_dir = self._bin_dir(branch)
        return CacheEntry(bin_dir=bin_dir, binary_path=bin_dir / filename)

    def get(self, branch: str, filename: str) -> CacheEntry | None:
        """Get the cache entry if the binary is present, None otherwise.

        Args:
            branch: Version tag or branch alias namespacing the entry.
            filename: Platform-specific binary filename.

        Returns:
            The CacheEntry if its binary file exists, else None.
        """
        cached = self.entry(branch, filename)
        if not cached.exists:
            return None
        return cached

    def prepare(self, entry: CacheEntry) -> None:
        """Create the entry's bin directory (and parents).

        Args:
            entry: The cache entry about to be populated.

        Raises:
            CacheDirectoryError: If the directory cannot be created.
        """
        try:
            entry.bin_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheDirectoryError(entry.bin_dir, cause=e) from e
