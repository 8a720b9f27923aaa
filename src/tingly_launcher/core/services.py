"""Core domain services for tingly_launcher."""

import logging
from collections.abc import Sequence

from tingly_launcher.config import LauncherConfig
from tingly_launcher.core.models import (
    BinaryInstall,
    CacheEntry,
    DownloadTask,
    LaunchResult,
    PlatformTarget,
    VersionSelector,
)
from tingly_launcher.core.ports import (
    ArchiveExtractorPort,
    ArchiveSourcePort,
    CachePort,
    ExecutorPort,
    NullProgressReporter,
    ProgressReporter,
)


_LOGGER = logging.getLogger(__name__)


class Launcher:
    """Orchestrates resolving, caching and running the release binary."""

    def __init__(
        self,
        config: LauncherConfig,
        target: PlatformTarget,
        cache: CachePort,
        source: ArchiveSourcePort,
        extractor: ArchiveExtractorPort,
        executor: ExecutorPort,
    ) -> None:
        self._config = config
        self._target = target
        self._cache = cache
        self._source = source
        self._extractor = extractor
        self._executor = executor

    @classmethod
    def from_config(
        cls, config: LauncherConfig, target: PlatformTarget
    ) -> "Launcher":
        """Create a Launcher with the default adapters.

        Args:
            config: Launcher settings (cache root, proxy, base URL).
            target: Resolved host platform.

        Returns:
            Launcher with BinaryCache, HttpStorage, ZipArchiveExtractor and
            SubprocessExecutor.
        """
        from tingly_launcher.adapters.archive import ZipArchiveExtractor
        from tingly_launcher.adapters.cache import BinaryCache
        from tingly_launcher.adapters.executor import SubprocessExecutor
        from tingly_launcher.adapters.storage import HttpStorage

        return cls(
            config=config,
            target=target,
            cache=BinaryCache(config.cache_root, tool_name=config.tool_name),
            source=HttpStorage.from_config(config),
            extractor=ZipArchiveExtractor(),
            executor=SubprocessExecutor(apply_permissions=not target.is_windows),
        )

    @property
    def config(self) -> LauncherConfig:
        """Settings this launcher was built with."""
        return self._config

    @property
    def target(self) -> PlatformTarget:
        """Host platform this launcher resolves binaries for."""
        return self._target

    def _branch(self, version: VersionSelector) -> str:
        return version.branch(self._config.release_branch)

    def resolve(self, version: VersionSelector) -> CacheEntry:
        """Compute the cache entry for a version on this platform.

        Args:
            version: Release selector.

        Returns:
            The CacheEntry, whether or not the binary is present yet.
        """
        filename = self._target.binary_filename(self._config.binary_name)
        return self._cache.entry(self._branch(version), filename)

    def download_task(self, version: VersionSelector) -> DownloadTask:
        """Describe the archive download needed for a version.

        Args:
            version: Release selector.

        Returns:
            DownloadTask with the archive URL and extraction directory.
        """
        entry = self.resolve(version)
        archive = self._target.archive_filename(self._config.binary_name)
        return DownloadTask(
            url=self._config.archive_url(self._branch(version), archive),
            destination=entry.bin_dir,
            expected_files=(entry.binary_path.name,),
        )

    def install(
        self,
        version: VersionSelector,
        progress: ProgressReporter | None = None,
    ) -> BinaryInstall:
        """Download and extract the archive for a version.

        Always downloads, even if the binary is already cached.

        Args:
            version: Release selector.
            progress: Optional progress reporter for download feedback.

        Returns:
            BinaryInstall with the extraction report.

        Raises:
            CacheDirectoryError: If the cache directory cannot be created.
            DownloadError: If the archive cannot be downloaded.
            ArchiveError: If the archive cannot be extracted.
        """
        if progress is None:
            progress = NullProgressReporter()

        entry = self.resolve(version)
        task = self.download_task(version)
        self._cache.prepare(entry)

        name = self._target.archive_filename(self._config.binary_name)
        callback = progress.start_task(name, 0)
        try:
            data = self._source.fetch(task.url, callback)
        finally:
            progress.finish_task(name)

        report = self._extractor.extract(
            data, task.destination, apply_permissions=not self._target.is_windows
        )

        missing = [f for f in task.expected_files if not (task.destination / f).exists()]
        if missing:
            _LOGGER.warning("Archive %s did not provide %s", task.url, ", ".join(missing))

        return BinaryInstall(entry=entry, downloaded=True, report=report)

    def ensure_binary(
        self,
        version: VersionSelector,
        progress: ProgressReporter | None = None,
    ) -> BinaryInstall:
        """Return the cached binary, downloading it on a cache miss.

        A cache hit performs no network request.

        Args:
            version: Release selector.
            progress: Optional progress reporter for download feedback.

        Returns:
            BinaryInstall; downloaded is False on a cache hit.
        """
        filename = self._target.binary_filename(self._config.binary_name)
        cached = self._cache.get(self._branch(version), filename)
        if cached is not None:
            _LOGGER.debug("Cache hit: %s", cached.binary_path)
            return BinaryInstall(entry=cached)
        return self.install(version, progress=progress)

    def run(self, entry: CacheEntry, args: Sequence[str]) -> LaunchResult:
        """Run the cached binary with args.

        Raises:
            LaunchError: If the binary cannot be started.
        """
        return self._executor.run(entry.binary_path, args)

    def launch(
        self,
        version: VersionSelector,
        args: Sequence[str],
        progress: ProgressReporter | None = None,
    ) -> LaunchResult:
        """Ensure the binary is cached, then run it.

        Args:
            version: Release selector.
            args: Arguments forwarded to the binary.
            progress: Optional progress reporter for download feedback.

        Returns:
            LaunchResult of the child process.
        """
        install = self.ensure_binary(version, progress=progress)
        return self.run(install.entry, args)
