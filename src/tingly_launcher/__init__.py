"""tingly_launcher - Installer and launcher for the tingly-box gateway.

This package downloads the platform build of the tingly-box binary on
first use, caches it per version, and runs it with forwarded arguments.

Example:
    >>> from tingly_launcher import Launcher, LauncherConfig, resolve_platform
    >>> from tingly_launcher import VersionSelector
    >>> config = LauncherConfig.from_environ()
    >>> launcher = Launcher.from_config(config, resolve_platform())
    >>> result = launcher.launch(VersionSelector("latest"), ["--version"])
"""

from tingly_launcher.adapters.archive import ZipArchiveExtractor
from tingly_launcher.adapters.cache import BinaryCache
from tingly_launcher.adapters.executor import SubprocessExecutor
from tingly_launcher.adapters.storage import HttpStorage
from tingly_launcher.config import LauncherConfig
from tingly_launcher.core.arguments import DEFAULT_ARGS, LaunchArgs, parse_launch_args
from tingly_launcher.core.exceptions import (
    ArchiveError,
    BinaryBusyError,
    BinaryNotFoundError,
    BinaryPermissionError,
    CacheDirectoryError,
    DownloadError,
    InvalidVersionError,
    LaunchError,
    LauncherError,
    ReleaseNotFoundError,
    UnsupportedPlatformError,
)
from tingly_launcher.core.models import (
    BinaryInstall,
    CacheEntry,
    DownloadTask,
    ExtractionReport,
    LaunchResult,
    PlatformTarget,
    VersionSelector,
)
from tingly_launcher.core.platforms import resolve_platform
from tingly_launcher.core.ports import (
    ArchiveExtractorPort,
    ArchiveSourcePort,
    CachePort,
    ExecutorPort,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
)
from tingly_launcher.core.services import Launcher
from tingly_launcher.progress import RichProgressReporter, TextProgressReporter


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ARGS",
    "ArchiveError",
    "ArchiveExtractorPort",
    "ArchiveSourcePort",
    "BinaryBusyError",
    "BinaryCache",
    "BinaryInstall",
    "BinaryNotFoundError",
    "BinaryPermissionError",
    "CacheDirectoryError",
    "CacheEntry",
    "CachePort",
    "DownloadError",
    "DownloadTask",
    "ExecutorPort",
    "ExtractionReport",
    "HttpStorage",
    "InvalidVersionError",
    "LaunchArgs",
    "LaunchError",
    "LaunchResult",
    "Launcher",
    "LauncherConfig",
    "LauncherError",
    "NullProgressReporter",
    "PlatformTarget",
    "ProgressCallback",
    "ProgressReporter",
    "ReleaseNotFoundError",
    "RichProgressReporter",
    "SubprocessExecutor",
    "TextProgressReporter",
    "UnsupportedPlatformError",
    "VersionSelector",
    "ZipArchiveExtractor",
    "__version__",
    "parse_launch_args",
    "resolve_platform",
]
