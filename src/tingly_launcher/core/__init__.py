"""Core domain module for tingly_launcher.

This module contains pure Python domain models, port definitions and the
launcher service. Adapters are only imported lazily by the service.
"""

from tingly_launcher.core.models import (
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
    ProgressCallback,
)


__all__ = [
    "ArchiveExtractorPort",
    "ArchiveSourcePort",
    "CacheEntry",
    "CachePort",
    "DownloadTask",
    "ExecutorPort",
    "LaunchResult",
    "PlatformTarget",
    "ProgressCallback",
    "VersionSelector",
]
