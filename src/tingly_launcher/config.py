"""Configuration for tingly_launcher.

Environment-derived settings are read once at startup into a
LauncherConfig, which is then passed explicitly to the cache, download
and logging setup.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from tingly_launcher.core.exceptions import UnsupportedPlatformError
from tingly_launcher.core.models import LATEST
from tingly_launcher.core.platforms import normalize_system


if TYPE_CHECKING:
    from collections.abc import Mapping


DEFAULT_BASE_URL = "https://github.com/tingly-dev/tingly-box/releases/download"
DEFAULT_LOG_LEVEL = "WARNING"
TOOL_NAME = "tingly-box"
USER_AGENT = "tingly-box-pypi"

CACHE_DIR_ENV = "TINGLY_BOX_CACHE_DIR"
BASE_URL_ENV = "TINGLY_BOX_BASE_URL"
LOG_LEVEL_ENV = "TINGLY_BOX_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """Settings for one launcher invocation.

    Attributes:
        cache_root: Base directory for user-scoped cached application data.
        proxy_url: Proxy that all download requests are routed through, if any.
        base_url: Base URL that release archives are published under.
        release_branch: URL/cache segment used when the selector is "latest".
        tool_name: Directory name of the launcher's cache namespace.
        binary_name: Name prefix of the released binary and archive.
        user_agent: User-Agent header sent with download requests.
        log_level: Logging level name for diagnostic output.

    Example:
        >>> config = LauncherConfig(cache_root=Path("/tmp/cache"))
        >>> config.base_url
        'https://github.com/tingly-dev/tingly-box/releases/download'
    """

    cache_root: Path
    proxy_url: str | None = None
    base_url: str = DEFAULT_BASE_URL
    release_branch: str = LATEST
    tool_name: str = TOOL_NAME
    binary_name: str = TOOL_NAME
    user_agent: str = USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        system: str | None = None,
    ) -> LauncherConfig:
        """Build configuration from environment variables.

        Args:
            environ: Environment mapping. Defaults to os.environ.
            system: A sys.platform style identifier. Defaults to the host's.

        Returns:
            LauncherConfig populated from the environment.

        Raises:
            UnsupportedPlatformError: If no cache directory convention exists
                for the platform.
        """
        if environ is None:
            environ = os.environ
        return cls(
            cache_root=resolve_cache_root(environ, system),
            proxy_url=resolve_proxy(environ),
            base_url=(environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/"),
            log_level=(environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper(),
        )

    def archive_url(self, branch: str, archive_filename: str) -> str:
        """Build the download URL of an archive for a version/branch."""
        return f"{self.base_url}/{branch}/{archive_filename}"


def resolve_proxy(environ: Mapping[str, str]) -> str | None:
    """Pick the proxy endpoint from standard proxy variables.

    HTTPS_PROXY/https_proxy take precedence over HTTP_PROXY/http_proxy.

    Args:
        environ: Environment mapping.

    Returns:
        The proxy URL, or None for a direct connection.
    """
    https_proxy = environ.get("HTTPS_PROXY") or environ.get("https_proxy")
    http_proxy = environ.get("HTTP_PROXY") or environ.get("http_proxy")
    return https_proxy or http_proxy or None


def resolve_cache_root(
    environ: Mapping[str, str], system: str | None = None
) -> Path:
    """Return the platform cache directory for storing binaries.

    Lookup order:
    1. TINGLY_BOX_CACHE_DIR - Explicit override
    2. Linux: $XDG_CACHE_HOME or ~/.cache
       macOS: ~/Library/Caches
       Windows: %LOCALAPPDATA% or %USERPROFILE%\\AppData\\Local

    Args:
        environ: Environment mapping.
        system: A sys.platform style identifier. Defaults to the host's.

    Returns:
        Path to the cache root.

    Raises:
        UnsupportedPlatformError: If the platform has no known convention.
    """
    override = environ.get(CACHE_DIR_ENV)
    if override:
        return Path(override)

    system = sys.platform if system is None else system
    os_name = normalize_system(system)
    home = environ.get("HOME", "")

    if os_name == "linux":
        xdg = environ.get("XDG_CACHE_HOME")
        return Path(xdg) if xdg else Path(home) / ".cache"
    if os_name == "macos":
        return Path(home) / "Library" / "Caches"
    if os_name == "windows":
        local = environ.get("LOCALAPPDATA")
        if local:
            return Path(local)
        return Path(environ.get("USERPROFILE", "")) / "AppData" / "Local"
    raise UnsupportedPlatformError(system)
