"""Host platform resolution.

Maps interpreter platform identifiers onto the names used by published
release assets.
"""

from __future__ import annotations

import platform
import sys

from tingly_launcher.core.exceptions import UnsupportedPlatformError
from tingly_launcher.core.models import PlatformTarget


_PLATFORM_NAMES = {
    "linux": "linux",
    "darwin": "macos",
    "win32": "windows",
}

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "ia32": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
}


def normalize_system(system: str) -> str | None:
    """Return the release platform name for a sys.platform value, if supported."""
    if system.startswith("linux"):
        return "linux"
    return _PLATFORM_NAMES.get(system)


def resolve_platform(
    system: str | None = None, machine: str | None = None
) -> PlatformTarget:
    """Resolve the release target for the host.

    Args:
        system: A sys.platform style identifier. Defaults to the host's.
        machine: A processor architecture name. Defaults to platform.machine().

    Returns:
        The PlatformTarget for the host.

    Raises:
        UnsupportedPlatformError: If the operating system is not supported.
    """
    system = sys.platform if system is None else system
    machine = platform.machine() if machine is None else machine

    os_name = normalize_system(system)
    if os_name is None:
        raise UnsupportedPlatformError(system, machine)

    arch = _ARCH_NAMES.get(machine.lower(), machine)

    if os_name == "macos":
        # Only arm64 and amd64 builds are published for macOS
        return PlatformTarget(os_name, "arm64" if arch == "arm64" else "amd64")
    if os_name == "windows":
        return PlatformTarget(os_name, arch, suffix=".exe")
    return PlatformTarget(os_name, arch)
