"""Process executor adapter implementing ExecutorPort."""

from __future__ import annotations

import errno
import logging
import stat
import subprocess
from typing import TYPE_CHECKING

from tingly_launcher.core.exceptions import (
    BinaryBusyError,
    BinaryNotFoundError,
    BinaryPermissionError,
    LaunchError,
)
from tingly_launcher.core.models import LaunchResult


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


_LOGGER = logging.getLogger(__name__)

EXECUTABLE_MODE = 0o755


def ensure_executable(path: Path) -> bool:
    """Give path executable permissions unless the owner can already run it.

    Args:
        path: File to update. Missing files are left alone.

    Returns:
        True if the mode was changed.
    """
    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        return False
    if mode & stat.S_IXUSR:
        return False
    path.chmod(EXECUTABLE_MODE)
    return True


class SubprocessExecutor:
    """Runs the binary as a child process sharing the launcher's stdio.

    The child's standard streams are not captured, so the binary drives
    all interactive behaviour. The call blocks until the child exits.
    """

    def __init__(self, apply_permissions: bool = True) -> None:
        """Initialize the executor.

        Args:
            apply_permissions: Make the binary executable before running it.
                Disabled on Windows.
        """
        self.apply_permissions = apply_permissions

    def run(self, binary: Path, args: Sequence[str]) -> LaunchResult:
        """Run binary with args and wait for it to exit.

        Args:
            binary: Path to the executable.
            args: Arguments forwarded to the executable.

        Returns:
            LaunchResult with the exit code, or the signal that killed it.

        Raises:
            BinaryNotFoundError: If the binary does not exist.
            BinaryPermissionError: If the binary cannot be executed.
            BinaryBusyError: If the binary file is busy.
            LaunchError: For other operating system errors.
        """
        try:
            if self.apply_permissions and ensure_executable(binary):
                _LOGGER.debug("Marked %s as executable", binary)
            _LOGGER.info("Executing %s %s", binary, " ".join(args))
            completed = subprocess.run([str(binary), *args], check=False)
        except FileNotFoundError as e:
            raise BinaryNotFoundError(binary, cause=e) from e
        except PermissionError as e:
            raise BinaryPermissionError(binary, cause=e) from e
        except OSError as e:
            if e.errno == errno.ETXTBSY:
                raise BinaryBusyError(binary, cause=e) from e
            raise LaunchError(
                f"Failed to execute {binary}: {e}", binary=binary, cause=e
            ) from e

        return LaunchResult.from_returncode(completed.returncode)
