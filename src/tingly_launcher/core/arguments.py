"""Command-line argument handling for the launcher.

The launcher forwards its arguments to the wrapped binary unchanged,
except for a single --transport-version selector that it consumes itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tingly_launcher.core.models import LATEST, VersionSelector


if TYPE_CHECKING:
    from collections.abc import Sequence


TRANSPORT_VERSION_FLAG = "--transport-version"

# Start in the background with auto-restart when invoked with no arguments
DEFAULT_ARGS: tuple[str, ...] = ("start", "--daemon", "--prompt-restart")


@dataclass(frozen=True, slots=True)
class LaunchArgs:
    """Arguments split between the launcher and the wrapped binary.

    Attributes:
        version: Validated release selector.
        forwarded: Arguments passed through to the binary, in order.
    """

    version: VersionSelector
    forwarded: tuple[str, ...] = ()

    @property
    def effective_args(self) -> tuple[str, ...]:
        """Arguments to run the binary with, falling back to DEFAULT_ARGS."""
        return self.forwarded if self.forwarded else DEFAULT_ARGS


def parse_launch_args(args: Sequence[str]) -> LaunchArgs:
    """Extract the transport version selector from raw arguments.

    Accepts both ``--transport-version=v1.2.3`` and
    ``--transport-version v1.2.3``. Only the first occurrence is consumed;
    a trailing flag without a value selects "latest".

    Args:
        args: Raw command-line arguments (without the program name).

    Returns:
        LaunchArgs with the selector removed from the forwarded arguments.

    Raises:
        InvalidVersionError: If the selector has an invalid format.
    """
    remaining = list(args)
    value = LATEST

    for index, arg in enumerate(remaining):
        if arg == TRANSPORT_VERSION_FLAG:
            if index + 1 < len(remaining):
                value = remaining[index + 1]
            del remaining[index : index + 2]
            break
        if arg.startswith(f"{TRANSPORT_VERSION_FLAG}="):
            value = arg.partition("=")[2]
            del remaining[index]
            break

    return LaunchArgs(version=VersionSelector(value), forwarded=tuple(remaining))
