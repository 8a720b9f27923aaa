"""Error handling patterns with recovery hints.

This example demonstrates how to handle common launcher errors and use
the recovery_hint property to provide actionable guidance.
"""

import sys

from tingly_launcher import (
    DownloadError,
    InvalidVersionError,
    Launcher,
    LauncherConfig,
    # Exceptions
    LauncherError,
    LaunchError,
    ReleaseNotFoundError,
    VersionSelector,
    parse_launch_args,
    resolve_platform,
)


# Pattern 1: Validate a user-supplied version before doing any work
def parse_or_exit(argv: list[str]):
    """Split launcher arguments, exiting on a malformed version."""
    try:
        return parse_launch_args(argv)
    except InvalidVersionError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Hint: {e.recovery_hint}", file=sys.stderr)
        sys.exit(1)


# Pattern 2: Fall back to latest when a pinned release is missing
def ensure_with_fallback(launcher: Launcher, version: VersionSelector):
    """Ensure a pinned release, falling back to latest on 404."""
    try:
        return launcher.ensure_binary(version)
    except ReleaseNotFoundError as e:
        print(f"Release not found: {e.url}", file=sys.stderr)
        return launcher.ensure_binary(VersionSelector("latest"))


# Pattern 3: Catch-all with LauncherError base class
def launch_safely(argv: list[str]) -> int:
    """Launch the binary, converting any launcher error to exit status 1."""
    launch_args = parse_or_exit(argv)
    try:
        launcher = Launcher.from_config(LauncherConfig.from_environ(), resolve_platform())
        install = ensure_with_fallback(launcher, launch_args.version)
        result = launcher.run(install.entry, launch_args.effective_args)
    except DownloadError as e:
        # Network problems: status code is None for transport failures
        print(f"Download failed ({e.status_code}): {e}", file=sys.stderr)
        print(f"Hint: {e.recovery_hint}", file=sys.stderr)
        return 1
    except LaunchError as e:
        print(f"Could not start {e.binary}: {e}", file=sys.stderr)
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}", file=sys.stderr)
        return 1
    except LauncherError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}", file=sys.stderr)
        return 1
    return result.exit_status


sys.exit(launch_safely(sys.argv[1:]))
