"""Shared output helpers for the launcher CLI."""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

import typer


if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from tingly_launcher.core.exceptions import LauncherError
    from tingly_launcher.core.models import ExtractionReport, LaunchResult, PlatformTarget


def _report_error(error: LauncherError) -> None:
    """Print an error and its recovery hint to stderr."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)


def _report_extraction(report: ExtractionReport) -> None:
    """Print the files written by an extraction and any conflicts."""
    for path in report.extracted:
        typer.echo(f"Extracted: {path}", err=True)
    for path in report.conflicts:
        typer.echo(f"Warning: a directory exists where a file was expected: {path}", err=True)
        typer.echo(f'Please manually remove: rm -rf "{path}"', err=True)


def _report_launch_failure(
    binary: Path,
    target: PlatformTarget,
    tool_dir: Path,
    forwarded: Sequence[str],
    result: LaunchResult | None = None,
    error: LauncherError | None = None,
) -> None:
    """Print diagnostics for a launch that did not exit cleanly.

    Args:
        binary: Resolved binary path.
        target: Host platform.
        tool_dir: Cache directory of the tool, suggested for clearing.
        forwarded: Arguments the user passed, for the retry hint.
        result: Result of a child that exited non-zero or was signalled.
        error: Error raised while starting the child.
    """
    typer.echo("", err=True)
    typer.echo("tingly-box execution failed", err=True)
    typer.echo("Error Details:", err=True)
    if error is not None:
        typer.echo(f"  Message: {error}", err=True)
        if error.recovery_hint:
            typer.echo(f"  Hint: {error.recovery_hint}", err=True)
    if result is not None and result.exit_code is not None:
        typer.echo(f"  Exit Code: {result.exit_code}", err=True)
        typer.echo("  The binary exited with non-zero status code.", err=True)
    if result is not None and result.signal:
        typer.echo(f"  Signal: {result.signal}", err=True)
        typer.echo("  The binary was terminated by a signal.", err=True)
    typer.echo(f"  Binary Path: {binary}", err=True)
    typer.echo(f"  Platform: {target.os_name} ({target.arch})", err=True)

    if target.os_name == "linux":
        typer.echo("", err=True)
        typer.echo("Linux Troubleshooting:", err=True)
        typer.echo("  - Check if required libraries are installed", err=True)
        typer.echo(
            "  - For glibc issues: try on a different Linux distribution", err=True
        )
        typer.echo(f'  - Try running with strace: strace -o trace.log "{binary}"', err=True)

    typer.echo("", err=True)
    typer.echo(f"To retry, run: tingly-box {shlex.join(forwarded)}".rstrip(), err=True)
    typer.echo(f'Or clear cache first: rm -rf "{tool_dir}"', err=True)
