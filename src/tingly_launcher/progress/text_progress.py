"""Plain-text progress reporter for non-interactive output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from tingly_launcher.core.formatting import format_progress


if TYPE_CHECKING:
    from types import TracebackType

    from tingly_launcher.core.ports import ProgressCallback


class TextProgressReporter:
    """Progress reporter that rewrites a single status line.

    Prints "Downloading: 45.0% (1.2 MB/2.7 MB)" when the size is known,
    "Downloaded: 1.2 MB" otherwise.
    """

    def __init__(self) -> None:
        self._active: set[str] = set()

    def __enter__(self) -> TextProgressReporter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        for name in list(self._active):
            self.finish_task(name)

    def start_task(self, name: str, total: int) -> ProgressCallback:  # noqa: ARG002
        """Start tracking a download task."""
        self._active.add(name)

        def callback(downloaded: int, total_bytes: int) -> None:
            label = "Downloading" if total_bytes > 0 else "Downloaded"
            line = f"\r{label}: {format_progress(downloaded, total_bytes)}"
            typer.echo(line, nl=False, err=True)

        return callback

    def finish_task(self, name: str) -> None:
        """End the status line of a task."""
        if name in self._active:
            self._active.discard(name)
            typer.echo("", err=True)
