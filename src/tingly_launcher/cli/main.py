"""Launcher command for tingly-box."""

from __future__ import annotations

import sys

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from tingly_launcher.cli.formatting import (
    _report_error,
    _report_extraction,
    _report_launch_failure,
)
from tingly_launcher.config import LauncherConfig
from tingly_launcher.core.arguments import parse_launch_args
from tingly_launcher.core.exceptions import LaunchError, LauncherError
from tingly_launcher.core.platforms import resolve_platform
from tingly_launcher.core.services import Launcher
from tingly_launcher.logging_config import configure_logging
from tingly_launcher.progress import RichProgressReporter, TextProgressReporter


app = typer.Typer(
    name="tingly-box",
    help="Download and run the tingly-box gateway binary.",
    add_completion=False,
)

_RAW_ARGS = "tingly_launcher.raw_args"


class PassthroughCommand(TyperCommand):
    """Command that keeps its argument list exactly as given.

    Click drops a bare "--" while parsing, so the unparsed list is stored
    in ctx.meta for the callback to forward.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[_RAW_ARGS] = list(args)
        return super().parse_args(ctx, args)


def _progress_reporter() -> RichProgressReporter | TextProgressReporter:
    """Pick a live progress bar on terminals, plain lines otherwise."""
    if sys.stderr.isatty():
        return RichProgressReporter(console=Console(stderr=True))
    return TextProgressReporter()


@app.command(
    cls=PassthroughCommand,
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def launch(ctx: typer.Context) -> None:
    """Run tingly-box, downloading the binary on first use.

    All arguments except --transport-version are forwarded to the binary.
    With no arguments the binary is started as a background daemon.
    """
    try:
        launch_args = parse_launch_args(ctx.meta.get(_RAW_ARGS, ctx.args))
        target = resolve_platform()
        config = LauncherConfig.from_environ()
        configure_logging(config.log_level)

        launcher = Launcher.from_config(config, target)
        entry = launcher.resolve(launch_args.version)

        if not entry.exists:
            task = launcher.download_task(launch_args.version)
            typer.echo(f"Downloading ZIP from {task.url}...", err=True)
            with _progress_reporter() as progress:
                install = launcher.install(launch_args.version, progress=progress)
            if install.report is not None:
                _report_extraction(install.report)
            typer.echo(f"Downloaded and extracted to {entry.binary_path}", err=True)
    except LauncherError as e:
        _report_error(e)
        raise typer.Exit(1) from None

    tool_dir = config.cache_root / config.tool_name
    typer.echo(f"Executing binary: {entry.binary_path}", err=True)
    try:
        result = launcher.run(entry, launch_args.effective_args)
    except LaunchError as e:
        _report_launch_failure(
            entry.binary_path, target, tool_dir, launch_args.forwarded, error=e
        )
        raise typer.Exit(1) from None

    if not result.succeeded:
        _report_launch_failure(
            entry.binary_path, target, tool_dir, launch_args.forwarded, result=result
        )
        raise typer.Exit(result.exit_status)


def main() -> None:
    """Entry point for the CLI.

    Arguments are taken from sys.argv verbatim; wildcard expansion on
    Windows is disabled so patterns reach the binary unchanged.
    """
    app(args=sys.argv[1:], windows_expand_args=False)
