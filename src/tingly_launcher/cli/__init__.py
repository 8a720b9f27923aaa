"""CLI for tingly_launcher."""

from tingly_launcher.cli.main import app, main


__all__ = ["app", "main"]
