"""Progress reporters for archive downloads."""

from tingly_launcher.progress.rich_progress import RichProgressReporter
from tingly_launcher.progress.text_progress import TextProgressReporter


__all__ = ["RichProgressReporter", "TextProgressReporter"]
