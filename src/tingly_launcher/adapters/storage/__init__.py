"""Archive source adapters."""

from tingly_launcher.adapters.storage.http import HttpStorage


__all__ = ["HttpStorage"]
