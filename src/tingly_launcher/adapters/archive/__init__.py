"""Archive extraction adapters."""

from tingly_launcher.adapters.archive.zip_archive import ZipArchiveExtractor


__all__ = ["ZipArchiveExtractor"]
