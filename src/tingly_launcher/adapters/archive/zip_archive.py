"""Zip archive extraction adapter implementing ArchiveExtractorPort."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path, PurePosixPath

from tingly_launcher.core.exceptions import ArchiveError
from tingly_launcher.core.models import ExtractionReport


_LOGGER = logging.getLogger(__name__)

# Mode applied when the archive records no POSIX permissions
DEFAULT_MODE = 0o755


def is_metadata_entry(name: str) -> bool:
    """Whether an archive entry is OS housekeeping rather than payload.

    Args:
        name: Entry name inside the archive.

    Returns:
        True for __MACOSX/ resource forks and .DS_Store files.
    """
    return name.startswith("__MACOSX/") or ".DS_Store" in name


def entry_mode(info: zipfile.ZipInfo) -> int:
    """Return the POSIX permission bits recorded for an entry, or 0."""
    return (info.external_attr >> 16) & 0o7777


class ZipArchiveExtractor:
    """Extracts zip archives held in memory.

    Directory entries and OS metadata are skipped. An entry whose target
    already exists as a directory is left alone and reported as a conflict
    instead of deleting anything.
    """

    def extract(
        self, data: bytes, destination: Path, *, apply_permissions: bool = True
    ) -> ExtractionReport:
        """Extract all payload files below destination.

        Args:
            data: Raw zip archive bytes.
            destination: Directory to extract into.
            apply_permissions: Set the archived POSIX mode (or 0o755) on
                each written file. Disabled on Windows.

        Returns:
            ExtractionReport of extracted files, skipped entries and conflicts.

        Raises:
            ArchiveError: If the archive is corrupt, an entry escapes the
                destination, or a file cannot be written.
        """
        try:
            archive = zipfile.ZipFile(io.BytesIO(data))
        except zipfile.BadZipFile as e:
            raise ArchiveError(
                f"Failed to extract ZIP: {e}", destination=destination, cause=e
            ) from e

        extracted: list[Path] = []
        skipped: list[str] = []
        conflicts: list[Path] = []

        with archive:
            infos = archive.infolist()
            _LOGGER.debug("ZIP contents (%d entries)", len(infos))
            for info in infos:
                if info.is_dir() or is_metadata_entry(info.filename):
                    _LOGGER.debug("Skipping: %s", info.filename)
                    skipped.append(info.filename)
                    continue

                target = self._target_path(destination, info.filename)

                if target.is_dir():
                    _LOGGER.debug("Directory in place of file: %s", target)
                    conflicts.append(target)
                    continue

                try:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    target.write_bytes(archive.read(info))
                    if apply_permissions:
                        target.chmod(entry_mode(info) or DEFAULT_MODE)
                except (OSError, zipfile.BadZipFile) as e:
                    raise ArchiveError(
                        f"Failed to extract {info.filename}: {e}",
                        destination=destination,
                        cause=e,
                    ) from e

                _LOGGER.debug("Extracted: %s -> %s", info.filename, target)
                extracted.append(target)

        return ExtractionReport(
            extracted=tuple(extracted),
            skipped=tuple(skipped),
            conflicts=tuple(conflicts),
        )

    @staticmethod
    def _target_path(destination: Path, name: str) -> Path:
        """Map an archive entry name to a path below destination.

        Raises:
            ArchiveError: If the entry would be written outside destination.
        """
        relative = PurePosixPath(name)
        if relative.is_absolute() or ".." in relative.parts:
            raise ArchiveError(
                f"Refusing to extract entry outside destination: {name}",
                destination=destination,
            )
        return destination.joinpath(*relative.parts)
