"""Formatting utilities for download progress."""

_UNITS = ["B", "KB", "MB", "GB"]


def format_bytes(size: int) -> str:
    """Format a byte count with a binary unit suffix.

    Args:
        size: Number of bytes.

    Returns:
        Human-readable size, e.g. "0 B", "512 B", "1.5 KB", "2 MB".
    """
    if size <= 0:
        return "0 B"
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, 1):g} {_UNITS[exponent]}"


def format_progress(downloaded: int, total: int) -> str:
    """Describe download progress as a percentage or a byte count.

    Args:
        downloaded: Bytes received so far.
        total: Expected total bytes, 0 if unknown.

    Returns:
        "45.0% (1.2 MB/2.7 MB)" when total is known, else "1.2 MB".
    """
    if total > 0:
        percent = downloaded / total * 100
        return (
            f"{percent:.1f}% ({format_bytes(downloaded)}/{format_bytes(total)})"
        )
    return format_bytes(downloaded)
