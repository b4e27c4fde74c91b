"""Sort key giving project paths a platform-independent order."""

from pathlib import Path


def path_sort_key(path: Path | str) -> tuple[str, str]:
    """Order case-insensitively first, then by the exact spelling."""
    text = str(path)
    return text.lower(), text
