"""Utility for listing project files inside a directory."""

import fnmatch
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_FILE_PATTERN = "*.csproj"


def list_project_files(
    directory: Path, *, recursive: bool = False, pattern: str = PROJECT_FILE_PATTERN
) -> list[Path]:
    """Return the sorted project files in `directory`.

    Names are matched case-insensitively against `pattern`. A directory
    that does not exist or cannot be read yields an empty list.
    """
    if not directory.is_dir():
        return []

    pattern = pattern.lower()
    found: list[str] = []
    if recursive:
        for dirpath, _dirnames, filenames in os.walk(directory):
            found.extend(
                os.path.join(dirpath, name)
                for name in filenames
                if fnmatch.fnmatchcase(name.lower(), pattern)
            )
    else:
        try:
            with os.scandir(directory) as entries:
                found.extend(
                    entry.path
                    for entry in entries
                    if entry.is_file()
                    and fnmatch.fnmatchcase(entry.name.lower(), pattern)
                )
        except OSError as exc:
            logger.debug("Cannot list %s: %s", directory, exc)
            return []
    return [Path(p) for p in sorted(set(found))]
