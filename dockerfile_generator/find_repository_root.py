"""Logic for locating the repository root of a project."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_DIRECTORY = ".git"


def find_repository_root(start: str | Path) -> Path | None:
    """Walk upward from `start` to the first directory holding a `.git` directory.

    `start` may be a file or a directory. Returns None when the filesystem
    root is reached without finding one.
    """
    current = Path(os.path.abspath(start))
    if current.is_file():
        current = current.parent

    logger.debug("Searching repository root from %s", current)
    while True:
        if (current / GIT_DIRECTORY).is_dir():
            logger.debug("Found repository root at %s", current)
            return current
        if current.parent == current:
            logger.debug("Reached %s without finding %s", current, GIT_DIRECTORY)
            return None
        current = current.parent
