"""Logic for locating the repository's `nuget.config`."""

import os
from pathlib import Path

NUGET_CONFIG_FILE_NAME = "nuget.config"
SKIPPED_DIRECTORIES = frozenset({".git"})


def find_root_nuget_config(root_path: Path) -> Path | None:
    """Walk `root_path` top-down and return the first `nuget.config`.

    Names are compared case-insensitively. Files of a directory are checked
    before its subdirectories, and both in sorted order. `.git` is skipped.
    """
    wanted = NUGET_CONFIG_FILE_NAME.lower()
    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIPPED_DIRECTORIES)
        for name in sorted(filenames):
            if name.lower() == wanted:
                return Path(dirpath) / name
    return None
