"""Cache for the filesystem lookups made while collecting context files."""

import logging
import os
from pathlib import Path
from typing import NamedTuple

from dockerfile_generator.find_root_nuget_config import find_root_nuget_config

logger = logging.getLogger(__name__)


class SearchKey(NamedTuple):
    """Identifies one directory listing: a directory and the file name sought."""

    directory: Path
    file_name: str


class SearchCache:
    """Remembers lookups for the duration of one context search.

    Projects of the same repository share most ancestor directories, so
    each directory is listed at most once per file name and the repository
    tree is walked for `nuget.config` at most once per root.
    """

    def __init__(self) -> None:
        """Start with nothing cached."""
        self.nuget_configs: dict[Path, Path | None] = {}
        self.directory_files: dict[SearchKey, list[Path]] = {}

    def root_nuget_config(self, root_path: Path) -> Path | None:
        """Return the first `nuget.config` under `root_path`, if any."""
        if root_path not in self.nuget_configs:
            self.nuget_configs[root_path] = find_root_nuget_config(root_path)
        return self.nuget_configs[root_path]

    def files_in(self, directory: Path, file_name: str) -> list[Path]:
        """Return files directly in `directory` named `file_name` (any case)."""
        key = SearchKey(directory, file_name)
        if key not in self.directory_files:
            self.directory_files[key] = self._scan(directory, file_name)
        return self.directory_files[key]

    @staticmethod
    def _scan(directory: Path, file_name: str) -> list[Path]:
        wanted = file_name.lower()
        try:
            with os.scandir(directory) as entries:
                found = [
                    Path(entry.path)
                    for entry in entries
                    if entry.name.lower() == wanted and entry.is_file()
                ]
        except OSError as exc:
            logger.debug("Cannot list %s: %s", directory, exc)
            return []
        return sorted(found)
