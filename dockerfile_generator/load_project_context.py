"""Logic for discovering the configuration files a project build depends on."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from dockerfile_generator.additional_file_path import AdditionalFilePath
from dockerfile_generator.project import Project
from dockerfile_generator.search_cache import SearchCache

logger = logging.getLogger(__name__)

DIRECTORY_BUILD_PROPS = "Directory.Build.props"
DIRECTORY_PACKAGES_PROPS = "Directory.Packages.props"
ANCESTOR_FILE_NAMES = (DIRECTORY_BUILD_PROPS, DIRECTORY_PACKAGES_PROPS)


def find_ancestor_files(
    start_dir: Path, root_path: Path, file_name: str, cache: SearchCache
) -> list[Path]:
    """Collect `file_name` matches from `start_dir` up to `root_path` inclusive.

    Nearest directories come first. The walk also stops at the filesystem
    root.
    """
    result: list[Path] = []
    current = start_dir
    while True:
        result.extend(cache.files_in(current, file_name))
        if current == root_path:
            break
        parent = current.parent
        if parent == current:
            break
        current = parent
    return result


def find_context_files(
    project_paths: Iterable[Path],
    root_path: str | Path,
    cache: SearchCache | None = None,
) -> list[Path]:
    """Return the context files for all `project_paths`, deduplicated in first-seen order."""
    root = Path(os.path.abspath(root_path))
    if cache is None:
        cache = SearchCache()

    seen: set[Path] = set()
    found: list[Path] = []
    for project_path in project_paths:
        logger.info("Looking for project context files for %s", project_path)
        candidates: list[Path] = []
        nuget_config = cache.root_nuget_config(root)
        if nuget_config is not None:
            candidates.append(nuget_config)
        for file_name in ANCESTOR_FILE_NAMES:
            candidates.extend(
                find_ancestor_files(project_path.parent, root, file_name, cache)
            )
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                found.append(candidate)
    return found


def load_project_context(
    project: Project, root_path: str | Path, cache: SearchCache | None = None
) -> list[AdditionalFilePath]:
    """Return the additional files needed to restore `project` and its references."""
    root = Path(os.path.abspath(root_path))
    paths = [p.path for p in project.all_project_references()]
    return [
        AdditionalFilePath(path=f, root_path=root)
        for f in find_context_files(paths, root, cache)
    ]
