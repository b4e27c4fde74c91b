"""Logic for turning a `ProjectReference` include into concrete file paths."""

import glob
import os
from pathlib import Path

from dockerfile_generator.list_project_files import (
    PROJECT_FILE_PATTERN,
    list_project_files,
)

RECURSIVE_SEGMENT = "/**/"
WILDCARD_CHARS = frozenset("*?[]")


def _absolute(base_dir: Path, relative: str) -> Path:
    # A leading "/" still resolves under base_dir.
    return Path(os.path.abspath(os.path.join(base_dir, relative.lstrip("/"))))


def expand_reference_include(base_dir: Path, include: str) -> list[Path]:
    """Expand a project reference include relative to `base_dir`.

    Supported forms, checked in this order:

    - ``dir/**/*.csproj`` (or a leading ``**/``): every matching project
      file anywhere under ``dir``
    - ``dir/*.csproj``: project files directly inside ``dir``
    - ``*.csproj``: project files directly inside `base_dir`
    - any other wildcard: a plain glob relative to `base_dir`
    - a literal path: that single path

    Results are absolute, normalised, deduplicated and sorted. Windows
    separators are accepted.
    """
    inc = include.replace("\\", "/")
    lowered = inc.lower()

    if lowered.endswith(".csproj") and (
        RECURSIVE_SEGMENT in inc or inc.startswith("**/")
    ):
        prefix = "" if inc.startswith("**/") else inc[: inc.index(RECURSIVE_SEGMENT)]
        terminal = inc.rsplit("/", 1)[-1]
        return list_project_files(
            _absolute(base_dir, prefix), recursive=True, pattern=terminal
        )

    if lowered.endswith("/" + PROJECT_FILE_PATTERN):
        directory = inc[: -len(PROJECT_FILE_PATTERN) - 1]
        return list_project_files(_absolute(base_dir, directory))

    if lowered == PROJECT_FILE_PATTERN:
        return list_project_files(_absolute(base_dir, "."))

    if any(ch in WILDCARD_CHARS for ch in inc):
        pattern = os.path.join(glob.escape(str(base_dir)), inc.lstrip("/"))
        matches = glob.glob(pattern, include_hidden=True)
        return [Path(p) for p in sorted({os.path.abspath(m) for m in matches})]

    return [_absolute(base_dir, inc)]
