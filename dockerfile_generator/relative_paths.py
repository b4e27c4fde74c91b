"""Helpers for rendering repository-relative paths in Dockerfiles."""

import os
from pathlib import Path


def relative_path(path: Path, root_path: Path | None) -> str:
    """Return `path` relative to `root_path` using forward slashes."""
    if root_path is None:
        return path.as_posix().lstrip("/")
    return Path(os.path.relpath(path, root_path)).as_posix()


def directory_relative_path(path: Path, root_path: Path | None) -> str:
    """Return the directory of `path` relative to `root_path`, with a trailing slash.

    A file sitting directly in the root yields ``./``.
    """
    rel = relative_path(path.parent, root_path)
    if rel in {"", "."}:
        return "./"
    return rel.rstrip("/") + "/"
