"""Utility for previewing Dockerfile changes in dry-run mode."""

import difflib


def unified_diff(old_text: str, new_text: str, file_path: str) -> str:
    """Return a unified diff of `old_text` against `new_text`."""
    return "".join(
        difflib.unified_diff(
            old_text.splitlines(keepends=True),
            new_text.splitlines(keepends=True),
            fromfile=f"{file_path} (old)",
            tofile=f"{file_path} (new)",
        )
    )
