"""Logic for flattening a project graph into its transitive closure."""

from typing import TYPE_CHECKING

from dockerfile_generator.path_sort_key import path_sort_key

if TYPE_CHECKING:
    from dockerfile_generator.project import Project


def collect_all_projects(root: "Project") -> list["Project"]:
    """Return the root and every project reachable from it.

    The walk is depth-first in declaration order and keeps the first
    project seen for each path. The result is sorted by `path_sort_key`.
    """
    result: list[Project] = []
    seen: set[str] = set()
    stack = [root]
    while stack:
        current = stack.pop()
        key = str(current.path)
        if key in seen:
            continue
        seen.add(key)
        result.append(current)
        # Reversed so the first declared reference is visited next.
        stack.extend(reversed(current.project_references))

    result.sort(key=lambda p: path_sort_key(p.path))
    return result
