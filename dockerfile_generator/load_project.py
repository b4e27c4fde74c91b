"""Logic for loading a project file and its transitive project references."""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from dockerfile_generator.errors import (
    CircularReferenceError,
    MissingProjectError,
    PathEscapeError,
    ProjectNotFoundError,
)
from dockerfile_generator.expand_reference_include import expand_reference_include
from dockerfile_generator.parse_project_descriptor import parse_project_descriptor
from dockerfile_generator.project import Project
from dockerfile_generator.project_graph import ProjectGraph
from dockerfile_generator.project_node import ProjectNode

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """A project whose references are still being loaded."""

    index: int
    path: Path
    pending: Iterator[Path]


def _pending_references(path: Path, includes: list[str]) -> Iterator[Path]:
    for include in includes:
        yield from expand_reference_include(path.parent, include)


def _check_inside_root(path: Path, root_path: Path | None) -> None:
    if root_path is not None and not path.is_relative_to(root_path):
        raise PathEscapeError(path, root_path)


def _load_node(
    graph: ProjectGraph, path: Path, *, is_root: bool
) -> tuple[int, list[str]]:
    """Read and parse one project file, adding it to `graph`."""
    _check_inside_root(path, graph.root_path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        if is_root:
            raise ProjectNotFoundError(path, reason) from exc
        raise MissingProjectError(path, reason) from exc

    parsed = parse_project_descriptor(data, path)
    index = graph.add(ProjectNode(path, parsed.package_references))
    logger.debug(
        "Loaded project %s (%d package references, %d project references)",
        path,
        len(parsed.package_references),
        len(parsed.project_includes),
    )
    return index, parsed.project_includes


def load_project(path: str | Path, root_path: str | Path | None = None) -> Project:
    """Load a `.csproj` and, transitively, every project it references.

    References that cannot be opened are skipped with a warning; the same
    failure on the requested project raises `ProjectNotFoundError`. A
    reference back to a project that is still being loaded raises
    `CircularReferenceError`; a project that was loaded in another branch
    is simply loaded again. With a `root_path`, every project must live
    below it. Any other failure aborts the load.
    """
    root = Path(os.path.abspath(root_path)) if root_path else None
    start = Path(os.path.abspath(path))
    graph = ProjectGraph(root)

    graph.root_index, includes = _load_node(graph, start, is_root=True)
    frames = [_Frame(graph.root_index, start, _pending_references(start, includes))]
    on_path = {start}

    while frames:
        frame = frames[-1]
        child = next(frame.pending, None)
        if child is None:
            frames.pop()
            on_path.discard(frame.path)
            continue

        if child in on_path:
            raise CircularReferenceError([f.path for f in frames] + [child])

        try:
            index, child_includes = _load_node(graph, child, is_root=False)
        except MissingProjectError as exc:
            logger.warning("Skipping project reference: %s", exc)
            continue

        graph.node(frame.index).references.append(index)
        frames.append(_Frame(index, child, _pending_references(child, child_includes)))
        on_path.add(child)

    logger.debug("Project graph for %s holds %d nodes", start, len(graph.nodes))
    return Project(graph, graph.root_index)
