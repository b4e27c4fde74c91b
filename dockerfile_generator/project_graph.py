"""Arena holding every project loaded for one root project."""

from dataclasses import dataclass, field
from pathlib import Path

from dockerfile_generator.project_node import ProjectNode


@dataclass
class ProjectGraph:
    """Owns the loaded nodes; edges are stored as node indices.

    The same path may appear in several nodes when two branches reference
    the same project; each branch loads its own copy.
    """

    root_path: Path | None
    nodes: list[ProjectNode] = field(default_factory=list)
    root_index: int = 0

    def add(self, node: ProjectNode) -> int:
        """Append a node and return its index."""
        self.nodes.append(node)
        return len(self.nodes) - 1

    def node(self, index: int) -> ProjectNode:
        """Return the node stored at `index`."""
        return self.nodes[index]
