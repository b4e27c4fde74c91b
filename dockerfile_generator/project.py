"""Read-only view of a project inside a loaded project graph."""

from pathlib import Path

from dockerfile_generator.collect_all_projects import collect_all_projects
from dockerfile_generator.package_reference import PackageReference
from dockerfile_generator.project_graph import ProjectGraph
from dockerfile_generator.project_node import ProjectNode
from dockerfile_generator.relative_paths import directory_relative_path, relative_path

PROJECT_EXTENSION = ".csproj"


class Project:
    """A `.csproj` together with its direct and transitive references.

    This is the object handed to the Dockerfile renderer.
    """

    __slots__ = ("graph", "index")

    def __init__(self, graph: ProjectGraph, index: int) -> None:
        """Bind the view to a node of `graph`."""
        self.graph = graph
        self.index = index

    def __repr__(self) -> str:
        return f"Project({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.graph is other.graph and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.graph), self.index))

    @property
    def node(self) -> ProjectNode:
        return self.graph.node(self.index)

    @property
    def path(self) -> Path:
        return self.node.path

    @property
    def root_path(self) -> Path | None:
        return self.graph.root_path

    @property
    def file_name(self) -> str:
        """File name, e.g. ``MyApp.csproj``."""
        return self.path.name

    @property
    def name(self) -> str:
        """Project name, i.e. the file name without ``.csproj``."""
        name = self.file_name
        if name.lower().endswith(PROJECT_EXTENSION):
            return name[: -len(PROJECT_EXTENSION)]
        return name

    @property
    def relative_path(self) -> str:
        return relative_path(self.path, self.root_path)

    @property
    def directory_relative_path(self) -> str:
        return directory_relative_path(self.path, self.root_path)

    @property
    def package_references(self) -> list[PackageReference]:
        return list(self.node.package_references)

    @property
    def project_references(self) -> list["Project"]:
        """Direct references, in declaration order."""
        return [Project(self.graph, i) for i in self.node.references]

    def all_project_references(self) -> list["Project"]:
        """Transitive closure including this project, sorted by path."""
        return collect_all_projects(self)
