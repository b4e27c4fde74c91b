"""Dockerfile generator for .NET (`.csproj`) projects."""

import logging
from pathlib import Path
from typing import Any

from dockerfile_generator.additional_file_path import AdditionalFilePath
from dockerfile_generator.errors import ProjectDetectionError
from dockerfile_generator.generator import Generator
from dockerfile_generator.list_project_files import list_project_files
from dockerfile_generator.load_config import LANGUAGE_DOTNET
from dockerfile_generator.load_project import load_project
from dockerfile_generator.load_project_context import load_project_context
from dockerfile_generator.project import PROJECT_EXTENSION, Project
from dockerfile_generator.render_dotnet_dockerfile import render_dotnet_dockerfile

logger = logging.getLogger(__name__)


class DotnetGenerator(Generator):
    """Generates Dockerfiles for a `.csproj` and its project references."""

    name = LANGUAGE_DOTNET

    def detect(self, path: Path) -> bool:
        """Accept a `.csproj` file or a directory holding exactly one."""
        if path.is_file():
            return path.name.lower().endswith(PROJECT_EXTENSION)
        if path.is_dir():
            return len(list_project_files(path)) == 1
        return False

    def load(
        self, project_path: Path, repo_root: Path
    ) -> tuple[Project, list[AdditionalFilePath]]:
        """Load the project graph and the context files for `project_path`."""
        if not project_path.exists():
            msg = f"Project path does not exist: {project_path}"
            raise ProjectDetectionError(msg)

        path = project_path
        if path.is_dir():
            matches = list_project_files(path)
            if not matches:
                msg = f"No {PROJECT_EXTENSION} found in directory {path}"
                raise ProjectDetectionError(msg)
            if len(matches) > 1:
                msg = f"Multiple {PROJECT_EXTENSION} found in {path}; specify one explicitly"
                raise ProjectDetectionError(msg)
            path = matches[0]
            logger.debug("Resolved project file %s in directory %s", path, project_path)

        if not path.name.lower().endswith(PROJECT_EXTENSION):
            msg = f"Path must be a {PROJECT_EXTENSION} file for dotnet: {path}"
            raise ProjectDetectionError(msg)

        logger.debug("Loading dotnet project %s (repository root %s)", path, repo_root)
        project = load_project(path, repo_root)
        logger.debug(
            "Project graph loaded: %s references %d projects",
            project.path,
            len(project.all_project_references()),
        )
        additional = load_project_context(project, repo_root)
        logger.debug("Discovered %d additional context files", len(additional))
        return project, additional

    def render(
        self,
        project: Any,
        additional: list[AdditionalFilePath],
        config: dict[str, Any],
    ) -> str:
        """Render the .NET Dockerfile."""
        if not isinstance(project, Project):
            msg = "Invalid project type for dotnet generator"
            raise TypeError(msg)
        return render_dotnet_dockerfile(project, additional, config)
