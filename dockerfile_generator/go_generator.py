"""Dockerfile generator for Go modules."""

import logging
from pathlib import Path
from typing import Any

from dockerfile_generator.additional_file_path import AdditionalFilePath
from dockerfile_generator.errors import ProjectDetectionError
from dockerfile_generator.generator import Generator
from dockerfile_generator.go_project import GO_MOD_FILE_NAME, GoProject
from dockerfile_generator.load_config import LANGUAGE_GO
from dockerfile_generator.render_go_dockerfile import render_go_dockerfile

logger = logging.getLogger(__name__)

MODULE_DIRECTIVE = "module "


class GoGenerator(Generator):
    """Generates Dockerfiles for a directory containing `go.mod`."""

    name = LANGUAGE_GO

    def detect(self, path: Path) -> bool:
        """Accept a `go.mod` file or a directory containing one."""
        if path.is_dir():
            found = (path / GO_MOD_FILE_NAME).is_file()
            if found:
                logger.debug("Go project detected (directory contains go.mod): %s", path)
            return found
        if path.is_file() and path.name == GO_MOD_FILE_NAME:
            logger.debug("Go project detected (go.mod file): %s", path)
            return True
        return False

    def load(
        self, project_path: Path, repo_root: Path
    ) -> tuple[GoProject, list[AdditionalFilePath]]:
        """Read the module name from `go.mod`; Go builds need no extra files."""
        if not project_path.exists():
            msg = f"Project path does not exist: {project_path}"
            raise ProjectDetectionError(msg)
        if project_path.is_file():
            if project_path.name != GO_MOD_FILE_NAME:
                msg = "Path must be a directory containing go.mod or the go.mod file itself"
                raise ProjectDetectionError(msg)
            project_path = project_path.parent

        mod_path = project_path / GO_MOD_FILE_NAME
        try:
            mod_text = mod_path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read {mod_path}: {exc}"
            raise ProjectDetectionError(msg) from exc

        name = project_path.name
        for line in mod_text.splitlines():
            line = line.strip()
            if line.startswith(MODULE_DIRECTIVE):
                name = line[len(MODULE_DIRECTIVE) :].strip().rstrip("/").rsplit("/", 1)[-1]
                logger.debug("Parsed module name %s", name)
                break

        project = GoProject(root_path=repo_root, path=project_path, name=name)
        logger.debug("Go project loaded: %s at %s", name, project_path)
        return project, []

    def render(
        self,
        project: Any,
        additional: list[AdditionalFilePath],
        config: dict[str, Any],
    ) -> str:
        """Render the Go Dockerfile."""
        if not isinstance(project, GoProject):
            msg = "Invalid project type for go generator"
            raise TypeError(msg)
        return render_go_dockerfile(project, config)
