"""Interface shared by the language-specific Dockerfile generators."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from dockerfile_generator.additional_file_path import AdditionalFilePath


class Generator(ABC):
    """Detects, loads and renders one kind of project."""

    name: str = ""

    @abstractmethod
    def detect(self, path: Path) -> bool:
        """Return True when `path` looks like a project of this language."""

    @abstractmethod
    def load(
        self, project_path: Path, repo_root: Path
    ) -> tuple[Any, list[AdditionalFilePath]]:
        """Load the project and the extra files its build needs."""

    @abstractmethod
    def render(
        self,
        project: Any,
        additional: list[AdditionalFilePath],
        config: dict[str, Any],
    ) -> str:
        """Render the Dockerfile text."""

    def generate_dockerfile(
        self,
        project: Any,
        additional: list[AdditionalFilePath],
        dest: Path,
        config: dict[str, Any],
    ) -> str:
        """Render the Dockerfile and write it to `dest`."""
        content = self.render(project, additional, config)
        dest.write_text(content, encoding="utf-8")
        return content
