"""Exceptions raised while loading projects and generating Dockerfiles."""

from pathlib import Path


class DockerfileGeneratorError(Exception):
    """Base class for every error surfaced to the command line."""


class ProjectParseError(DockerfileGeneratorError):
    """A project file exists but is not a readable MSBuild document."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the offending path and the parser message."""
        super().__init__(f"Cannot parse project file {path}: {reason}")
        self.path = path


class CircularReferenceError(DockerfileGeneratorError):
    """A project reference leads back to a project still being loaded."""

    def __init__(self, chain: list[Path]) -> None:
        """Store the reference chain, ending with the repeated path."""
        rendered = " -> ".join(str(p) for p in chain)
        super().__init__(f"Circular project reference: {rendered}")
        self.chain = chain


class PathEscapeError(DockerfileGeneratorError):
    """A project reference resolves outside of the repository root."""

    def __init__(self, path: Path, root_path: Path) -> None:
        """Record both paths for the message."""
        super().__init__(f"Project file outside root {root_path}: {path}")
        self.path = path
        self.root_path = root_path


class MissingProjectError(DockerfileGeneratorError):
    """A referenced (non-root) project file cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the missing path."""
        super().__init__(f"Cannot open project file {path}: {reason}")
        self.path = path


class ProjectNotFoundError(DockerfileGeneratorError):
    """The requested root project file cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the requested path."""
        super().__init__(f"Cannot open project file {path}: {reason}")
        self.path = path


class ProjectDetectionError(DockerfileGeneratorError):
    """The input path does not point at a project a generator can load."""


class UnknownLanguageError(DockerfileGeneratorError):
    """No generator is registered (or detected) for the requested language."""


class RepositoryRootNotFoundError(DockerfileGeneratorError):
    """No `.git` directory was found above the project."""


class ConfigError(DockerfileGeneratorError):
    """The `.dockerbuild` file is not a YAML mapping."""
