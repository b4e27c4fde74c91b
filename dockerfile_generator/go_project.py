"""Data model for Go modules."""

from dataclasses import dataclass
from pathlib import Path

from dockerfile_generator.relative_paths import directory_relative_path

GO_MOD_FILE_NAME = "go.mod"


@dataclass(frozen=True)
class GoProject:
    """A Go module root: the directory holding `go.mod`."""

    root_path: Path
    path: Path
    name: str

    @property
    def directory_relative_path(self) -> str:
        return directory_relative_path(self.path / GO_MOD_FILE_NAME, self.root_path)
