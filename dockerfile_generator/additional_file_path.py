"""Data model for extra build-context files copied into the Dockerfile."""

from dataclasses import dataclass
from pathlib import Path

from dockerfile_generator.relative_paths import directory_relative_path, relative_path


@dataclass(frozen=True)
class AdditionalFilePath:
    """A configuration file (nuget.config, Directory.*.props) to copy before restore."""

    path: Path
    root_path: Path

    @property
    def relative_path(self) -> str:
        return relative_path(self.path, self.root_path)

    @property
    def directory_relative_path(self) -> str:
        return directory_relative_path(self.path, self.root_path)
