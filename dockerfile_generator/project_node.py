"""Data model for one loaded project inside a project graph."""

from dataclasses import dataclass, field
from pathlib import Path

from dockerfile_generator.package_reference import PackageReference


@dataclass
class ProjectNode:
    """A loaded `.csproj`; `references` holds indices into the owning graph."""

    path: Path
    package_references: list[PackageReference] = field(default_factory=list)
    references: list[int] = field(default_factory=list)
