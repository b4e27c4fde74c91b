"""Data model for the direct content of one project file."""

from dataclasses import dataclass, field

from dockerfile_generator.package_reference import PackageReference


@dataclass
class ParsedDescriptor:
    """Package references and raw project reference includes of a `.csproj`."""

    package_references: list[PackageReference] = field(default_factory=list)
    project_includes: list[str] = field(default_factory=list)  # unresolved
