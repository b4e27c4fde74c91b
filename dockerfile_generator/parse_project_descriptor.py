"""Logic for reading package and project references out of a `.csproj` file."""

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from dockerfile_generator.errors import ProjectParseError
from dockerfile_generator.package_reference import PackageReference
from dockerfile_generator.parsed_descriptor import ParsedDescriptor


def _local_name(tag: object) -> str:
    # Old-style projects put every element in the MSBuild 2003 namespace.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            yield child


def parse_project_descriptor(content: bytes | str, path: Path) -> ParsedDescriptor:
    """Parse a project file and return its direct references.

    Only `Project/ItemGroup/PackageReference` and
    `Project/ItemGroup/ProjectReference` are read. A package version comes
    from the `Version` attribute when it is non-empty, otherwise from a
    nested `<Version>` element. Project reference includes are returned as
    written; wildcard expansion happens later.
    """
    try:
        root = ET.fromstring(content)  # noqa: S314 - local build files
    except ET.ParseError as exc:
        raise ProjectParseError(path, str(exc)) from exc

    if _local_name(root.tag) != "Project":
        msg = f"expected <Project> document element, found <{_local_name(root.tag)}>"
        raise ProjectParseError(path, msg)

    parsed = ParsedDescriptor()
    for item_group in _children(root, "ItemGroup"):
        for element in item_group:
            kind = _local_name(element.tag)
            if kind == "PackageReference":
                version = element.get("Version", "")
                if not version:
                    nested = next(_children(element, "Version"), None)
                    if nested is not None and nested.text:
                        version = nested.text.strip()
                parsed.package_references.append(
                    PackageReference(include=element.get("Include", ""), version=version)
                )
            elif kind == "ProjectReference":
                parsed.project_includes.append(element.get("Include", ""))
    return parsed
