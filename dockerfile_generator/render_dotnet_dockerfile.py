"""Logic for rendering the Dockerfile of a .NET project."""

import logging
from typing import Any

from dockerfile_generator.additional_file_path import AdditionalFilePath
from dockerfile_generator.project import Project

logger = logging.getLogger(__name__)

DEFAULT_RUNTIME_IMAGE = "mcr.microsoft.com/dotnet/aspnet:${TARGET_DOTNET_VERSION}-alpine"
DEFAULT_SDK_IMAGE = "mcr.microsoft.com/dotnet/sdk:${TARGET_DOTNET_VERSION}-alpine"
DEFAULT_SDK_VERSION = "9.0"


def _apk_add(packages: list[str]) -> list[str]:
    if not packages:
        return []
    return [f"RUN apk add --no-cache {' '.join(packages)}"]


def _workdir(directory_relative_path: str) -> str:
    if directory_relative_path == "./":
        return "/src/"
    return f"/src/{directory_relative_path}"


def render_dotnet_dockerfile(
    project: Project,
    additional: list[AdditionalFilePath],
    config: dict[str, Any],
) -> str:
    """Render a multi-stage Dockerfile restoring, publishing and running `project`.

    Every project of the closure and every additional file is copied before
    `dotnet restore` so the restore layer is only rebuilt when one of them
    changes.
    """
    dotnet_cfg = config.get("dotnet") or {}
    base_cfg = config.get("base") or {}
    build_cfg = config.get("base-build") or {}
    final_cfg = config.get("final") or {}

    runtime_image = base_cfg.get("image") or DEFAULT_RUNTIME_IMAGE
    sdk_image = build_cfg.get("image") or DEFAULT_SDK_IMAGE
    sdk_version = dotnet_cfg.get("sdk-version") or DEFAULT_SDK_VERSION
    entrypoint = dotnet_cfg.get("application-entrypoint") or f"{project.name}.dll"
    logger.debug(
        "dotnet image selection: runtime=%s sdk=%s sdkVersion=%s entrypoint=%s",
        runtime_image,
        sdk_image,
        sdk_version,
        entrypoint,
    )

    parts: list[str] = [
        "# syntax=docker/dockerfile:1",
        f"ARG TARGET_DOTNET_VERSION={sdk_version}",
        "",
        f"FROM {sdk_image} AS build",
    ]
    parts += _apk_add(build_cfg.get("packages") or [])
    parts.append("WORKDIR /src")

    for extra in additional:
        parts.append(
            f'COPY ["{extra.relative_path}", "{extra.directory_relative_path}"]'
        )
    for ref in project.all_project_references():
        parts.append(f'COPY ["{ref.relative_path}", "{ref.directory_relative_path}"]')

    parts += [
        f'RUN dotnet restore "{project.relative_path}"',
        "COPY . .",
        f'WORKDIR "{_workdir(project.directory_relative_path)}"',
        f'RUN dotnet publish --no-restore "{project.file_name}" '
        "-c Release -o /app/publish /p:UseAppHost=false",
        "",
        f"FROM {runtime_image} AS final",
    ]
    parts += _apk_add(base_cfg.get("packages") or [])
    parts += [f"RUN {cmd}" for cmd in final_cfg.get("run") or []]
    parts += [
        "WORKDIR /app",
        "COPY --from=build /app/publish .",
        f'ENTRYPOINT ["dotnet", "{entrypoint}"]',
    ]
    return "\n".join(parts) + "\n"
