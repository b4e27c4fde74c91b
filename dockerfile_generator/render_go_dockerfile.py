"""Logic for rendering the Dockerfile of a Go module."""

import logging
from typing import Any

from dockerfile_generator.go_project import GoProject

logger = logging.getLogger(__name__)

DEFAULT_BUILD_IMAGE = "golang:${GO_VERSION}-alpine"
DEFAULT_RUNTIME_IMAGE = "alpine:3.19"
DEFAULT_GO_VERSION = "1.23"


def render_go_dockerfile(project: GoProject, config: dict[str, Any]) -> str:
    """Render a multi-stage Dockerfile building a static binary of `project`."""
    base_cfg = config.get("base") or {}
    build_cfg = config.get("base-build") or {}
    final_cfg = config.get("final") or {}

    build_image = build_cfg.get("image") or DEFAULT_BUILD_IMAGE
    runtime_image = base_cfg.get("image") or DEFAULT_RUNTIME_IMAGE
    logger.debug("go image selection: build=%s runtime=%s", build_image, runtime_image)

    module_dir = project.directory_relative_path
    workdir = "/src/" if module_dir == "./" else f"/src/{module_dir}"
    binary = f"/usr/local/bin/{project.name}"

    parts: list[str] = [
        "# syntax=docker/dockerfile:1",
        f"ARG GO_VERSION={DEFAULT_GO_VERSION}",
        "",
        f"FROM {build_image} AS build",
    ]
    if build_cfg.get("packages"):
        parts.append(f"RUN apk add --no-cache {' '.join(build_cfg['packages'])}")
    parts += [
        f"WORKDIR {workdir}",
        f"COPY {module_dir}go.* ./",
        "RUN go mod download",
        "WORKDIR /src",
        "COPY . .",
        f"WORKDIR {workdir}",
        f"RUN CGO_ENABLED=0 go build -o /out/{project.name} .",
        "",
        f"FROM {runtime_image} AS final",
    ]
    if base_cfg.get("packages"):
        parts.append(f"RUN apk add --no-cache {' '.join(base_cfg['packages'])}")
    parts += [f"RUN {cmd}" for cmd in final_cfg.get("run") or []]
    parts += [
        f"COPY --from=build /out/{project.name} {binary}",
        f'ENTRYPOINT ["{binary}"]',
    ]
    return "\n".join(parts) + "\n"
