"""Orchestration logic for generating a Dockerfile from a project path."""

import argparse
import logging
import os
from pathlib import Path
from typing import Any

from dockerfile_generator.errors import (
    ProjectDetectionError,
    RepositoryRootNotFoundError,
    UnknownLanguageError,
)
from dockerfile_generator.find_repository_root import find_repository_root
from dockerfile_generator.generator import Generator
from dockerfile_generator.generator_registry import all_generators, get_generator
from dockerfile_generator.load_config import find_config_file, load_config
from dockerfile_generator.unified_diff import unified_diff

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    project_path = Path(os.path.abspath(args.path))
    if not project_path.exists():
        msg = f"Project path not found: {project_path}"
        raise ProjectDetectionError(msg)
    project_dir = project_path if project_path.is_dir() else project_path.parent

    repo_root = find_repository_root(project_path)
    if repo_root is None:
        msg = f"Cannot find repository root above {project_path}"
        raise RepositoryRootNotFoundError(msg)

    config = _load_config(args, project_dir, repo_root)
    generator = _select_generator(args.language or config.get("language"), project_path)
    logger.debug("Using %s generator for %s", generator.name, project_path)

    project, additional = generator.load(project_path, repo_root)
    dest = project_dir / args.dockerfile

    if args.dry_run:
        content = generator.render(project, additional, config)
        old = dest.read_text(encoding="utf-8") if dest.exists() else ""
        diff = unified_diff(old, content, str(dest))
        print(diff or f"No changes to {dest}")
        return 0

    generator.generate_dockerfile(project, additional, dest, config)
    print(f"Successfully generated {dest} for project {project_path}")
    return 0


def _load_config(
    args: argparse.Namespace, project_dir: Path, repo_root: Path
) -> dict[str, Any]:
    """Load the explicit config file, or the nearest `.dockerbuild`."""
    config_path = args.config or find_config_file(project_dir, repo_root)
    return load_config(config_path)


def _select_generator(language: str | None, project_path: Path) -> Generator:
    """Pick the generator named by `language`, or the first that detects the path."""
    if language:
        generator = get_generator(language)
        if generator is None:
            msg = f"Unsupported language: {language}"
            raise UnknownLanguageError(msg)
        return generator

    for generator in all_generators():
        if generator.detect(project_path):
            logger.debug("Detected %s project at %s", generator.name, project_path)
            return generator

    msg = f"Could not detect the project language of {project_path}; use --language"
    raise UnknownLanguageError(msg)
