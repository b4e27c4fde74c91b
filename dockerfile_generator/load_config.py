"""Logic for loading the optional `.dockerbuild` configuration file."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from dockerfile_generator.deep_merge import deep_merge
from dockerfile_generator.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".dockerbuild"

_NUMERIC_TAGS = frozenset({"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"})

LANGUAGE_DOTNET = "dotnet"
LANGUAGE_GO = "go"

DEFAULT_CONFIG: dict[str, Any] = {
    # Empty means: autodetect from the project path.
    "language": "",
    "dotnet": {
        "sdk-version": "",
        "application-entrypoint": "",
    },
    "base": {"image": "", "packages": []},
    "base-build": {"image": "", "packages": []},
    "final": {"run": []},
}


class _ConfigLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted numbers such as `8.10` as strings."""


_ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _NUMERIC_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.debug("No configuration file at %s, using defaults", p)
        return config

    try:
        text = p.read_text(encoding="utf-8")
        user_config = yaml.load(text, Loader=_ConfigLoader) or {}  # noqa: S506
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {p}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(user_config, dict):
        msg = f"Configuration file {p} must contain a mapping"
        raise ConfigError(msg)

    logger.debug("Loaded configuration from %s", p)
    return deep_merge(config, user_config)


def find_config_file(start_dir: Path, root_path: Path | None) -> Path | None:
    """Find the nearest `.dockerbuild` from `start_dir` up to `root_path`."""
    current = start_dir
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current == root_path or current.parent == current:
            return None
        current = current.parent
