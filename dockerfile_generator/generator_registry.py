"""Registry of the available Dockerfile generators."""

from dockerfile_generator.dotnet_generator import DotnetGenerator
from dockerfile_generator.generator import Generator
from dockerfile_generator.go_generator import GoGenerator

_registry: dict[str, Generator] = {}
_ordered: list[Generator] = []


def register(generator: Generator) -> None:
    """Add `generator`, replacing any generator registered under the same name."""
    if not generator.name:
        msg = "Generator name cannot be empty"
        raise ValueError(msg)
    previous = _registry.get(generator.name)
    if previous is None:
        _ordered.append(generator)
    else:
        _ordered[_ordered.index(previous)] = generator
    _registry[generator.name] = generator


def get_generator(name: str) -> Generator | None:
    """Return the generator registered under `name`."""
    return _registry.get(name)


def all_generators() -> list[Generator]:
    """Return the generators in registration order."""
    return list(_ordered)


register(DotnetGenerator())
register(GoGenerator())
