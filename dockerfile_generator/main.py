"""Generate a Dockerfile for a .NET or Go project.

For .NET projects the project reference graph is followed so that every
referenced `.csproj`, and the `nuget.config` / `Directory.*.props` files
they depend on, are copied before `dotnet restore`.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version

from dockerfile_generator.errors import DockerfileGeneratorError
from dockerfile_generator.run_generation import run_generation

DISTRIBUTION_NAME = "dockerfile-generator"


def _version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"


def translate_legacy_long_flags(argv: Sequence[str]) -> list[str]:
    """Rewrite single-dash long flags (``-path``) to their ``--path`` form.

    Short flags such as ``-p`` and values are left untouched.
    """
    out: list[str] = []
    for arg in argv:
        name = arg.split("=", 1)[0]
        if arg.startswith("-") and not arg.startswith("--") and len(name) > 2:  # noqa: PLR2004
            out.append("-" + arg)
        else:
            out.append(arg)
    return out


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    ap = argparse.ArgumentParser(
        prog=DISTRIBUTION_NAME,
        description="Generate a Dockerfile for a .NET (.csproj) or Go project.",
    )
    ap.add_argument(
        "project_path",
        nargs="?",
        metavar="path",
        help="Project file or directory (same as --path)",
    )
    ap.add_argument(
        "-p",
        "--path",
        help="Project file or directory (default: current directory)",
    )
    ap.add_argument(
        "-l",
        "--language",
        default="",
        help="Force the project language (dotnet, go); autodetected otherwise",
    )
    ap.add_argument(
        "--dockerfile",
        default="Dockerfile",
        help="Name of the Dockerfile to generate (default: Dockerfile)",
    )
    ap.add_argument(
        "--config",
        help="Path to a .dockerbuild configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Print a diff against the existing Dockerfile instead of writing it",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return ap


def main() -> int:
    """Run the Dockerfile generation."""
    args = build_parser().parse_args(translate_legacy_long_flags(sys.argv[1:]))
    args.path = args.path or args.project_path or "."
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_generation(args)
    except DockerfileGeneratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
