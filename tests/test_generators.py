"""Tests for the generator registry and the .NET / Go generators."""

from pathlib import Path
from typing import Any

import pytest

from dockerfile_generator.additional_file_path import AdditionalFilePath
from dockerfile_generator.dotnet_generator import DotnetGenerator
from dockerfile_generator.errors import ProjectDetectionError
from dockerfile_generator.generator import Generator
from dockerfile_generator.generator_registry import (
    all_generators,
    get_generator,
    register,
)
from dockerfile_generator.go_generator import GoGenerator
from dockerfile_generator.go_project import GoProject
from dockerfile_generator.load_config import load_config

SAMPLE_CSPROJ = """<?xml version="1.0" encoding="utf-8"?>
<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net9.0</TargetFramework>
    <OutputType>Exe</OutputType>
  </PropertyGroup>
</Project>"""

SAMPLE_GO_MOD = "module example.com/team/app\n\ngo 1.23\n"


def write(path: Path, content: str) -> Path:
    """Write a file, creating its parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class FakeGenerator(Generator):
    """Generator stub used to exercise the registry."""

    def __init__(self, name: str) -> None:
        """Set the registry name."""
        self.name = name

    def detect(self, path: Path) -> bool:
        """Never detect anything."""
        return False

    def load(self, project_path: Path, repo_root: Path) -> tuple[Any, list]:
        """Load nothing."""
        return None, []

    def render(self, project: Any, additional: list, config: dict[str, Any]) -> str:
        """Render an empty file."""
        return ""


def test_registry_has_default_generators() -> None:
    """Verify dotnet and go are registered, dotnet first."""
    assert [g.name for g in all_generators()][:2] == ["dotnet", "go"]
    assert isinstance(get_generator("dotnet"), DotnetGenerator)
    assert isinstance(get_generator("go"), GoGenerator)
    assert get_generator("rust") is None


def test_register_replaces_in_place() -> None:
    """Verify re-registering a name keeps its position."""
    original = get_generator("go")
    assert original is not None
    fake = FakeGenerator("go")
    try:
        register(fake)
        assert get_generator("go") is fake
        assert [g.name for g in all_generators()].count("go") == 1
    finally:
        register(original)
    assert get_generator("go") is original


def test_register_rejects_empty_name() -> None:
    """Verify a nameless generator cannot be registered."""
    with pytest.raises(ValueError, match="empty"):
        register(FakeGenerator(""))


def test_dotnet_detect(tmp_path: Path) -> None:
    """Verify detection of a .csproj file or a directory holding exactly one."""
    gen = DotnetGenerator()
    app = write(tmp_path / "single" / "App.csproj", SAMPLE_CSPROJ)
    assert gen.detect(app)
    assert gen.detect(app.parent)

    empty = tmp_path / "empty"
    empty.mkdir()
    assert not gen.detect(empty)

    write(tmp_path / "multi" / "A.csproj", SAMPLE_CSPROJ)
    write(tmp_path / "multi" / "B.csproj", SAMPLE_CSPROJ)
    assert not gen.detect(tmp_path / "multi")
    assert not gen.detect(tmp_path / "missing.csproj")


def test_dotnet_load_errors(tmp_path: Path) -> None:
    """Verify unusable inputs raise ProjectDetectionError."""
    gen = DotnetGenerator()
    empty = tmp_path / "empty"
    empty.mkdir()
    with pytest.raises(ProjectDetectionError, match="No .csproj"):
        gen.load(empty, tmp_path)

    write(tmp_path / "multi" / "A.csproj", SAMPLE_CSPROJ)
    write(tmp_path / "multi" / "B.csproj", SAMPLE_CSPROJ)
    with pytest.raises(ProjectDetectionError, match="Multiple"):
        gen.load(tmp_path / "multi", tmp_path)

    text = write(tmp_path / "file.txt", "hello")
    with pytest.raises(ProjectDetectionError, match="must be a .csproj"):
        gen.load(text, tmp_path)


def test_dotnet_generate_default_images(tmp_path: Path) -> None:
    """Verify the default images, SDK version and publish step."""
    gen = DotnetGenerator()
    app = write(tmp_path / "App.csproj", SAMPLE_CSPROJ)
    project, additional = gen.load(tmp_path, tmp_path)
    assert additional == []

    dest = tmp_path / "Dockerfile"
    gen.generate_dockerfile(project, additional, dest, load_config(None))
    content = dest.read_text(encoding="utf-8")
    assert "ARG TARGET_DOTNET_VERSION=9.0" in content
    assert "FROM mcr.microsoft.com/dotnet/sdk:${TARGET_DOTNET_VERSION}-alpine AS build" in content
    assert "FROM mcr.microsoft.com/dotnet/aspnet:${TARGET_DOTNET_VERSION}-alpine AS final" in content
    assert f'COPY ["{app.name}", "./"]' in content
    assert 'RUN dotnet publish --no-restore "App.csproj"' in content
    assert 'WORKDIR "/src/"' in content
    assert content.endswith('ENTRYPOINT ["dotnet", "App.dll"]\n')


def test_dotnet_restore_layer_copies_closure_and_context(tmp_path: Path) -> None:
    """Verify every referenced project and context file is copied before restore."""
    write(tmp_path / "nuget.config", "<configuration />")
    write(tmp_path / "src" / "Directory.Build.props", "<Project />")
    write(tmp_path / "src" / "Lib" / "Lib.csproj", SAMPLE_CSPROJ)
    write(
        tmp_path / "src" / "App" / "App.csproj",
        '<Project><ItemGroup><ProjectReference Include="..\\Lib\\Lib.csproj" />'
        "</ItemGroup></Project>",
    )
    gen = DotnetGenerator()
    project, additional = gen.load(tmp_path / "src" / "App", tmp_path)
    content = gen.render(project, additional, load_config(None))

    lines = content.splitlines()
    restore = lines.index('RUN dotnet restore "src/App/App.csproj"')
    expected_copies = [
        'COPY ["nuget.config", "./"]',
        'COPY ["src/Directory.Build.props", "src/"]',
        'COPY ["src/App/App.csproj", "src/App/"]',
        'COPY ["src/Lib/Lib.csproj", "src/Lib/"]',
    ]
    assert lines[restore - len(expected_copies) : restore] == expected_copies
    assert 'WORKDIR "/src/src/App/"' in lines


def test_dotnet_config_overrides(tmp_path: Path) -> None:
    """Verify images, packages, entrypoint and final RUN lines come from config."""
    write(tmp_path / "App.csproj", SAMPLE_CSPROJ)
    config = load_config(None)
    config["base"] = {"image": "custom/runtime:1", "packages": ["icu-libs", "tzdata"]}
    config["base-build"] = {"image": "custom/sdk:1", "packages": ["git"]}
    config["dotnet"] = {"sdk-version": "8.0", "application-entrypoint": "Entry.dll"}
    config["final"] = {"run": ["adduser -D app"]}

    gen = DotnetGenerator()
    project, additional = gen.load(tmp_path / "App.csproj", tmp_path)
    content = gen.render(project, additional, config)
    assert "ARG TARGET_DOTNET_VERSION=8.0" in content
    assert "FROM custom/sdk:1 AS build\nRUN apk add --no-cache git\n" in content
    assert "FROM custom/runtime:1 AS final\nRUN apk add --no-cache icu-libs tzdata\n" in content
    assert "RUN adduser -D app\n" in content
    assert 'ENTRYPOINT ["dotnet", "Entry.dll"]' in content


def test_dotnet_sdk_version_from_config_file(tmp_path: Path) -> None:
    """Verify an unquoted sdk-version in .dockerbuild renders verbatim."""
    write(tmp_path / "App.csproj", SAMPLE_CSPROJ)
    write(tmp_path / ".dockerbuild", "dotnet:\n  sdk-version: 8.10\n")
    config = load_config(tmp_path / ".dockerbuild")

    gen = DotnetGenerator()
    project, additional = gen.load(tmp_path / "App.csproj", tmp_path)
    content = gen.render(project, additional, config)
    assert "ARG TARGET_DOTNET_VERSION=8.10\n" in content


def test_dotnet_render_rejects_foreign_project() -> None:
    """Verify the dotnet generator only renders .NET projects."""
    with pytest.raises(TypeError):
        DotnetGenerator().render(object(), [], load_config(None))


def test_go_detect(tmp_path: Path) -> None:
    """Verify a go.mod file or its directory is detected."""
    gen = GoGenerator()
    mod = write(tmp_path / "go.mod", SAMPLE_GO_MOD)
    assert gen.detect(tmp_path)
    assert gen.detect(mod)
    assert not gen.detect(write(tmp_path / "main.go", "package main"))
    other = tmp_path / "other"
    other.mkdir()
    assert not gen.detect(other)


def test_go_load_and_render(tmp_path: Path) -> None:
    """Verify the module name is parsed and the Dockerfile renders."""
    write(tmp_path / "services" / "app" / "go.mod", SAMPLE_GO_MOD)
    gen = GoGenerator()
    project, additional = gen.load(tmp_path / "services" / "app" / "go.mod", tmp_path)
    assert additional == []
    assert project == GoProject(tmp_path, tmp_path / "services" / "app", "app")

    content = gen.render(project, additional, load_config(None))
    assert "ARG GO_VERSION=" in content
    assert "FROM golang:${GO_VERSION}-alpine AS build" in content
    assert "COPY services/app/go.* ./" in content
    assert "FROM alpine:3.19 AS final" in content
    assert 'ENTRYPOINT ["/usr/local/bin/app"]' in content


def test_go_load_falls_back_to_directory_name(tmp_path: Path) -> None:
    """Verify a go.mod without a module line uses the directory name."""
    write(tmp_path / "tool" / "go.mod", "go 1.23\n")
    project, _ = GoGenerator().load(tmp_path / "tool", tmp_path)
    assert project.name == "tool"


def test_go_load_rejects_other_files(tmp_path: Path) -> None:
    """Verify only go.mod or its directory are accepted."""
    with pytest.raises(ProjectDetectionError):
        GoGenerator().load(write(tmp_path / "main.go", "package main"), tmp_path)


def test_additional_file_paths() -> None:
    """Verify root-relative accessors of context files."""
    extra = AdditionalFilePath(Path("/repo/src/Directory.Build.props"), Path("/repo"))
    assert extra.relative_path == "src/Directory.Build.props"
    assert extra.directory_relative_path == "src/"
