"""Data model for NuGet package references."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageReference:
    """A `<PackageReference>` entry: package id and (possibly empty) version."""

    include: str
    version: str = ""
