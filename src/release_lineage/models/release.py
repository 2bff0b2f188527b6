"""Release record and managed package models."""

from __future__ import annotations

from dataclasses import dataclass

from .version import Version


@dataclass(frozen=True)
class ReleaseRecord:
    """One package version as reported by the packaging platform.

    ``id`` is the subscriber package version id, the identity other records
    use as their ``ancestor_id``. ``package_version_id`` is the platform's own
    18-character record id.
    """

    id: str
    package_version_id: str
    family: str
    version: Version
    name: str
    released: bool
    ancestor_id: str | None = None
    ancestor_version: Version | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Release id must be non-empty")
        if not self.family:
            raise ValueError("Release family must be non-empty")
        if self.ancestor_id == "":
            raise ValueError("Ancestor id must be None or non-empty")

    @property
    def is_root(self) -> bool:
        return self.ancestor_id is None

    @property
    def label(self) -> str:
        return f"{self.name} {self.version} ({self.id})"


@dataclass(frozen=True)
class ManagedPackage:
    """A package entry from the package list document."""

    name: str
    container_option: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")

    def is_managed(self, managed_option: str) -> bool:
        return self.container_option == managed_option
