from __future__ import annotations

from typing import Any

import pytest

from release_lineage.models import ReleaseRecord, Version


@pytest.fixture
def make_release():
    """Factory for release records with compact test ids."""

    def _make(
        release_id: str,
        version: str,
        ancestor: str | None = None,
        *,
        family: str = "base",
        name: str | None = None,
        released: bool = True,
        ancestor_version: str | None = None,
    ) -> ReleaseRecord:
        return ReleaseRecord(
            id=release_id,
            package_version_id=f"05i{release_id:0>15}",
            family=family,
            version=Version.parse(version),
            name=name if name is not None else f"ver {version}",
            released=released,
            ancestor_id=ancestor,
            ancestor_version=Version.parse(ancestor_version) if ancestor_version else None,
        )

    return _make


@pytest.fixture
def version_record():
    """Factory for raw package version list records."""

    def _make(
        release_id: str,
        version: tuple[int, int, int, int],
        ancestor: str | None = "N/A",
        *,
        family: str = "base",
        name: str | None = None,
        released: bool = True,
        **extra: Any,
    ) -> dict[str, Any]:
        major, minor, patch, build = version
        record = {
            "Package2Name": family,
            "Id": f"05i{release_id:0>15}",
            "SubscriberPackageVersionId": release_id,
            "AncestorId": ancestor,
            "MajorVersion": major,
            "MinorVersion": minor,
            "PatchVersion": patch,
            "BuildNumber": build,
            "Name": name if name is not None else f"ver {major}.{minor}",
            "IsReleased": released,
        }
        record.update(extra)
        return record

    return _make


@pytest.fixture
def envelope():
    def _wrap(records: list[dict[str, Any]], status: int = 0) -> dict[str, Any]:
        return {"status": status, "result": records}

    return _wrap


@pytest.fixture
def package_list(envelope) -> dict[str, Any]:
    return envelope(
        [
            {"Name": "base", "ContainerOptions": "Managed"},
            {"Name": "jam", "ContainerOptions": "Managed"},
            {"Name": "scratch", "ContainerOptions": "Unlocked"},
        ]
    )
