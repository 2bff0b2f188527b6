"""Core validation entrypoints.

This module performs no I/O: callers load the two documents (see
``release_lineage.sources``) and decide what to do with the result.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any
from collections.abc import Collection, Iterable

from .config import Settings
from .documents import managed_families, parse_package_list, parse_version_list
from .errors import LineageError
from .forks import validate_family
from .lineage import build_lineage, select_releases
from .models import FamilyResult, ReleaseRecord, ValidationResult

LOGGER = logging.getLogger(__name__)


def _validate_one_family(
    family: str, records: list[ReleaseRecord], settings: Settings
) -> FamilyResult:
    try:
        lineage = build_lineage(
            records,
            {family},
            do_not_use_marker=settings.do_not_use_marker,
        )
    except LineageError as exc:
        LOGGER.warning("Package '%s': release tree cannot be built: %s", family, exc)
        return FamilyResult(
            name=family,
            release_count=len(records),
            errors=(f"Package '{family}': {exc}",),
        )

    errors = validate_family(lineage, family)
    LOGGER.debug("Package '%s': %d release(s), %d error(s)", family, len(lineage), len(errors))
    return FamilyResult(name=family, release_count=len(lineage), errors=tuple(errors))


def validate_releases(
    records: Iterable[ReleaseRecord],
    managed: Collection[str],
    settings: Settings | None = None,
    only_families: Collection[str] | None = None,
) -> ValidationResult:
    """Validate the lineage of every managed package family.

    Each family is built and walked independently: a family whose tree cannot
    be built reports that as its error and the remaining families still run.

    Params:
        records: every release record from the version list document
        managed: names of the managed package families
        settings: filtering settings; defaults when None
        only_families: when given, restrict validation to these families
    """
    settings = settings or Settings()
    retained = select_releases(
        records,
        managed,
        do_not_use_marker=settings.do_not_use_marker,
        ignored_families=settings.ignored_families,
    )

    by_family: dict[str, list[ReleaseRecord]] = defaultdict(list)
    for record in retained:
        by_family[record.family].append(record)

    if only_families is not None:
        missing = sorted(set(only_families) - set(by_family))
        if missing:
            LOGGER.warning("No released versions found for: %s", ", ".join(missing))
        by_family = {name: rs for name, rs in by_family.items() if name in only_families}

    return ValidationResult.from_families(
        _validate_one_family(family, family_records, settings)
        for family, family_records in sorted(by_family.items())
    )


def check_ancestry(
    package_list: Any,
    version_list: Any,
    settings: Settings | None = None,
    only_families: Collection[str] | None = None,
) -> ValidationResult:
    """Parse both documents and validate every managed package family.

    Raises:
        DocumentError: either document is malformed or reports failure.
    """
    settings = settings or Settings()
    packages = parse_package_list(package_list)
    releases = parse_version_list(version_list)
    managed = managed_families(packages, settings.managed_container_option)
    LOGGER.debug(
        "Loaded %d package(s), %d managed, %d version record(s)",
        len(packages),
        len(managed),
        len(releases),
    )
    return validate_releases(releases, managed, settings, only_families)
