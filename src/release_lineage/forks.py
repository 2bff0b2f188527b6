"""Detect bad forks in a package family's release tree.

Walking down from a virtual 0.0.0.0 ancestor, every level may hold any number
of patch releases of the current version but at most one non-patch successor.
A patch release does not add depth: its children join the level it sits on.
"""

from __future__ import annotations

import logging

from .lineage import Lineage
from .models import ZERO_VERSION, ReleaseRecord, Version

LOGGER = logging.getLogger(__name__)


def _not_later_message(family: str, record: ReleaseRecord, current: Version) -> str:
    return (
        f"Package '{family}': {record.label} is not later than "
        f"its ancestor version {current}"
    )


def _bad_fork_message(
    family: str, current: Version, extra: ReleaseRecord, kept: ReleaseRecord
) -> str:
    return (
        f"Package '{family}': bad fork after version {current}: "
        f"{extra.label} conflicts with {kept.label}"
    )


def validate_level(
    lineage: Lineage,
    family: str,
    candidates: list[ReleaseRecord],
    current: Version,
    errors: list[str],
) -> ReleaseRecord | None:
    """Check one level of the tree, appending violations to ``errors``.

    Returns the level's non-patch successor, or None when the walk ends here.
    When several non-patch releases compete, the earliest version (then the
    lowest id) is kept and every other one is reported as a bad fork.
    """
    pending = list(candidates)
    successors: list[ReleaseRecord] = []
    while pending:
        record = pending.pop(0)
        if record.version.is_patch_of(current):
            pending.extend(lineage.children_of(record))
            continue
        if not current.is_prior_to(record.version):
            errors.append(_not_later_message(family, record, current))
            continue
        successors.append(record)

    if not successors:
        return None

    successors.sort(key=lambda candidate: (candidate.version, candidate.id))
    successor = successors[0]
    for extra in successors[1:]:
        errors.append(_bad_fork_message(family, current, extra, successor))
    return successor


def validate_family(lineage: Lineage, family: str) -> list[str]:
    """Return every lineage violation found in ``family``; empty means valid."""
    errors: list[str] = []
    current = ZERO_VERSION
    candidates = lineage.roots_for(family)
    while candidates:
        successor = validate_level(lineage, family, candidates, current, errors)
        if successor is None:
            break
        LOGGER.debug("Package '%s': %s -> %s", family, current, successor.version)
        current = successor.version
        candidates = lineage.children_of(successor)
    return errors
