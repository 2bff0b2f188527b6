"""Reconstruct release trees from ancestor pointers.

Records are kept in an arena keyed by id; children are stored as tuples of
child ids rather than on the records themselves, so the same records can be
built and validated any number of times.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from collections.abc import Collection, Iterable

from .errors import AncestorMismatchError, DuplicateReleaseError, UnresolvedAncestorError
from .models import ReleaseRecord

LOGGER = logging.getLogger(__name__)

DEFAULT_DO_NOT_USE_MARKER = "DO NOT USE"


@dataclass(frozen=True)
class Lineage:
    """Release forest for one or more package families."""

    records: dict[str, ReleaseRecord]
    children: dict[str, tuple[str, ...]]
    roots: tuple[str, ...]
    families: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.records)

    def children_of(self, record: ReleaseRecord) -> list[ReleaseRecord]:
        return [self.records[child_id] for child_id in self.children.get(record.id, ())]

    def roots_for(self, family: str) -> list[ReleaseRecord]:
        """Return the root releases belonging to ``family`` in input order."""
        return [
            self.records[root_id]
            for root_id in self.roots
            if self.records[root_id].family == family
        ]


def _is_marked_do_not_use(record: ReleaseRecord, marker: str) -> bool:
    return marker.casefold() in record.name.casefold()


def select_releases(
    records: Iterable[ReleaseRecord],
    managed_families: Collection[str],
    *,
    do_not_use_marker: str = DEFAULT_DO_NOT_USE_MARKER,
    ignored_families: Collection[str] = (),
) -> list[ReleaseRecord]:
    """Return the records eligible for lineage validation, in input order.

    Dropped: records outside the managed families or inside an ignored one,
    unreleased records, and records whose name carries the do-not-use marker.
    """
    selected: list[ReleaseRecord] = []
    dropped = 0
    for record in records:
        if record.family not in managed_families or record.family in ignored_families:
            dropped += 1
            continue
        if not record.released:
            dropped += 1
            continue
        if _is_marked_do_not_use(record, do_not_use_marker):
            LOGGER.debug("Skipping %s marked %r", record.label, do_not_use_marker)
            dropped += 1
            continue
        selected.append(record)

    LOGGER.debug("Retained %d release(s), dropped %d", len(selected), dropped)
    return selected


def build_lineage(
    records: Iterable[ReleaseRecord],
    managed_families: Collection[str],
    *,
    do_not_use_marker: str = DEFAULT_DO_NOT_USE_MARKER,
    ignored_families: Collection[str] = (),
) -> Lineage:
    """Filter ``records`` and link each retained release to its ancestor.

    Raises:
        DuplicateReleaseError: two retained records share an id.
        UnresolvedAncestorError: a retained record's ancestor was not retained.
        AncestorMismatchError: a record's declared ancestor version differs
            from the version of the ancestor it points to.
    """
    retained = select_releases(
        records,
        managed_families,
        do_not_use_marker=do_not_use_marker,
        ignored_families=ignored_families,
    )

    by_id: dict[str, ReleaseRecord] = {}
    for record in retained:
        if record.id in by_id:
            raise DuplicateReleaseError(record.id)
        by_id[record.id] = record

    children: dict[str, list[str]] = defaultdict(list)
    roots: list[str] = []
    for record in retained:
        if record.is_root:
            roots.append(record.id)
            continue

        ancestor = by_id.get(record.ancestor_id)
        if ancestor is None:
            raise UnresolvedAncestorError(record.id, record.ancestor_id)
        if record.ancestor_version is not None and record.ancestor_version != ancestor.version:
            raise AncestorMismatchError(
                record.id, ancestor.id, str(record.ancestor_version), str(ancestor.version)
            )
        children[ancestor.id].append(record.id)

    families = tuple(sorted({record.family for record in retained}))
    return Lineage(
        records=by_id,
        children={parent_id: tuple(ids) for parent_id, ids in children.items()},
        roots=tuple(roots),
        families=families,
    )
