"""Exception hierarchy for release lineage validation."""

from __future__ import annotations


class ReleaseLineageError(RuntimeError):
    """Base error for release lineage failures."""


class DocumentError(ReleaseLineageError):
    """Raised when an input document is unreadable, malformed or reports failure."""


class DocumentFetchError(DocumentError):
    """Raised when an input document cannot be fetched."""


class LineageError(ReleaseLineageError):
    """Raised when a family's release tree cannot be trusted."""


class UnresolvedAncestorError(LineageError):
    """Raised when a release points to an ancestor outside the retained set."""

    def __init__(self, child_id: str, ancestor_id: str) -> None:
        self.child_id = child_id
        self.ancestor_id = ancestor_id
        super().__init__(
            f"Release {child_id} references ancestor {ancestor_id}, "
            "which is not a released version of a managed package"
        )


class DuplicateReleaseError(LineageError):
    """Raised when two retained releases share the same id."""

    def __init__(self, release_id: str) -> None:
        self.release_id = release_id
        super().__init__(f"Release id {release_id} appears more than once")


class AncestorMismatchError(LineageError):
    """Raised when a release's declared ancestor version disagrees with its ancestor."""

    def __init__(self, child_id: str, ancestor_id: str, declared: str, actual: str) -> None:
        self.child_id = child_id
        self.ancestor_id = ancestor_id
        super().__init__(
            f"Release {child_id} declares ancestor version {declared}, "
            f"but ancestor {ancestor_id} is version {actual}"
        )
