"""Validation outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable


@dataclass(frozen=True)
class FamilyResult:
    """Errors found while validating a single package family."""

    name: str
    release_count: int
    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Family name must be non-empty")
        if self.release_count < 0:
            raise ValueError("Release count must be non-negative")

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "releases": self.release_count,
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class ValidationResult:
    """Aggregate outcome of a whole run across every managed family."""

    families: tuple[FamilyResult, ...]

    @property
    def errors(self) -> list[str]:
        return [message for family in self.families for message in family.errors]

    @property
    def ok(self) -> bool:
        return all(family.ok for family in self.families)

    @property
    def family_names(self) -> list[str]:
        return [family.name for family in self.families]

    @classmethod
    def from_families(cls, families: Iterable[FamilyResult]) -> ValidationResult:
        return cls(families=tuple(sorted(families, key=lambda family: family.name)))
