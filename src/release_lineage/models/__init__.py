"""Data models for release lineage validation."""

from __future__ import annotations

from .release import ManagedPackage, ReleaseRecord
from .result import FamilyResult, ValidationResult
from .version import ZERO_VERSION, Version

__all__ = [
    "FamilyResult",
    "ManagedPackage",
    "ReleaseRecord",
    "ValidationResult",
    "Version",
    "ZERO_VERSION",
]
