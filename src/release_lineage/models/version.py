"""Four-part package version model."""

from __future__ import annotations

from dataclasses import dataclass

from packaging.version import InvalidVersion
from packaging.version import Version as _PackagingVersion

_PARTS = ("major", "minor", "patch", "build")


@dataclass(frozen=True, order=True)
class Version:
    """A released package version: ``major.minor.patch.build``.

    Ordering is lexicographic over the four components. Two versions on the
    same minor line (equal major and minor) are patches of each other.
    """

    major: int
    minor: int
    patch: int = 0
    build: int = 0

    def __post_init__(self) -> None:
        for part in _PARTS:
            value = getattr(self, part)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Version {part} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Version {part} must be non-negative, got {value}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.build}"

    def is_patch_of(self, other: Version) -> bool:
        """Return True when both versions sit on the same minor release line."""
        return self.major == other.major and self.minor == other.minor

    def is_prior_to(self, other: Version) -> bool:
        return self < other

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a dotted version such as ``1.3`` or ``1.3.0.4``.

        Missing trailing components default to zero. Pre-release, post-release,
        dev, local and epoch segments are rejected.
        """
        try:
            parsed = _PackagingVersion(text.strip())
        except InvalidVersion as exc:
            raise ValueError(f"Invalid version '{text}'") from exc

        if (
            parsed.epoch
            or parsed.is_prerelease
            or parsed.is_postrelease
            or parsed.local is not None
        ):
            raise ValueError(f"Invalid version '{text}': only numeric components are allowed")

        release = parsed.release
        if len(release) > len(_PARTS):
            raise ValueError(f"Invalid version '{text}': at most four components are allowed")

        padded = tuple(release) + (0,) * (len(_PARTS) - len(release))
        return cls(*padded)


# Virtual ancestor of every root release.
ZERO_VERSION = Version(0, 0, 0, 0)
