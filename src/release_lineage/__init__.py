"""release-lineage core package.

This package reconstructs package release trees from ancestor pointers and
reports bad forks. The validation core is callable from the bundled CLI or
from any other orchestration that supplies the two input documents.
"""

__all__ = [
    "core",
]
