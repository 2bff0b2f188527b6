#!/usr/bin/env python3
"""Local CLI entrypoint to run the ancestry check from a source checkout.

Usage:
  python scripts/check_ancestry.py --packages packages.json --versions versions.json

This calls the same main() installed as the ``release-lineage`` command.
"""

from __future__ import annotations

from release_lineage.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
