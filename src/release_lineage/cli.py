"""Check that every managed package has a single, unforked upgrade path.

Typical use with the Salesforce CLI:

  sf package list --json > packages.json
  sf package version list --released --json > versions.json
  release-lineage --packages packages.json --versions versions.json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import check_ancestry
from .errors import DocumentError
from .report import aggregate
from .sources import load_document
from .summary import render_summary

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_LINEAGE_ERRORS = 10

WARN_ONLY_ENV_VAR = "RELEASE_LINEAGE_WARN_ONLY"
_TRUTHY = {"1", "true", "yes", "y"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="release-lineage",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--packages",
        required=True,
        help="Package list JSON: a path, an http(s) URL, or - for stdin",
    )
    parser.add_argument(
        "--versions",
        required=True,
        help="Package version list JSON: a path, an http(s) URL, or - for stdin",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    parser.add_argument(
        "--family",
        dest="families",
        action="append",
        default=None,
        help="Only validate this package (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print the JSON report")
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Append a Markdown summary to this file (default: $GITHUB_STEP_SUMMARY)",
    )
    parser.add_argument(
        "--warn-only", action="store_true", help="Exit 0 even when errors are found"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.packages == "-" and args.versions == "-":
        parser.error("--packages and --versions cannot both read from stdin")
    return args


def _summary_path(explicit: Path | None) -> Path | None:
    if explicit is not None:
        return explicit
    env_path = os.getenv("GITHUB_STEP_SUMMARY", "").strip()
    return Path(env_path) if env_path else None


def _warn_only(flag: bool) -> bool:
    return flag or os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in _TRUTHY


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(args.config)
        package_list = load_document(args.packages)
        version_list = load_document(args.versions)
        result = check_ancestry(package_list, version_list, settings, args.families)
    except ConfigError as exc:
        print(f"ERROR: Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except DocumentError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    report = aggregate(result)

    if args.json:
        print(json.dumps(report, indent=2))
    elif result.ok:
        print(f"All {len(result.families)} package families have a single upgrade path")
    else:
        for message in result.errors:
            print(message)

    summary_path = _summary_path(args.summary)
    if summary_path is not None:
        with summary_path.open("a", encoding="utf-8") as handle:
            handle.write(render_summary(report))

    if result.ok or _warn_only(args.warn_only):
        return EXIT_OK
    return EXIT_LINEAGE_ERRORS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
