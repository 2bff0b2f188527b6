"""Strict parsing of the package list and package version list documents.

Both documents are JSON result envelopes (``{"status": 0, "result": [...]}``)
as emitted by the packaging platform's CLI with ``--json``. Each is checked
against a JSON schema shipped in ``schemas/`` before any record is built, so a
missing or mistyped field is reported up front instead of surfacing later as
a bad version comparison.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any
from collections.abc import Iterable

from jsonschema import Draft202012Validator

from .errors import DocumentError
from .models import ManagedPackage, ReleaseRecord, Version

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"
PACKAGE_LIST_SCHEMA = "package-list.schema.json"
VERSION_LIST_SCHEMA = "version-list.schema.json"

# The platform reports "no ancestor" either as null or as this marker.
NO_ANCESTOR = "N/A"
DEFAULT_MANAGED_OPTION = "Managed"


@lru_cache(maxsize=None)
def _validator(schema_name: str) -> Draft202012Validator:
    schema = json.loads((SCHEMA_DIR / schema_name).read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def _check_envelope(document: Any, kind: str) -> None:
    if not isinstance(document, dict):
        raise DocumentError(f"{kind} document must be a JSON object")
    status = document.get("status")
    if isinstance(status, bool) or not isinstance(status, int):
        raise DocumentError(f"{kind} document is missing an integer 'status'")
    if status != 0:
        message = document.get("message") or document.get("name") or "no message"
        raise DocumentError(f"{kind} document reports status {status}: {message}")


def validate_document(document: Any, schema_name: str, kind: str) -> list[dict[str, Any]]:
    """Check the envelope and schema of ``document`` and return its records.

    Raises:
        DocumentError: non-success status or any schema violation.
    """
    _check_envelope(document, kind)
    validator = _validator(schema_name)
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise DocumentError(f"{kind} document failed validation:\n" + _format_errors(errors))
    return document["result"]


def _optional_id(value: str | None) -> str | None:
    if value is None or value == NO_ANCESTOR:
        return None
    return value


def parse_package_list(document: Any) -> list[ManagedPackage]:
    records = validate_document(document, PACKAGE_LIST_SCHEMA, "Package list")
    return [
        ManagedPackage(name=record["Name"], container_option=record["ContainerOptions"])
        for record in records
    ]


def managed_families(
    packages: Iterable[ManagedPackage], managed_option: str = DEFAULT_MANAGED_OPTION
) -> set[str]:
    """Return the names of every package with the managed container option."""
    return {package.name for package in packages if package.is_managed(managed_option)}


def _release_from_record(record: dict[str, Any]) -> ReleaseRecord:
    ancestor_version = _optional_id(record.get("AncestorVersion"))
    return ReleaseRecord(
        id=record["SubscriberPackageVersionId"],
        package_version_id=record["Id"],
        family=record["Package2Name"],
        version=Version(
            record["MajorVersion"],
            record["MinorVersion"],
            record["PatchVersion"],
            record["BuildNumber"],
        ),
        name=record["Name"],
        released=record["IsReleased"],
        ancestor_id=_optional_id(record["AncestorId"]),
        ancestor_version=Version.parse(ancestor_version) if ancestor_version else None,
    )


def parse_version_list(document: Any) -> list[ReleaseRecord]:
    """Build release records from a package version list document.

    Raises:
        DocumentError: the document is malformed or a record cannot be built.
    """
    records = validate_document(document, VERSION_LIST_SCHEMA, "Package version list")
    releases: list[ReleaseRecord] = []
    for index, record in enumerate(records):
        try:
            releases.append(_release_from_record(record))
        except ValueError as exc:
            raise DocumentError(f"Package version list record {index}: {exc}") from exc
    return releases
