"""Load input documents from a file, stdin or a URL."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import requests
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from .errors import DocumentError, DocumentFetchError

STDIN_SOURCE = "-"


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str) -> Response:
    return requests.get(url, timeout=30)


def fetch_text(url: str) -> str:
    """Return the body of ``url``, raising DocumentFetchError on failure."""
    try:
        response = _http_get(url)
    except requests.RequestException as exc:  # pragma: no cover - network failure path
        raise DocumentFetchError(f"Failed to fetch {url}: {exc}") from exc

    if response.status_code != 200:
        raise DocumentFetchError(f"Unexpected status code {response.status_code} fetching {url}")

    return response.text


def _read_source(source: str) -> str:
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    if source.startswith("http://") or source.startswith("https://"):
        return fetch_text(source)
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Failed to read {source}: {exc}") from exc


def load_document(source: str) -> Any:
    """Load a JSON document from a path, ``-`` for stdin, or an http(s) URL.

    Raises:
        DocumentFetchError: the URL could not be fetched.
        DocumentError: the file is unreadable or the content is not JSON.
    """
    text = _read_source(source)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Invalid JSON in {source}: {exc}") from exc
