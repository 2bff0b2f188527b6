from __future__ import annotations

import io
import json

import pytest

from release_lineage import sources
from release_lineage.errors import DocumentError, DocumentFetchError


class _FakeResponse:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text


def test_load_from_path(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"status": 0, "result": []}), encoding="utf-8")

    assert sources.load_document(str(path)) == {"status": 0, "result": []}


def test_load_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"status": 0, "result": [1]}'))

    assert sources.load_document("-") == {"status": 0, "result": [1]}


def test_load_from_url(monkeypatch):
    calls = []

    def fake_get(url):
        calls.append(url)
        return _FakeResponse(200, '{"status": 0, "result": []}')

    monkeypatch.setattr(sources, "_http_get", fake_get)

    assert sources.load_document("https://example.test/versions.json")["status"] == 0
    assert calls == ["https://example.test/versions.json"]


def test_non_200_response_raises_fetch_error(monkeypatch):
    monkeypatch.setattr(sources, "_http_get", lambda url: _FakeResponse(404, "missing"))

    with pytest.raises(DocumentFetchError, match="404"):
        sources.load_document("https://example.test/versions.json")


def test_missing_file_raises(tmp_path):
    with pytest.raises(DocumentError, match="Failed to read"):
        sources.load_document(str(tmp_path / "absent.json"))


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text("Warning: update available\n{}", encoding="utf-8")

    with pytest.raises(DocumentError, match="Invalid JSON"):
        sources.load_document(str(path))
