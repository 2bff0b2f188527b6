"""Tests for configuration loading and validation."""

from __future__ import annotations

import json

import pytest

from release_lineage.config import CONFIG_PATH_ENV_VAR, ConfigError, Settings, load_settings


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)


def test_defaults_without_config():
    settings = load_settings()

    assert settings == Settings()
    assert settings.do_not_use_marker == "DO NOT USE"
    assert settings.managed_container_option == "Managed"
    assert settings.ignored_families == frozenset()


def test_load_explicit_path(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "doNotUseMarker": "RETIRED",
                "managedContainerOption": "Locked",
                "ignoredFamilies": ["legacy"],
            }
        ),
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.do_not_use_marker == "RETIRED"
    assert settings.managed_container_option == "Locked"
    assert settings.ignored_families == frozenset({"legacy"})


def test_env_var_is_used(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"ignoredFamilies": ["jam"]}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))

    assert load_settings().ignored_families == frozenset({"jam"})


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "absent.json")


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"doNotUseMarker": ""},
        {"managedContainerOption": 3},
        {"ignoredFamilies": "jam"},
        {"ignoredFamilies": ["jam", ""]},
    ],
)
def test_invalid_values_raise(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(path)
