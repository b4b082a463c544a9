"""Tests for settings loading."""

from __future__ import annotations

import pytest

from npm_workspaces.config import DEFAULT_PROBE_TIMEOUT, ConfigError, Settings, load_settings


def test_defaults_without_file():
    assert load_settings() == Settings()
    assert load_settings().version_probe_timeout == DEFAULT_PROBE_TIMEOUT


def test_default_file_in_cwd(tmp_path, write_json):
    write_json(tmp_path / "npm-workspaces.json", {"extraWorkspaceIgnores": ["**/e2e/**"]})
    assert load_settings().extra_workspace_ignores == ("**/e2e/**",)


def test_explicit_path(tmp_path, write_json):
    path = write_json(tmp_path / "conf" / "settings.json", {"versionProbeTimeout": 2})
    assert load_settings(path).version_probe_timeout == 2.0


def test_env_path(tmp_path, write_json, monkeypatch):
    path = write_json(tmp_path / "env.json", {"versionProbeTimeout": 4})
    monkeypatch.setenv("NPM_WORKSPACES_CONFIG", str(path))
    assert load_settings().version_probe_timeout == 4.0


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path)


@pytest.mark.parametrize(
    "data, pointer",
    [
        ({"versionProbeTimeout": 0}, "versionProbeTimeout"),
        ({"extraWorkspaceIgnores": "dist"}, "extraWorkspaceIgnores"),
        ({"extraWorkspaceIgnores": [""]}, "extraWorkspaceIgnores/0"),
        ({"unknown": True}, "<root>"),
        ([], "<root>"),
    ],
)
def test_schema_violations(tmp_path, write_json, data, pointer):
    path = write_json(tmp_path / "settings.json", data)
    with pytest.raises(ConfigError, match=f"Invalid configuration at {pointer}"):
        load_settings(path)


def test_env_timeout_override(monkeypatch, tmp_path, write_json):
    path = write_json(tmp_path / "settings.json", {"versionProbeTimeout": 2, "extraWorkspaceIgnores": ["x"]})
    monkeypatch.setenv("NPM_WORKSPACES_PROBE_TIMEOUT", "30")
    settings = load_settings(path)
    assert settings.version_probe_timeout == 30.0
    assert settings.extra_workspace_ignores == ("x",)


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_env_timeout_invalid(monkeypatch, value):
    monkeypatch.setenv("NPM_WORKSPACES_PROBE_TIMEOUT", value)
    with pytest.raises(ConfigError, match="NPM_WORKSPACES_PROBE_TIMEOUT"):
        load_settings()
