"""Shared pytest fixtures for npm-workspaces tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog

from npm_workspaces import probe


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep user configuration out of the tests."""
    monkeypatch.delenv("NPM_WORKSPACES_CONFIG", raising=False)
    monkeypatch.delenv("NPM_WORKSPACES_PROBE_TIMEOUT", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo setup_logging() so handlers never outlive a captured stream."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def write_json():
    def _write(path: Path, data: object) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def touch():
    def _touch(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _touch


@pytest.fixture
def fake_versions(monkeypatch):
    """Replace the version probe with a command -> version lookup.

    Returns the list of (command, directory) calls made.
    """
    calls: list[tuple[str, str]] = []
    versions: dict[str, str] = {}

    def _probe(pm, project_directory, timeout=None):
        calls.append((pm.command, str(project_directory)))
        if pm.command not in versions:
            raise probe.VersionProbeError(f"could not detect {pm.name} version: not installed")
        return versions[pm.command]

    monkeypatch.setattr(probe, "get_version_from_cmd", _probe)

    def _set(**by_command: str) -> list[tuple[str, str]]:
        versions.update(by_command)
        return calls

    return _set
