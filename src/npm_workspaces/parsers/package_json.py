"""Parse package.json into the fields needed for package manager resolution."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class PackageJSON:
    """The subset of a package.json manifest used by this package."""

    name: str = ""
    version: str = ""
    package_manager: str = ""
    workspaces: tuple[str, ...] = ()
    path: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | None = None) -> PackageJSON:
        """Build a manifest from decoded JSON.

        ``workspaces`` may be an array of globs or an object with a
        ``packages`` array (the form used to carry ``nohoist`` options).
        """
        if not isinstance(data, dict):
            raise ValueError("package.json must contain a JSON object")

        package_manager = data.get("packageManager") or ""
        if not isinstance(package_manager, str):
            raise ValueError("'packageManager' must be a string")

        return cls(
            name=str(data.get("name") or ""),
            version=str(data.get("version") or ""),
            package_manager=package_manager.strip(),
            workspaces=_coerce_workspaces(data.get("workspaces")),
            path=path,
        )


def _coerce_workspaces(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, dict):
        raw = raw.get("packages") or []
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ValueError("'workspaces' must be an array of glob strings")
    return tuple(raw)


def load(path: Path) -> PackageJSON:
    """Read and parse the package.json at ``path``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return PackageJSON.from_dict(data, path=path)
