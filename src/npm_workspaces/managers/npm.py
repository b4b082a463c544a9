"""npm backend."""

from __future__ import annotations

from pathlib import Path

from .base import (
    PackageManager,
    default_ignores,
    lockfile_exists,
    read_package_json_workspaces,
)


def _arg_separator(pm: PackageManager, root: Path) -> list[str]:
    return ["--"]


def _matches(manager: str, version: str) -> bool:
    return manager == "npm"


def _detect(root: Path, pm: PackageManager) -> PackageManager | None:
    if lockfile_exists(root, pm):
        return pm.with_version(None)
    return None


NPM = PackageManager(
    name="nodejs-npm",
    slug="npm",
    command="npm",
    specfile="package.json",
    lockfile="package-lock.json",
    package_dir="node_modules",
    get_workspace_globs=read_package_json_workspaces,
    get_workspace_ignores=default_ignores,
    get_cmd_arg_separator=_arg_separator,
    matches=_matches,
    detect=_detect,
)
