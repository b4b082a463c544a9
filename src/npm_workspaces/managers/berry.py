"""Yarn 2+ ("berry") backend.

Berry shares ``yarn.lock`` and the ``yarn`` executable with Yarn classic, so
both detection and matching hinge on the reported version.
"""

from __future__ import annotations

from pathlib import Path

from .. import probe
from ..parsers.semver import satisfies
from .base import (
    NODE_MODULES_IGNORE,
    PackageManager,
    project_files_exist,
    read_package_json_workspaces,
)

BERRY_RANGE = ">=2.0.0"


def _workspace_ignores(pm: PackageManager, root: Path) -> list[str]:
    # .yarn holds the offline cache, plugins and releases
    return [NODE_MODULES_IGNORE, "**/.yarn/**"]


def _arg_separator(pm: PackageManager, root: Path) -> list[str]:
    return []


def _matches(manager: str, version: str) -> bool:
    if manager != "yarn":
        return False
    return satisfies(version, BERRY_RANGE)


def _detect(root: Path, pm: PackageManager) -> PackageManager | None:
    if not project_files_exist(root, pm):
        return None

    version = probe.get_version_from_cmd(pm, root)
    if not satisfies(version, BERRY_RANGE):
        return None
    return pm.with_version(version)


BERRY = PackageManager(
    name="nodejs-berry",
    slug="berry",
    command="yarn",
    specfile="package.json",
    lockfile="yarn.lock",
    package_dir="node_modules",
    get_workspace_globs=read_package_json_workspaces,
    get_workspace_ignores=_workspace_ignores,
    get_cmd_arg_separator=_arg_separator,
    matches=_matches,
    detect=_detect,
)
