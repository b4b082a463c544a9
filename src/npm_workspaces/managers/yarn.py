"""Yarn classic (1.x) backend."""

from __future__ import annotations

from pathlib import Path

from .. import probe
from ..parsers.semver import satisfies
from .base import (
    PackageManager,
    default_ignores,
    project_files_exist,
    read_package_json_workspaces,
)

YARN_CLASSIC_RANGE = "<2.0.0"


def _arg_separator(pm: PackageManager, root: Path) -> list[str]:
    return ["--"]


def _matches(manager: str, version: str) -> bool:
    if manager != "yarn":
        return False
    return satisfies(version, YARN_CLASSIC_RANGE)


def _detect(root: Path, pm: PackageManager) -> PackageManager | None:
    if not project_files_exist(root, pm):
        return None

    version = probe.get_version_from_cmd(pm, root)
    if not satisfies(version, YARN_CLASSIC_RANGE):
        return None
    return pm.with_version(version)


YARN = PackageManager(
    name="nodejs-yarn",
    slug="yarn",
    command="yarn",
    specfile="package.json",
    lockfile="yarn.lock",
    package_dir="node_modules",
    get_workspace_globs=read_package_json_workspaces,
    get_workspace_ignores=default_ignores,
    get_cmd_arg_separator=_arg_separator,
    matches=_matches,
    detect=_detect,
)
