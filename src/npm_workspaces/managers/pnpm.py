"""pnpm backend.

Workspaces come from ``pnpm-workspace.yaml`` rather than package.json. Entries
prefixed with ``!`` exclude directories and are turned into ignore globs.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from .. import probe
from ..parsers.semver import satisfies
from .base import NODE_MODULES_IGNORE, PackageManager, WorkspaceError, lockfile_exists

WORKSPACE_FILE = "pnpm-workspace.yaml"

# pnpm 7 stopped requiring "--" before forwarded script arguments
SEPARATOR_RANGE = "<7.0.0"


def _read_workspace_packages(root: Path) -> list[str]:
    path = root / WORKSPACE_FILE
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise WorkspaceError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise WorkspaceError(f"Invalid YAML in {path}: {exc}") from exc

    packages = data.get("packages") if isinstance(data, dict) else None
    if not isinstance(packages, list) or not all(isinstance(p, str) for p in packages):
        raise WorkspaceError(f"{WORKSPACE_FILE}: 'packages' must be a list of globs")
    return packages


def _workspace_globs(root: Path) -> list[str]:
    globs = [p for p in _read_workspace_packages(root) if not p.startswith("!")]
    if not globs:
        raise WorkspaceError(f"{WORKSPACE_FILE}: no workspaces found")
    return globs


def _exclusion_glob(negated: str) -> str:
    # "!packages/private" names a directory; ignore everything below it
    pattern = negated[1:].rstrip("/")
    if pattern.endswith("**"):
        return pattern
    return f"{pattern}/**"


def _workspace_ignores(pm: PackageManager, root: Path) -> list[str]:
    ignores = [NODE_MODULES_IGNORE, "**/bower_components/**"]
    if (root / WORKSPACE_FILE).is_file():
        ignores.extend(
            _exclusion_glob(p) for p in _read_workspace_packages(root) if p.startswith("!")
        )
    return ignores


def _arg_separator(pm: PackageManager, root: Path) -> list[str]:
    version = pm.version or probe.get_version_from_cmd_or_exit(pm, root)
    if satisfies(version, SEPARATOR_RANGE):
        return ["--"]
    return []


def _matches(manager: str, version: str) -> bool:
    return manager == "pnpm"


def _detect(root: Path, pm: PackageManager) -> PackageManager | None:
    if lockfile_exists(root, pm):
        return pm.with_version(None)
    return None


PNPM = PackageManager(
    name="nodejs-pnpm",
    slug="pnpm",
    command="pnpm",
    specfile="package.json",
    lockfile="pnpm-lock.yaml",
    package_dir="node_modules",
    get_workspace_globs=_workspace_globs,
    get_workspace_ignores=_workspace_ignores,
    get_cmd_arg_separator=_arg_separator,
    matches=_matches,
    detect=_detect,
)
