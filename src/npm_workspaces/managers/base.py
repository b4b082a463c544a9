"""Package manager abstraction shared by every backend.

A :class:`PackageManager` is a plain value plus a handful of behaviour slots.
Backends are expressed as module-level instances rather than subclasses; the
registry in :mod:`npm_workspaces.managers` holds them in detection order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TypeAlias
from collections.abc import Callable

from ..parsers.package_json import load

REMEDIATION = (
    'Please set the "packageManager" property in your root package.json '
    "(https://nodejs.org/api/packages.html#packagemanager) or run "
    "`npx @turbo/codemod add-package-manager` in the root of your monorepo."
)

NODE_MODULES_IGNORE = "**/node_modules/**"


class PackageManagerError(RuntimeError):
    """Base error for package manager identification and workspace lookup."""


class PackageManagerParseError(PackageManagerError):
    """Raised when the ``packageManager`` field is present but malformed."""


class PackageManagerNotDeclaredError(PackageManagerError):
    """Raised when the manifest does not declare a package manager."""


class PackageManagerNotFoundError(PackageManagerError):
    """Raised when no registered package manager claims the project."""


class WorkspaceError(PackageManagerError):
    """Raised when the workspace configuration cannot be read."""


class VersionProbeError(PackageManagerError):
    """Raised when ``<command> --version`` cannot be run."""


WorkspaceGlobsFunction: TypeAlias = Callable[[Path], list[str]]
WorkspaceIgnoresFunction: TypeAlias = Callable[["PackageManager", Path], list[str]]
ArgSeparatorFunction: TypeAlias = Callable[["PackageManager", Path], list[str]]
MatchesFunction: TypeAlias = Callable[[str, str], bool]
DetectFunction: TypeAlias = Callable[[Path, "PackageManager"], "PackageManager | None"]


@dataclass(slots=True, frozen=True)
class PackageManager:
    """A package manager backend.

    Registry entries are templates with ``version`` unset. Identification
    returns a copy carrying the declared or discovered version, so concurrent
    lookups for different projects never share state.
    ``probe_timeout`` travels with the copy so every probe made for the
    project, during detection or afterwards, honours the caller's settings.
    """

    name: str
    slug: str
    command: str
    specfile: str
    lockfile: str
    package_dir: str
    get_workspace_globs: WorkspaceGlobsFunction
    get_workspace_ignores: WorkspaceIgnoresFunction
    get_cmd_arg_separator: ArgSeparatorFunction
    matches: MatchesFunction
    detect: DetectFunction
    version: str | None = None
    probe_timeout: float | None = None

    def with_version(self, version: str | None) -> PackageManager:
        """Return a copy of this manager resolved to ``version``."""
        return replace(self, version=version)

    def with_probe_timeout(self, timeout: float | None) -> PackageManager:
        """Return a copy whose version probes are bounded by ``timeout`` seconds."""
        return replace(self, probe_timeout=timeout)


def lockfile_exists(root: Path, pm: PackageManager) -> bool:
    return (root / pm.lockfile).is_file()


def project_files_exist(root: Path, pm: PackageManager) -> bool:
    """Return True when both the manifest and the lock file are present."""
    return (root / pm.specfile).is_file() and lockfile_exists(root, pm)


def read_package_json_workspaces(root: Path) -> list[str]:
    """Return the ``workspaces`` globs declared in the root package.json.

    Both the array form and the ``{"packages": [...]}`` object form are
    accepted.
    """
    path = root / "package.json"
    try:
        manifest = load(path)
    except OSError as exc:
        raise WorkspaceError(f"Failed to read {path}: {exc}") from exc
    except ValueError as exc:
        raise WorkspaceError(f"Invalid manifest {path}: {exc}") from exc

    if not manifest.workspaces:
        raise WorkspaceError(
            "package.json: no workspaces found. Workspaces must be defined in "
            "the root package.json"
        )
    return list(manifest.workspaces)


def default_ignores(pm: PackageManager, root: Path) -> list[str]:
    return [NODE_MODULES_IGNORE]
