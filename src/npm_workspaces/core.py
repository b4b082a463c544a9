"""Core entrypoints: identify a project's package manager and its workspaces.

Identification tries the ``packageManager`` declaration in the root
package.json first and only falls back to filesystem detection when nothing
is declared. A declaration that is present but malformed is an error.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from .config import Settings
from .discovery import glob_files
from .managers import PACKAGE_MANAGERS
from .managers.base import (
    REMEDIATION,
    PackageManager,
    PackageManagerNotDeclaredError,
    PackageManagerNotFoundError,
)
from .parsers.package_json import PackageJSON, load as load_package_json
from .parsers.package_manager import parse_package_manager_string

log = structlog.get_logger("npm_workspaces.core")


def _configured(pm: PackageManager, settings: Settings | None) -> PackageManager:
    settings = settings or Settings()
    return pm.with_probe_timeout(settings.version_probe_timeout)


def get_package_manager(
    project_directory: Path,
    package_json: PackageJSON | None = None,
    settings: Settings | None = None,
) -> PackageManager:
    """Attempt every method of identifying the package manager in use.

    Params:
        project_directory: monorepo root
        package_json: the parsed root manifest; read from
            ``project_directory/package.json`` when omitted
        settings: bounds version probes; built-in defaults when omitted

    Raises:
        PackageManagerParseError: the declaration is present but malformed
        PackageManagerNotFoundError: nothing claimed the project
    """
    project_directory = project_directory.resolve()
    if package_json is None:
        package_json = load_package_json(project_directory / "package.json")

    try:
        return read_package_manager(package_json, settings)
    except PackageManagerNotDeclaredError:
        log.debug("package_manager.not_declared", root=str(project_directory))

    return detect_package_manager(project_directory, settings)


def read_package_manager(
    package_json: PackageJSON,
    settings: Settings | None = None,
) -> PackageManager:
    """Resolve the package manager from the manifest's ``packageManager`` field."""
    if not package_json.package_manager:
        raise PackageManagerNotDeclaredError(
            "We did not find a package manager specified in your root package.json. "
            + REMEDIATION
        )

    manager, version = parse_package_manager_string(package_json.package_manager)

    for pm in PACKAGE_MANAGERS:
        try:
            is_responsible = pm.matches(manager, version)
        except ValueError as exc:
            log.debug(
                "package_manager.match_failed",
                candidate=pm.slug,
                manager=manager,
                version=version,
                error=str(exc),
            )
            continue
        if is_responsible:
            log.info("package_manager.declared", slug=pm.slug, version=version)
            return _configured(pm, settings).with_version(version)

    raise PackageManagerNotFoundError(
        f"We could not match packageManager {package_json.package_manager!r} "
        "to a supported package manager. " + REMEDIATION
    )


def detect_package_manager(
    project_directory: Path,
    settings: Settings | None = None,
) -> PackageManager:
    """Resolve the package manager by inspecting the project directory.

    Registry order decides between managers that all leave evidence behind.
    Errors raised by a detector propagate.
    """
    for pm in PACKAGE_MANAGERS:
        candidate = _configured(pm, settings)
        resolved = candidate.detect(project_directory, candidate)
        if resolved is not None:
            log.info(
                "package_manager.detected",
                slug=resolved.slug,
                version=resolved.version,
                root=str(project_directory),
            )
            return resolved

    raise PackageManagerNotFoundError(
        "We did not detect an in-use package manager for your project. " + REMEDIATION
    )


def get_workspace_ignores(
    pm: PackageManager,
    root: Path,
    settings: Settings | None = None,
) -> list[str]:
    """Return the globs that never contain workspaces for this project."""
    settings = settings or Settings()
    ignores = pm.get_workspace_ignores(pm, root)
    return ignores + [g for g in settings.extra_workspace_ignores if g not in ignores]


def get_workspaces(
    pm: PackageManager,
    root: Path,
    settings: Settings | None = None,
) -> list[str]:
    """Return the manifest paths of every workspace in the repository."""
    root = root.resolve()
    globs = pm.get_workspace_globs(root)
    manifest_globs = [f"{space.rstrip('/')}/{pm.specfile}" for space in globs]
    ignores = get_workspace_ignores(pm, root, settings)

    workspaces = glob_files(root, manifest_globs, ignores)
    log.debug(
        "workspaces.resolved",
        slug=pm.slug,
        globs=manifest_globs,
        ignores=ignores,
        count=len(workspaces),
    )
    return workspaces
