"""Registry of supported package managers.

``PACKAGE_MANAGERS`` is ordered: filesystem detection tries each entry in turn
and the first match wins, so a project carrying stale lockfiles from several
tools resolves to the earliest registered one.
"""

from __future__ import annotations

from .base import (
    PackageManager,
    PackageManagerError,
    PackageManagerNotDeclaredError,
    PackageManagerNotFoundError,
    PackageManagerParseError,
    VersionProbeError,
    WorkspaceError,
)
from .berry import BERRY
from .npm import NPM
from .pnpm import PNPM
from .yarn import YARN


class UnknownPackageManagerError(ValueError):
    """Raised when a slug is not found in the registry."""


def _build_registry(*managers: PackageManager) -> tuple[PackageManager, ...]:
    slugs = [pm.slug for pm in managers]
    duplicates = sorted({slug for slug in slugs if slugs.count(slug) > 1})
    if duplicates:
        raise ValueError(f"Duplicate package manager slug(s): {', '.join(duplicates)}")
    return tuple(managers)


PACKAGE_MANAGERS: tuple[PackageManager, ...] = _build_registry(YARN, BERRY, NPM, PNPM)


def get_package_manager_by_slug(slug: str) -> PackageManager:
    """Return the registry template for ``slug``, or raise UnknownPackageManagerError."""
    for pm in PACKAGE_MANAGERS:
        if pm.slug == slug:
            return pm
    known = ", ".join(get_known_slugs())
    raise UnknownPackageManagerError(
        f"Unknown package manager '{slug}'. Known package managers: {known}"
    )


def get_known_slugs() -> list[str]:
    """Return registered slugs in detection order."""
    return [pm.slug for pm in PACKAGE_MANAGERS]


def get_known_commands() -> list[str]:
    """Return the sorted, de-duplicated executable names of all backends."""
    return sorted({pm.command for pm in PACKAGE_MANAGERS})


__all__ = [
    "BERRY",
    "NPM",
    "PACKAGE_MANAGERS",
    "PNPM",
    "YARN",
    "PackageManager",
    "PackageManagerError",
    "PackageManagerNotDeclaredError",
    "PackageManagerNotFoundError",
    "PackageManagerParseError",
    "UnknownPackageManagerError",
    "VersionProbeError",
    "WorkspaceError",
    "get_known_commands",
    "get_known_slugs",
    "get_package_manager_by_slug",
]
