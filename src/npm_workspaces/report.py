"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .managers.base import PackageManager


def build_report(
    pm: PackageManager,
    root: Path,
    workspaces: list[str],
    arg_separator: list[str] | None = None,
) -> dict[str, Any]:
    """Combine a resolved package manager and its workspaces into one report.

    Workspace paths are made relative to ``root`` and keep the order given.
    ``arg_separator`` is included only when the caller computed it, since for
    some managers that requires running the executable.
    """
    root = root.resolve()
    manager: dict[str, Any] = {
        "name": pm.name,
        "slug": pm.slug,
        "command": pm.command,
        "version": pm.version,
        "lockfile": pm.lockfile,
    }
    if arg_separator is not None:
        manager["argSeparator"] = list(arg_separator)

    relative = [Path(w).resolve().relative_to(root).as_posix() for w in workspaces]

    return {
        "version": "1",
        "root": str(root),
        "packageManager": manager,
        "workspaces": relative,
        "totals": {
            "workspaces": len(relative),
        },
    }
