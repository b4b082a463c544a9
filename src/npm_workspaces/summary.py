"""Human-readable Markdown summary of a resolution report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with the package manager and a workspace table."""
    manager = report.get("packageManager", {})
    workspaces = report.get("workspaces", [])
    totals = report.get("totals", {})

    lines = []
    lines.append("# npm-workspaces Summary")
    lines.append("")
    lines.append(
        f"Package manager: {manager.get('slug', 'unknown')} "
        f"({manager.get('version') or 'version unknown'}) | "
        f"Workspaces: {totals.get('workspaces', 0)}"
    )
    lines.append("")
    lines.append("| Workspace | Manifest |")
    lines.append("| --- | --- |")

    for manifest in workspaces:
        directory = manifest.rsplit("/", 1)[0] if "/" in manifest else "."
        lines.append(f"| {directory} | {manifest} |")

    if not workspaces:
        lines.append("| (no workspaces found) | n/a |")

    return "\n".join(lines) + "\n"
