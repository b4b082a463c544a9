"""Ask a package manager executable for its version.

Two entry points share the same logic:

- :func:`get_version_from_cmd` raises :class:`VersionProbeError` so callers can
  recover.
- :func:`get_version_from_cmd_or_exit` is deliberately fatal: it terminates
  the process with ``SystemExit``. Use it only where nothing sensible can be
  done without a version.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from .config import DEFAULT_PROBE_TIMEOUT
from .managers.base import PackageManager, VersionProbeError

log = structlog.get_logger("npm_workspaces.probe")


def get_version_from_cmd(
    pm: PackageManager,
    project_directory: Path | str,
    timeout: float | None = None,
) -> str:
    """Return the trimmed output of ``<pm.command> --version``.

    ``timeout`` defaults to ``pm.probe_timeout``, which resolution copies
    from ``Settings.version_probe_timeout``.
    """
    if timeout is None:
        timeout = pm.probe_timeout or DEFAULT_PROBE_TIMEOUT

    try:
        result = subprocess.run(
            [pm.command, "--version"],
            cwd=str(project_directory),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=True,
        )
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise VersionProbeError(f"could not detect {pm.name} version: {detail}") from exc
    except subprocess.TimeoutExpired as exc:
        raise VersionProbeError(
            f"could not detect {pm.name} version: timed out after {timeout}s"
        ) from exc
    except OSError as exc:
        raise VersionProbeError(f"could not detect {pm.name} version: {exc}") from exc

    version = result.stdout.strip()
    log.debug("probe.version", manager=pm.slug, version=version)
    return version


def get_version_from_cmd_or_exit(
    pm: PackageManager,
    project_directory: Path | str,
    timeout: float | None = None,
) -> str:
    """Like :func:`get_version_from_cmd`, but a failure terminates the process."""
    try:
        return get_version_from_cmd(pm, project_directory, timeout=timeout)
    except VersionProbeError as exc:
        log.critical("probe.failed", manager=pm.slug, error=str(exc))
        raise SystemExit(str(exc)) from exc
