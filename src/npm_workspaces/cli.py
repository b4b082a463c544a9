"""CLI entrypoint: print a project's package manager and workspaces.

Usage:
  npm-workspaces --root . [--format json|markdown] [--config path]
                 [--probe-version] [--arg-separator]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import probe
from .config import ConfigError, load_settings
from .core import get_package_manager, get_workspaces
from .logging_setup import setup_logging
from .managers.base import (
    PackageManagerError,
    PackageManagerNotFoundError,
    VersionProbeError,
)
from .report import build_report
from .summary import render_summary

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="npm-workspaces", description=__doc__.splitlines()[0])
    parser.add_argument("--root", type=Path, default=Path("."), help="Monorepo root")
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a settings file")
    parser.add_argument(
        "--probe-version",
        action="store_true",
        help="Ask the package manager executable for its version when none was resolved",
    )
    parser.add_argument(
        "--arg-separator",
        action="store_true",
        help="Include the tokens needed to forward arguments to the package manager",
    )
    parser.add_argument("--log-level", default=None, help="Override NPM_WORKSPACES_LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    root = args.root.resolve()

    try:
        settings = load_settings(args.config)
        pm = get_package_manager(root, settings=settings)
        if args.probe_version and pm.version is None:
            try:
                pm = pm.with_version(probe.get_version_from_cmd(pm, root))
            except VersionProbeError as exc:
                print(f"WARNING: {exc}", file=sys.stderr)
        workspaces = get_workspaces(pm, root, settings)
        separator = pm.get_cmd_arg_separator(pm, root) if args.arg_separator else None
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except PackageManagerNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except PackageManagerError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as exc:
        print(f"ERROR: Failed to read package.json: {exc}", file=sys.stderr)
        return EXIT_ERROR

    report = build_report(pm, root, workspaces, arg_separator=separator)
    if args.format == "markdown":
        sys.stdout.write(render_summary(report))
    else:
        print(json.dumps(report, indent=2))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
