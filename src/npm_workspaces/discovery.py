"""Glob matching for workspace manifests."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Iterable

from wcmatch import glob

GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.NEGATE


def _normalise(pattern: str) -> str:
    negated = pattern.startswith("!")
    body = pattern[1:] if negated else pattern
    while body.startswith("./"):
        body = body[2:]
    body = body.lstrip("/")
    return ("!" + body) if negated else body


def glob_files(
    root: Path,
    include_patterns: Iterable[str],
    exclude_patterns: Iterable[str] = (),
) -> list[str]:
    """Return absolute paths of files under root matching any include pattern.

    Patterns are relative to root. A path matching any exclude pattern is
    dropped even when it also matches an include pattern.
    """
    root = root.resolve()
    includes = [_normalise(p) for p in include_patterns]
    excludes = [_normalise(p) for p in exclude_patterns]
    if not includes:
        return []

    found: set[str] = set()
    for rel in glob.glob(includes, flags=GLOB_FLAGS, root_dir=str(root)):
        rel = rel.replace("\\", "/")
        if excludes and glob.globmatch(rel, excludes, flags=GLOB_FLAGS):
            continue
        path = root / rel
        if not path.is_file():
            continue
        found.add(str(path))

    return sorted(found)
