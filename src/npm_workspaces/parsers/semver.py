"""Version comparators built atop packaging.version.

Expressions are a comparator (``<``, ``<=``, ``>``, ``>=``) or a bare version,
optionally several of them separated by spaces, e.g. ``"<2.0.0"`` or
``">=1.0.0 <2.0.0"``.

Only the release numbers take part in a comparison, so ``2.0.0-rc.29`` sits
with the 2.x line: it fails ``<2.0.0`` and passes ``>=2.0.0``.

Versions that packaging cannot parse raise ``packaging.version.InvalidVersion``
(a ``ValueError``).
"""

from __future__ import annotations

from packaging.version import Version


def release(v: str) -> tuple[int, int, int]:
    """Return ``(major, minor, patch)`` of ``v``, ignoring any prerelease."""
    parsed = Version(v.strip())
    return parsed.major, parsed.minor, parsed.micro


def _compare(installed: tuple[int, int, int], token: str) -> bool:
    if token.startswith(">="):
        return installed >= release(token[2:])
    if token.startswith(">"):
        return installed > release(token[1:])
    if token.startswith("<="):
        return installed <= release(token[2:])
    if token.startswith("<"):
        return installed < release(token[1:])
    return installed == release(token)


def satisfies(installed: str, expr: str) -> bool:
    v = release(installed)
    return all(_compare(v, token) for token in expr.split())
