"""Parse the ``packageManager`` field of package.json."""

from __future__ import annotations

import re

from ..managers import get_known_commands
from ..managers.base import PackageManagerParseError

PACKAGE_MANAGER_PATTERN = (
    r"(" + "|".join(get_known_commands()) + r")@(\d+)\.\d+\.\d+(-[0-9A-Za-z.-]+)?"
)
PACKAGE_MANAGER_REGEX = re.compile(PACKAGE_MANAGER_PATTERN)


def parse_package_manager_string(package_manager: str) -> tuple[str, str]:
    """Split a ``"<manager>@<semver>"`` declaration into (manager, version).

    The first match anywhere in the string wins; surrounding text, such as a
    ``+sha256.<hash>`` integrity suffix, is ignored. Prerelease suffixes stay
    part of the returned version.
    """
    match = PACKAGE_MANAGER_REGEX.search(package_manager)
    if match is None:
        raise PackageManagerParseError(
            "We could not parse packageManager field in package.json, "
            f"expected: {PACKAGE_MANAGER_PATTERN}, received: {package_manager}"
        )

    manager, version = match.group(0).split("@", 1)
    return manager, version
