"""npm-workspaces core package.

Identifies which JavaScript package manager governs a monorepo and lists the
workspaces it declares, for use by task runners that must not know each
manager's conventions.
"""

from .core import (
    detect_package_manager,
    get_package_manager,
    get_workspace_ignores,
    get_workspaces,
    read_package_manager,
)
from .managers import PACKAGE_MANAGERS, PackageManager
from .parsers.package_manager import parse_package_manager_string

__all__ = [
    "PACKAGE_MANAGERS",
    "PackageManager",
    "detect_package_manager",
    "get_package_manager",
    "get_workspace_ignores",
    "get_workspaces",
    "parse_package_manager_string",
    "read_package_manager",
]
