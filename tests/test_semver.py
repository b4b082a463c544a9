"""Tests for the semver comparators."""

from __future__ import annotations

import pytest
from packaging.version import InvalidVersion

from npm_workspaces.parsers.semver import release, satisfies


@pytest.mark.parametrize(
    "installed, expr, expected",
    [
        ("1.22.19", "<2.0.0", True),
        ("2.0.0", "<2.0.0", False),
        ("3.2.0", ">=2.0.0", True),
        ("2.0.0-rc.29", "<2.0.0", False),
        ("2.0.0-rc.29", ">=2.0.0", True),
        ("6.32.2", "<7.0.0", True),
        ("7.0.0", "<7.0.0", False),
        ("7.0.0-rc.1", "<7.0.0", False),
        ("1.5.0", ">=1.0.0 <2.0.0", True),
        ("2.5.0", ">=1.0.0 <2.0.0", False),
        ("1.2.3", "1.2.3", True),
    ],
)
def test_satisfies(installed, expr, expected):
    assert satisfies(installed, expr) is expected


def test_release_pads_short_versions():
    assert release("8") == (8, 0, 0)
    assert release(" 4.0.0-rc.1 ") == (4, 0, 0)


def test_unparsable_version_raises_value_error():
    with pytest.raises(InvalidVersion):
        satisfies("not-a-version", "<2.0.0")
    assert issubclass(InvalidVersion, ValueError)
