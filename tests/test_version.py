"""Tests for semantic version parsing."""

import pytest

from image_archive_editor.core.version import SemanticVersion, parse_semantic
from image_archive_editor.exceptions import ConfigurationError


def test_parse_semantic():
    """Test parsing release and pre-release versions."""
    assert parse_semantic("1.23.0") == SemanticVersion(1, 23, 0)
    assert parse_semantic("v1.22.0-0") == SemanticVersion(1, 22, 0, ("0",))

    version = parse_semantic("v1.25.0-alpha.3.1+a1b2c3d")
    assert version.pre_release == ("alpha", "3", "1")
    assert version.build == "a1b2c3d"
    assert str(version) == "1.25.0-alpha.3.1+a1b2c3d"


@pytest.mark.parametrize(
    "version_str", ["", "1.22", "1.22.0.1", "latest", "v1.022.0", "1.22.0-", "x1.2.3"]
)
def test_parse_semantic_invalid(version_str):
    """Test that malformed versions are configuration errors."""
    with pytest.raises(ConfigurationError, match="Invalid semantic version"):
        parse_semantic(version_str)


def test_configuration_error_is_value_error():
    """Test that version errors can be handled as ValueError."""
    with pytest.raises(ValueError):
        parse_semantic("not-a-version")


@pytest.mark.parametrize(
    "version_str,minimum,expected",
    [
        ("1.23.0", "v1.22.0-0", True),
        ("1.22.0", "v1.22.0-0", True),
        ("1.22.0-alpha.1", "v1.22.0-0", True),
        ("1.22.0-0", "v1.22.0-0", True),
        ("1.21.9", "v1.22.0-0", False),
        ("1.21.0", "v1.22.0-0", False),
        ("1.22.0-rc.1", "1.22.0", False),
        ("1.22.0-alpha.10", "1.22.0-alpha.9", True),
        ("1.22.0-alpha", "1.22.0-alpha.1", False),
        ("1.22.0-1", "1.22.0-alpha", False),
        ("2.0.0", "1.99.99", True),
    ],
)
def test_at_least(version_str, minimum, expected):
    """Test semver precedence rules."""
    assert parse_semantic(version_str).at_least(minimum) is expected


def test_build_metadata_ignored():
    """Test that build metadata does not affect precedence."""
    assert parse_semantic("1.22.0+build.1") == parse_semantic("1.22.0+build.2")
    assert parse_semantic("1.22.0+build.1").compare(parse_semantic("1.22.0")) == 0
