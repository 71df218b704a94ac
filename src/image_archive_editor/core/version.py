"""Semantic version parsing and comparison.

Accepted format:
    [v]{major}.{minor}.{patch}[-{pre_release}][+{build}]

Example:
    v1.22.0-alpha.1+abc123
"""

import re
from dataclasses import dataclass, field
from typing import Tuple, Union

from ..exceptions import ConfigurationError

# Regex for version string parsing
VERSION_PATTERN = re.compile(
    r"^v?"
    r"(?P<major>0|[1-9]\d*)\."
    r"(?P<minor>0|[1-9]\d*)\."
    r"(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre_release>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"$"
)


@dataclass(frozen=True)
class SemanticVersion:
    """Parsed semantic version components.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        pre_release: Dot separated pre-release identifiers (empty for a release).
        build: Build metadata, ignored when comparing.
    """

    major: int
    minor: int
    patch: int
    pre_release: Tuple[str, ...] = ()
    build: str = field(default="", compare=False)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += "-" + ".".join(self.pre_release)
        if self.build:
            text += "+" + self.build
        return text

    def compare(self, other: "SemanticVersion") -> int:
        """Compare with another version using semver precedence.

        Returns:
            -1, 0 or 1 when self is lower, equal or higher than other
        """
        core = (self.major, self.minor, self.patch)
        other_core = (other.major, other.minor, other.patch)
        if core != other_core:
            return -1 if core < other_core else 1
        return _compare_pre_release(self.pre_release, other.pre_release)

    def at_least(self, other: Union["SemanticVersion", str]) -> bool:
        """Check if this version is greater than or equal to other."""
        if isinstance(other, str):
            other = parse_semantic(other)
        return self.compare(other) >= 0


def _compare_identifier(left: str, right: str) -> int:
    left_numeric = left.isdigit()
    right_numeric = right.isdigit()
    if left_numeric and right_numeric:
        left_value, right_value = int(left), int(right)
        return (left_value > right_value) - (left_value < right_value)
    # numeric identifiers always have lower precedence
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    return (left > right) - (left < right)


def _compare_pre_release(left: Tuple[str, ...], right: Tuple[str, ...]) -> int:
    # a release sorts after any of its pre-releases
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    for left_id, right_id in zip(left, right):
        result = _compare_identifier(left_id, right_id)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def parse_semantic(version_str: str) -> SemanticVersion:
    """Parse a semantic version string into components.

    Args:
        version_str: Version string such as "1.23.0" or "v1.22.0-0"

    Returns:
        SemanticVersion with parsed components

    Raises:
        ConfigurationError: If the string is not a valid semantic version
    """
    match = VERSION_PATTERN.match(version_str.strip())
    if not match:
        raise ConfigurationError(f"Invalid semantic version: {version_str!r}")

    pre_release = match.group("pre_release")
    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        pre_release=tuple(pre_release.split(".")) if pre_release else (),
        build=match.group("build") or "",
    )
