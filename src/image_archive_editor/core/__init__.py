"""Core configuration and version handling."""

from .types import EditConfig, RepositoryEditor, identity
from .version import SemanticVersion, parse_semantic

__all__ = [
    "EditConfig",
    "RepositoryEditor",
    "SemanticVersion",
    "identity",
    "parse_semantic",
]
