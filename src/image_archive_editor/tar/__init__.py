"""Docker image archive metadata handling."""

from .manifest import edit_manifest_file, parse_manifest, serialize_manifest
from .models import ManifestEntry, RepositoryMap
from .reader import AsyncArchiveReader
from .repositories import (
    edit_repositories_file,
    parse_repositories,
    serialize_repositories,
)
from .rewriter import edit_archive_file, edit_archive_repositories
from .tags import (
    flatten_repositories,
    join_repo_tag,
    list_archive_tags,
    read_archive_tags,
    split_repo_tag,
)

__all__ = [
    "AsyncArchiveReader",
    "ManifestEntry",
    "RepositoryMap",
    "edit_archive_file",
    "edit_archive_repositories",
    "edit_manifest_file",
    "edit_repositories_file",
    "flatten_repositories",
    "join_repo_tag",
    "list_archive_tags",
    "parse_manifest",
    "parse_repositories",
    "read_archive_tags",
    "serialize_manifest",
    "serialize_repositories",
    "split_repo_tag",
]
