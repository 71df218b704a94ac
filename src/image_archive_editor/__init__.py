"""Image Archive Editor - read and rewrite repository tags of Docker image archives."""

__version__ = "0.1.0"

from .archive import (
    edit_archive_file,
    edit_archive_file_async,
    edit_archive_repositories,
    list_archive_tags,
    list_archive_tags_async,
)
from .core.types import EditConfig, RepositoryEditor, identity
from .exceptions import (
    ArchiveError,
    ConfigurationError,
    InvalidRepoTagError,
    MalformedMetadataError,
    MetadataNotFoundError,
    TarReadError,
    ValidationError,
)
from .tar.models import ManifestEntry, RepositoryMap
from .tar.reader import AsyncArchiveReader
from .utils.registry_shim import replace_legacy_registry

__all__ = [
    "ArchiveError",
    "AsyncArchiveReader",
    "ConfigurationError",
    "EditConfig",
    "InvalidRepoTagError",
    "MalformedMetadataError",
    "ManifestEntry",
    "MetadataNotFoundError",
    "RepositoryEditor",
    "RepositoryMap",
    "TarReadError",
    "ValidationError",
    "edit_archive_file",
    "edit_archive_file_async",
    "edit_archive_repositories",
    "identity",
    "list_archive_tags",
    "list_archive_tags_async",
    "replace_legacy_registry",
]
