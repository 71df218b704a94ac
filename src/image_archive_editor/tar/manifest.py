"""`manifest.json` entry handling.

https://github.com/moby/moby/blob/master/image/spec/v1.2.md#combined-image-json--filesystem-changeset-format
"""

from typing import List, Optional

from ..core.types import EditConfig, RepositoryEditor
from ..exceptions import InvalidRepoTagError, MalformedMetadataError
from ..utils.registry_shim import replace_legacy_registry
from .codec import decode_metadata, encode_metadata
from .models import ManifestEntry
from .tags import join_repo_tag, split_repo_tag

MANIFEST_ENTRY = "manifest.json"


def parse_manifest(data: bytes) -> List[ManifestEntry]:
    """Parse the body of a `manifest.json` entry.

    Args:
        data: Raw entry body

    Returns:
        Manifest entries in archive order

    Raises:
        MalformedMetadataError: If the body is not a valid manifest
    """
    manifest_data = decode_metadata(data, MANIFEST_ENTRY)
    if manifest_data is None:
        return []
    if not isinstance(manifest_data, list):
        raise MalformedMetadataError("manifest.json must be a JSON array")

    entries = []
    for item in manifest_data:
        if not isinstance(item, dict):
            raise MalformedMetadataError("Invalid manifest entry structure")
        entry = ManifestEntry.from_dict(item)
        if not isinstance(entry.config, str):
            raise MalformedMetadataError("Config must be a string")
        for name, value in (("RepoTags", entry.repo_tags), ("Layers", entry.layers)):
            if value is not None and not (
                isinstance(value, list) and all(isinstance(v, str) for v in value)
            ):
                raise MalformedMetadataError(f"{name} must be a list of strings")
        entries.append(entry)
    return entries


def serialize_manifest(entries: List[ManifestEntry]) -> bytes:
    """Serialize manifest entries to an entry body, keeping their order."""
    return encode_metadata([entry.to_dict() for entry in entries])


def edit_manifest_file(
    raw: bytes, edit: RepositoryEditor, config: Optional[EditConfig] = None
) -> bytes:
    """Rewrite the repository part of every RepoTags item in `manifest.json`.

    The editor runs first, then the legacy registry migration. Tags are left
    untouched.

    Args:
        raw: Raw entry body
        edit: Function mapping a repository name to its new name
        config: Edit settings

    Returns:
        Rewritten entry body

    Raises:
        MalformedMetadataError: If the body is not a valid manifest
        InvalidRepoTagError: If a repo tag contains more than one colon
        ConfigurationError: If the configured kubeadm version is invalid
    """
    kubeadm_version = config.kubeadm_version if config else None

    entries = parse_manifest(raw)
    for entry in entries:
        if entry.repo_tags is None:
            continue

        fixed = []
        for repo_tag in entry.repo_tags:
            try:
                repository, tag = split_repo_tag(repo_tag)
            except InvalidRepoTagError as e:
                raise InvalidRepoTagError(f"{e} (config {entry.config})") from e
            repository = replace_legacy_registry(edit(repository), kubeadm_version)
            fixed.append(join_repo_tag(repository, tag))
        entry.repo_tags = fixed

    return serialize_manifest(entries)
