"""Legacy `repositories` entry handling.

The entry maps repository names to tags to image references:
    {"registry.k8s.io/pause": {"3.9": "sha256:e6f1..."}}

https://github.com/moby/moby/blob/master/image/spec/v1.md
"""

import logging
from typing import Optional

from ..core.types import EditConfig, RepositoryEditor
from ..exceptions import MalformedMetadataError
from ..utils.registry_shim import replace_legacy_registry
from .codec import decode_metadata, encode_metadata
from .models import RepositoryMap

logger = logging.getLogger(__name__)

REPOSITORIES_ENTRY = "repositories"


def parse_repositories(data: bytes) -> RepositoryMap:
    """Parse the body of a `repositories` entry.

    Args:
        data: Raw entry body

    Returns:
        Repository map (repository -> tag -> reference)

    Raises:
        MalformedMetadataError: If the body is not a valid repository map
    """
    repos = decode_metadata(data, REPOSITORIES_ENTRY)
    if repos is None:
        return {}
    if not isinstance(repos, dict):
        raise MalformedMetadataError("repositories must be a JSON object")

    # null decodes to the zero value at both levels
    parsed: RepositoryMap = {}
    for repository, tags in repos.items():
        if tags is None:
            tags = {}
        if not isinstance(tags, dict):
            raise MalformedMetadataError(
                f"Tags of repository {repository} must be a JSON object"
            )
        parsed[repository] = {}
        for tag, reference in tags.items():
            if reference is None:
                reference = ""
            if not isinstance(reference, str):
                raise MalformedMetadataError(
                    f"Reference of {repository}:{tag} must be a string"
                )
            parsed[repository][tag] = reference
    return parsed


def serialize_repositories(repos: RepositoryMap) -> bytes:
    """Serialize a repository map to its canonical entry body."""
    return encode_metadata(repos, sort_keys=True)


def edit_repositories_file(
    raw: bytes, edit: RepositoryEditor, config: Optional[EditConfig] = None
) -> bytes:
    """Rewrite the repository names of a `repositories` entry.

    The legacy registry migration runs before the editor. The tags of each
    repository move unchanged to the edited name; when two repositories end
    up with the same name the later one wins.

    Args:
        raw: Raw entry body
        edit: Function mapping a repository name to its new name
        config: Edit settings

    Returns:
        Rewritten entry body

    Raises:
        MalformedMetadataError: If the body is not a valid repository map
        ConfigurationError: If the configured kubeadm version is invalid
    """
    kubeadm_version = config.kubeadm_version if config else None

    fixed: RepositoryMap = {}
    for repository, tags in parse_repositories(raw).items():
        repository = edit(replace_legacy_registry(repository, kubeadm_version))
        if repository in fixed:
            logger.debug("Repository %s overwritten by a later entry", repository)
        fixed[repository] = tags

    return serialize_repositories(fixed)
