"""Legacy registry migration for kubeadm image archives.

kubeadm 1.22 and later expect images from registry.k8s.io, while older
archives are still tagged with k8s.gcr.io. When the target kubeadm version is
known, repositories under the legacy host are moved to the successor host.
"""

import logging
from typing import Optional

from ..core.version import parse_semantic

logger = logging.getLogger(__name__)

LEGACY_REGISTRY = "k8s.gcr.io"
SUCCESSOR_REGISTRY = "registry.k8s.io"

# Every 1.22.0 pre-release already expects the new registry
MIGRATION_VERSION = "v1.22.0-0"


def replace_legacy_registry(repository: str, kubeadm_version: Optional[str]) -> str:
    """Move a repository from the legacy registry host to its successor.

    Args:
        repository: Image repository name (e.g., "k8s.gcr.io/pause")
        kubeadm_version: Target kubeadm version, or None when unknown

    Returns:
        The repository with every legacy host occurrence replaced, or the
        input unchanged when the migration does not apply

    Raises:
        ConfigurationError: If kubeadm_version is not a valid semantic version
    """
    if not kubeadm_version:
        return repository

    version = parse_semantic(kubeadm_version)
    if version.at_least(MIGRATION_VERSION) and repository.startswith(LEGACY_REGISTRY):
        migrated = repository.replace(LEGACY_REGISTRY, SUCCESSOR_REGISTRY)
        logger.debug("Migrated repository %s to %s", repository, migrated)
        return migrated
    return repository
