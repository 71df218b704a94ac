"""Configuration types for archive editing."""

import os
from dataclasses import dataclass
from typing import Callable, Optional

from .version import parse_semantic

# Maps an image repository name to its replacement
RepositoryEditor = Callable[[str], str]

KUBEADM_VERSION_ENV = "KUBEADM_BINARY_VERSION"


def identity(repository: str) -> str:
    """Repository editor that leaves every name unchanged."""
    return repository


@dataclass(frozen=True)
class EditConfig:
    """Settings applied while rewriting archive metadata.

    Attributes:
        kubeadm_version: Version of the kubeadm binary the rewritten images are
            loaded for. Enables the legacy registry migration when set.
    """

    kubeadm_version: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kubeadm_version:
            # Raises ConfigurationError for an unusable version
            parse_semantic(self.kubeadm_version)

    @classmethod
    def from_env(cls) -> "EditConfig":
        """Build a config from the KUBEADM_BINARY_VERSION environment variable."""
        return cls(kubeadm_version=os.getenv(KUBEADM_VERSION_ENV) or None)
