"""Data models for archive metadata."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# repository -> tag -> reference (image ID or digest), as stored in the
# legacy `repositories` entry
RepositoryMap = Dict[str, Dict[str, str]]

MANIFEST_FIELDS = ("Config", "RepoTags", "Layers")


@dataclass
class ManifestEntry:
    """One image record of manifest.json."""

    config: str = ""
    repo_tags: Optional[List[str]] = None
    layers: Optional[List[str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)  # Fields we do not model

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ManifestEntry":
        # null decodes to the zero value; other types are left for validation
        config = data.get("Config", "")
        return cls(
            config="" if config is None else config,
            repo_tags=data.get("RepoTags"),
            layers=data.get("Layers"),
            extra={k: v for k, v in data.items() if k not in MANIFEST_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "Config": self.config,
            "RepoTags": self.repo_tags,
            "Layers": self.layers,
        }
        data.update(self.extra)
        return data
