"""Tag extraction from Docker image archives.

Compatible with all known archive specs:
https://github.com/moby/moby/blob/master/image/spec/v1.md
https://github.com/moby/moby/blob/master/image/spec/v1.1.md
https://github.com/moby/moby/blob/master/image/spec/v1.2.md
"""

import logging
import tarfile
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from ..exceptions import InvalidRepoTagError, MetadataNotFoundError, TarReadError
from .models import RepositoryMap
from .repositories import REPOSITORIES_ENTRY, parse_repositories

logger = logging.getLogger(__name__)


def split_repo_tag(repo_tag: str) -> Tuple[str, Optional[str]]:
    """Split a manifest repo tag into repository and tag.

    At most one colon is allowed, so registry hosts with a port
    (e.g. "localhost:5000/app:v1") are rejected.

    Args:
        repo_tag: Repo tag string (e.g., "registry.k8s.io/pause:3.9")

    Returns:
        (repository, tag) tuple, tag is None when the string has no colon

    Raises:
        InvalidRepoTagError: If the string contains more than one colon
    """
    parts = repo_tag.split(":")
    if len(parts) > 2:
        raise InvalidRepoTagError(f"invalid repotag: {repo_tag}")
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def join_repo_tag(repository: str, tag: Optional[str]) -> str:
    """Inverse of split_repo_tag."""
    if tag is None:
        return repository
    return f"{repository}:{tag}"


def flatten_repositories(repos: RepositoryMap) -> List[str]:
    """Convert a repository map to repo tags in the docker CLI sense."""
    repo_tags = []
    for repo_name, tags in repos.items():
        for tag_name in tags:
            repo_tags.append(f"{repo_name}:{tag_name}")
    return repo_tags


def read_archive_tags(fileobj: BinaryIO) -> List[str]:
    """Read repo tags from the `repositories` entry of an open archive stream.

    Entries are scanned in order and only the stream up to the metadata entry
    is consumed.

    Args:
        fileobj: Binary stream positioned at the start of a tar archive

    Returns:
        List of repository tags, in no particular order

    Raises:
        MetadataNotFoundError: If the archive has no `repositories` entry
        MalformedMetadataError: If the entry body is invalid
        TarReadError: If the tar stream cannot be read
    """
    try:
        with tarfile.open(fileobj=fileobj, mode="r|") as tar:
            for member in tar:
                if member.name != REPOSITORIES_ENTRY:
                    continue
                entry = tar.extractfile(member)
                data = entry.read() if entry is not None else b""
                break
            else:
                raise MetadataNotFoundError("could not find image metadata")
    except tarfile.TarError as e:
        raise TarReadError(f"Cannot read tar file: {e}") from e

    return flatten_repositories(parse_repositories(data))


def list_archive_tags(tar_path: Union[str, Path]) -> List[str]:
    """Obtain the "repo:tag" image tags of a Docker image archive.

    Args:
        tar_path: Path to Docker tar file

    Returns:
        List of repository tags (e.g., ["registry.k8s.io/pause:3.9"])

    Raises:
        OSError: If the file cannot be opened
        MetadataNotFoundError: If the archive has no `repositories` entry
        MalformedMetadataError: If the entry body is invalid
        TarReadError: If the tar stream cannot be read
    """
    with open(tar_path, "rb") as f:
        repo_tags = read_archive_tags(f)
    logger.debug("Found %d tags in %s", len(repo_tags), tar_path)
    return repo_tags
