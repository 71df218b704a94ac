"""Streaming rewrite of Docker image archive repositories.

Supports v1 / v1.1 / v1.2 Docker image archives:
https://github.com/moby/moby/blob/master/image/spec/v1.md
https://github.com/moby/moby/blob/master/image/spec/v1.1.md
https://github.com/moby/moby/blob/master/image/spec/v1.2.md
"""

import io
import logging
import os
import tarfile
from pathlib import Path
from typing import BinaryIO, Callable, Dict, Optional, Union

from ..core.types import EditConfig, RepositoryEditor
from ..exceptions import TarReadError
from .manifest import MANIFEST_ENTRY, edit_manifest_file
from .repositories import REPOSITORIES_ENTRY, edit_repositories_file

logger = logging.getLogger(__name__)

MetadataEditor = Callable[[bytes, RepositoryEditor, Optional[EditConfig]], bytes]

METADATA_EDITORS: Dict[str, MetadataEditor] = {
    REPOSITORIES_ENTRY: edit_repositories_file,
    MANIFEST_ENTRY: edit_manifest_file,
}


def _read_body(tar: tarfile.TarFile, member: tarfile.TarInfo) -> bytes:
    # Directories, links and devices carry no body; stream mode refuses to
    # open links as files
    if not member.isreg():
        return b""
    entry = tar.extractfile(member)
    return entry.read() if entry is not None else b""


def edit_archive_repositories(
    reader: BinaryIO,
    writer: BinaryIO,
    edit: RepositoryEditor,
    config: Optional[EditConfig] = None,
) -> None:
    """Copy an image archive, applying edit to its image repositories.

    Only the repository part of repository:tag is edited, in both the
    `repositories` and `manifest.json` entries. Every other entry is copied
    unchanged and in order. The archive is processed in a single pass, one
    entry body in memory at a time; output already written is not rolled
    back on failure.

    Args:
        reader: Binary stream holding the source tar archive
        writer: Binary stream receiving the edited archive, left open
        edit: Function returning the input repository or an edited form
        config: Edit settings

    Raises:
        TarReadError: If the tar stream cannot be read or written
        ValidationError: If a metadata entry is invalid
        ConfigurationError: If the configured kubeadm version is invalid
    """
    copied = 0
    try:
        with tarfile.open(fileobj=reader, mode="r|") as src, tarfile.open(
            fileobj=writer, mode="w|", format=tarfile.PAX_FORMAT
        ) as dst:
            for member in src:
                body = _read_body(src, member)

                editor = METADATA_EDITORS.get(member.name)
                if editor is not None:
                    body = editor(body, edit, config)
                    member.size = len(body)
                    member.pax_headers.pop("size", None)
                    logger.info("Rewrote %s (%d bytes)", member.name, member.size)

                if body:
                    dst.addfile(member, io.BytesIO(body))
                else:
                    dst.addfile(member)
                copied += 1
    except tarfile.TarError as e:
        raise TarReadError(f"Cannot rewrite tar stream: {e}") from e

    logger.debug("Copied %d archive entries", copied)


def edit_archive_file(
    src_path: Union[str, Path],
    dst_path: Union[str, Path],
    edit: RepositoryEditor,
    config: Optional[EditConfig] = None,
) -> None:
    """Rewrite the archive at src_path into a new archive at dst_path.

    The partially written destination is removed when the rewrite fails.

    Args:
        src_path: Path to the source Docker tar file
        dst_path: Path of the edited tar file to create
        edit: Function returning the input repository or an edited form
        config: Edit settings
    """
    with open(src_path, "rb") as reader:
        # Open errors propagate before there is anything to clean up
        writer = open(dst_path, "wb")
        try:
            with writer:
                edit_archive_repositories(reader, writer, edit, config)
        except Exception:
            logger.warning("Rewrite of %s failed, removing %s", src_path, dst_path)
            os.remove(dst_path)
            raise
