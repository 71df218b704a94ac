"""Async reader for Docker image archive metadata."""

import asyncio
import tarfile
from pathlib import Path
from typing import List, Optional, Union

import aiofiles.os

from ..exceptions import MetadataNotFoundError, TarReadError
from .manifest import MANIFEST_ENTRY, parse_manifest
from .models import ManifestEntry, RepositoryMap
from .repositories import REPOSITORIES_ENTRY, parse_repositories
from .tags import flatten_repositories


class AsyncArchiveReader:
    """Async reader for the metadata entries of a Docker save tar file."""

    def __init__(self, tar_path: Union[str, Path]) -> None:
        """Initialize archive reader.

        Args:
            tar_path: Path to the tar file
        """
        self.tar_path = Path(tar_path)
        self._tar_file: Optional[tarfile.TarFile] = None

    async def __aenter__(self) -> "AsyncArchiveReader":
        """Enter async context manager."""
        if not await aiofiles.os.path.exists(self.tar_path):
            raise TarReadError(f"Tar file not found: {self.tar_path}")

        loop = asyncio.get_running_loop()
        try:
            self._tar_file = await loop.run_in_executor(
                None, tarfile.open, str(self.tar_path), "r"
            )
        except tarfile.TarError as e:
            raise TarReadError(f"Cannot read tar file: {e}") from e
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the tar file."""
        if self._tar_file:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._tar_file.close)
            self._tar_file = None

    async def get_repositories(self) -> RepositoryMap:
        """Get the legacy repositories map.

        Raises:
            MetadataNotFoundError: If the archive has no repositories entry
            MalformedMetadataError: If the entry is invalid
        """
        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(
            None, self._extract_file_content, REPOSITORIES_ENTRY
        )
        return parse_repositories(data)

    async def get_manifest(self) -> List[ManifestEntry]:
        """Get the manifest.json entries.

        Raises:
            MetadataNotFoundError: If the archive has no manifest.json entry
            MalformedMetadataError: If the entry is invalid
        """
        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(
            None, self._extract_file_content, MANIFEST_ENTRY
        )
        return parse_manifest(data)

    async def get_tags(self) -> List[str]:
        """Get the "repo:tag" tags stored in the repositories entry."""
        return flatten_repositories(await self.get_repositories())

    def _extract_file_content(self, filename: str) -> bytes:
        """Extract file content from tar (sync helper).

        Args:
            filename: Name of file to extract

        Returns:
            File content as bytes
        """
        if not self._tar_file:
            raise TarReadError("Tar file not opened")

        try:
            member = self._tar_file.getmember(filename)
        except KeyError:
            raise MetadataNotFoundError(f"File {filename} not found in tar")

        try:
            file_obj = self._tar_file.extractfile(member)
            if file_obj is None:
                raise TarReadError(f"Could not extract {filename}")
            with file_obj:
                return file_obj.read()
        except tarfile.TarError as e:
            raise TarReadError(f"Failed to extract {filename}: {e}") from e
