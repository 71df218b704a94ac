"""Async usage of the image archive editor."""

import asyncio
import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from image_archive_editor import (
    ArchiveError,
    AsyncArchiveReader,
    EditConfig,
    edit_archive_file_async,
    identity,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def show_metadata(tar_path: str) -> None:
    """Log both metadata views of an archive."""
    async with AsyncArchiveReader(tar_path) as reader:
        logger.info(f"repositories tags: {await reader.get_tags()}")
        for entry in await reader.get_manifest():
            logger.info(f"  {entry.config}: {entry.repo_tags}")


async def main(src_path: str, dst_path: str) -> None:
    try:
        await show_metadata(src_path)

        # Only the registry migration is applied
        await edit_archive_file_async(
            src_path, dst_path, identity, EditConfig.from_env()
        )
        await show_metadata(dst_path)
    except ArchiveError as e:
        logger.error(f"Archive error: {e}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1], sys.argv[2]))
