"""Rewrite the repositories of a Docker image archive.

Usage:
    python examples/rewrite_example.py SRC.tar DST.tar [KUBEADM_VERSION]
"""

import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from image_archive_editor import (
    ArchiveError,
    EditConfig,
    edit_archive_file,
    list_archive_tags,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def strip_arch_suffix(repository: str) -> str:
    """Turn single arch CI image names into their multi-arch form."""
    return repository.replace("-amd64", "")


def main() -> int:
    if len(sys.argv) < 3:
        print(__doc__)
        return 2

    src_path, dst_path = sys.argv[1], sys.argv[2]
    try:
        config = EditConfig(kubeadm_version=sys.argv[3] if len(sys.argv) > 3 else None)
        logger.info(f"Original tags: {list_archive_tags(src_path)}")
        edit_archive_file(src_path, dst_path, strip_arch_suffix, config)
        logger.info(f"Rewritten tags: {list_archive_tags(dst_path)}")
    except ArchiveError as e:
        logger.error(f"Archive error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
