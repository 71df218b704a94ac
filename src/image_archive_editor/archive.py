"""Functional archive operations."""

import asyncio
import functools
from pathlib import Path
from typing import List, Optional, Union

import aiofiles.os

from .core.types import EditConfig, RepositoryEditor
from .exceptions import TarReadError
from .tar.reader import AsyncArchiveReader
from .tar.rewriter import edit_archive_file, edit_archive_repositories
from .tar.tags import list_archive_tags

__all__ = [
    "edit_archive_file",
    "edit_archive_file_async",
    "edit_archive_repositories",
    "list_archive_tags",
    "list_archive_tags_async",
]


async def list_archive_tags_async(tar_path: Union[str, Path]) -> List[str]:
    """이미지 아카이브의 repositories 항목에서 태그 목록을 비동기로 조회합니다.

    Args:
        tar_path: Docker tar 파일 경로 (예: "./images/pause.tar")

    Returns:
        list[str]: "저장소:태그" 목록 (순서는 보장되지 않음)

    Raises:
        TarReadError: tar 파일이 없거나 읽을 수 없는 경우
        MetadataNotFoundError: repositories 항목이 없는 경우
        MalformedMetadataError: repositories 항목이 올바른 JSON이 아닌 경우

    Examples:
        tags = await list_archive_tags_async("pause.tar")
        print(f"태그: {tags}")
        # 출력: 태그: ['registry.k8s.io/pause:3.9']
    """
    async with AsyncArchiveReader(tar_path) as reader:
        return await reader.get_tags()


async def edit_archive_file_async(
    src_path: Union[str, Path],
    dst_path: Union[str, Path],
    edit: RepositoryEditor,
    config: Optional[EditConfig] = None,
) -> None:
    """이미지 아카이브의 저장소 이름을 수정하여 새 아카이브로 비동기 저장합니다.

    repositories 와 manifest.json 항목만 수정되며, 나머지 항목은 순서와 내용이
    그대로 복사됩니다. 실패하면 부분적으로 작성된 대상 파일을 삭제합니다.

    Args:
        src_path: 원본 Docker tar 파일 경로
        dst_path: 수정된 tar 파일을 저장할 경로
        edit: 저장소 이름을 받아 새 이름을 반환하는 함수
        config: 편집 설정 (kubeadm 버전 등)

    Raises:
        TarReadError: 원본 파일이 없거나 tar 스트림을 처리할 수 없는 경우
        ValidationError: 메타데이터 항목이 올바르지 않은 경우

    Examples:
        await edit_archive_file_async(
            "kube-apiserver.tar",
            "kube-apiserver-fixed.tar",
            lambda repo: repo.replace("-amd64", ""),
            EditConfig(kubeadm_version="v1.24.0"),
        )
    """
    if not await aiofiles.os.path.exists(src_path):
        raise TarReadError(f"Tar file not found: {src_path}")

    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, functools.partial(edit_archive_file, src_path, dst_path, edit, config)
    )
