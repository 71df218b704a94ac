"""Tests for the async archive API."""

import pytest

from image_archive_editor import (
    AsyncArchiveReader,
    EditConfig,
    edit_archive_file_async,
    identity,
    list_archive_tags,
    list_archive_tags_async,
)
from image_archive_editor.exceptions import (
    MalformedMetadataError,
    MetadataNotFoundError,
    TarReadError,
)
from tests.helpers import MANIFEST, build_archive


@pytest.mark.asyncio
async def test_list_archive_tags_async(image_archive_path):
    """Test async tag listing matches the sync lister."""
    tags = await list_archive_tags_async(image_archive_path)
    assert tags == list_archive_tags(image_archive_path)


@pytest.mark.asyncio
async def test_list_archive_tags_async_missing_file(tmp_path):
    """Test that a missing archive is a tar read error."""
    with pytest.raises(TarReadError, match="Tar file not found"):
        await list_archive_tags_async(tmp_path / "missing.tar")


@pytest.mark.asyncio
async def test_reader_metadata(image_archive_path):
    """Test reading both metadata entries."""
    async with AsyncArchiveReader(image_archive_path) as reader:
        repositories = await reader.get_repositories()
        manifest = await reader.get_manifest()

    assert repositories == {"k8s.gcr.io/pause": {"3.9": "e6f1816883972d4b"}}
    assert [entry.to_dict() for entry in manifest] == MANIFEST


@pytest.mark.asyncio
async def test_reader_missing_metadata(tmp_path):
    """Test that missing metadata entries are reported."""
    tar_path = tmp_path / "image.tar"
    tar_path.write_bytes(build_archive([("layer.tar", b"content")]))

    async with AsyncArchiveReader(tar_path) as reader:
        with pytest.raises(MetadataNotFoundError):
            await reader.get_tags()


@pytest.mark.asyncio
async def test_reader_invalid_tar(tmp_path):
    """Test that non-tar files fail on open."""
    invalid_tar = tmp_path / "invalid.tar"
    invalid_tar.write_bytes(b"not a tar archive" * 64)

    with pytest.raises(TarReadError):
        async with AsyncArchiveReader(invalid_tar):
            pass


@pytest.mark.asyncio
async def test_edit_archive_file_async(image_archive_path, tmp_path):
    """Test the async path based rewrite."""
    dst_path = tmp_path / "fixed.tar"

    await edit_archive_file_async(
        image_archive_path, dst_path, identity, EditConfig(kubeadm_version="v1.24.0")
    )

    async with AsyncArchiveReader(dst_path) as reader:
        assert await reader.get_tags() == ["registry.k8s.io/pause:3.9"]
        manifest = await reader.get_manifest()
    assert manifest[0].repo_tags == ["registry.k8s.io/pause:3.9"]


@pytest.mark.asyncio
async def test_edit_archive_file_async_removes_partial_output(tmp_path):
    """Test that a failed async rewrite leaves no destination file."""
    src_path = tmp_path / "bad.tar"
    src_path.write_bytes(
        build_archive([("A", b"x" * 20000), ("manifest.json", b"{broken")])
    )
    dst_path = tmp_path / "out.tar"

    with pytest.raises(MalformedMetadataError):
        await edit_archive_file_async(src_path, dst_path, identity)

    assert not dst_path.exists()


@pytest.mark.asyncio
async def test_edit_archive_file_async_missing_source(tmp_path):
    """Test that a missing source is rejected before writing anything."""
    dst_path = tmp_path / "out.tar"

    with pytest.raises(TarReadError):
        await edit_archive_file_async(tmp_path / "missing.tar", dst_path, identity)

    assert not dst_path.exists()


@pytest.mark.asyncio
async def test_edit_archive_file_async_keeps_open_error(image_archive_path, tmp_path):
    """Test that a destination that cannot be opened is left alone."""
    dst_path = tmp_path / "out"
    dst_path.mkdir()

    with pytest.raises(IsADirectoryError):
        await edit_archive_file_async(image_archive_path, dst_path, identity)

    assert dst_path.is_dir()
