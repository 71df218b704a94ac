"""Test configuration and fixtures."""

import pytest

from tests.helpers import build_image_archive


@pytest.fixture
def image_archive():
    """Bytes of a synthetic image archive with legacy k8s.gcr.io tags."""
    return build_image_archive()


@pytest.fixture
def image_archive_path(tmp_path, image_archive):
    """Path to the synthetic image archive on disk."""
    tar_path = tmp_path / "pause.tar"
    tar_path.write_bytes(image_archive)
    return tar_path


@pytest.fixture(autouse=True)
def clear_kubeadm_version(monkeypatch):
    """Keep the caller's environment out of EditConfig.from_env."""
    monkeypatch.delenv("KUBEADM_BINARY_VERSION", raising=False)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")
