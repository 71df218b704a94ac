"""Helpers for building synthetic Docker image archives."""

import io
import json
import tarfile

CONFIG_NAME = "e6f1816883972d4be47bd48879a08919b96afcd344132622e4d444987919323c.json"
LAYER_NAME = "3a5f1bb0a8a8f3c0dbd0e2e1b3c8d46a7f3b0e9f1c2d4e5f6a7b8c9d0e1f2a3b/layer.tar"

REPOSITORIES = {"k8s.gcr.io/pause": {"3.9": "e6f1816883972d4b"}}

MANIFEST = [
    {
        "Config": CONFIG_NAME,
        "RepoTags": ["k8s.gcr.io/pause:3.9"],
        "Layers": [LAYER_NAME],
    }
]


def dump_json(value) -> bytes:
    """Encode JSON the way docker save does (compact)."""
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


def build_archive(entries) -> bytes:
    """Create tar bytes from (name, body) pairs, a None body adds a directory."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w", format=tarfile.PAX_FORMAT) as tar:
        for name, body in entries:
            info = tarfile.TarInfo(name)
            info.mtime = 1700000000
            if body is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tar.addfile(info)
                continue
            info.size = len(body)
            info.mode = 0o644
            tar.addfile(info, fileobj=io.BytesIO(body))
    return buf.getvalue()


def build_image_archive(repositories=REPOSITORIES, manifest=MANIFEST) -> bytes:
    """Create a v1.2 style image archive with both metadata entries."""
    return build_archive(
        [
            (LAYER_NAME.split("/")[0], None),
            (LAYER_NAME, b"layer content"),
            (CONFIG_NAME, b'{"architecture":"amd64","os":"linux"}'),
            ("repositories", dump_json(repositories)),
            ("manifest.json", dump_json(manifest)),
        ]
    )


def read_archive(data: bytes):
    """Return the (name, body) pairs of tar bytes, None body for non-files."""
    entries = []
    with tarfile.open(fileobj=io.BytesIO(data), mode="r") as tar:
        for member in tar.getmembers():
            entry = tar.extractfile(member) if member.isfile() else None
            entries.append((member.name, entry.read() if entry else None))
    return entries


def read_members(data: bytes):
    """Return the TarInfo headers of tar bytes."""
    with tarfile.open(fileobj=io.BytesIO(data), mode="r") as tar:
        return tar.getmembers()
