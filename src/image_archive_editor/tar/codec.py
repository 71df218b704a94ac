"""JSON encoding helpers for archive metadata entries."""

import json
from typing import Any

from ..exceptions import MalformedMetadataError


def decode_metadata(data: bytes, entry_name: str) -> Any:
    """Decode the JSON body of a metadata entry.

    Args:
        data: Raw entry body
        entry_name: Entry name used in error messages

    Returns:
        Decoded JSON value

    Raises:
        MalformedMetadataError: If the body is not UTF-8 encoded JSON
    """
    try:
        return json.loads(data.decode("utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedMetadataError(f"Invalid JSON in {entry_name}: {e}") from e
    except UnicodeDecodeError as e:
        raise MalformedMetadataError(f"Cannot decode {entry_name}: {e}") from e


def encode_metadata(value: Any, sort_keys: bool = False) -> bytes:
    """Encode a metadata value as compact UTF-8 JSON."""
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, sort_keys=sort_keys
    ).encode("utf-8")
