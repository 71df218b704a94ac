"""Utility functions for the image archive editor."""

from .registry_shim import replace_legacy_registry

__all__ = ["replace_legacy_registry"]
