"""Custom exceptions for the image archive editor."""


class ArchiveError(Exception):
    """Base exception for all archive-related errors."""

    pass


class TarReadError(ArchiveError):
    """Raised when unable to read or write the tar stream."""

    pass


class MetadataNotFoundError(ArchiveError):
    """Raised when the archive has no image metadata entry."""

    pass


class ValidationError(ArchiveError):
    """Raised when archive metadata is invalid."""

    pass


class MalformedMetadataError(ValidationError):
    """Raised when a metadata entry cannot be decoded."""

    pass


class InvalidRepoTagError(ValidationError):
    """Raised when a manifest repo tag has more than one colon."""

    pass


class ConfigurationError(ArchiveError, ValueError):
    """Raised when the editor configuration is invalid."""

    pass
