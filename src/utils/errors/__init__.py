"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ContentfulApiError,
    ContentfulSyncError,
    ContentfulTransportError,
    FieldShapeError,
    InvalidResourceIdError,
    InvalidResponseError,
    ProtectedFieldDeletionError,
    ResourceNotFoundError,
    UnsupportedOperationError,
    VersionConflictError,
)

__all__ = [
    "ContentfulApiError",
    "ContentfulSyncError",
    "ContentfulTransportError",
    "FieldShapeError",
    "InvalidResourceIdError",
    "InvalidResponseError",
    "ProtectedFieldDeletionError",
    "ResourceNotFoundError",
    "UnsupportedOperationError",
    "VersionConflictError",
]
