class StorageError(Exception):
    """Base exception for storage backend and payload errors."""


class StorageBackendError(StorageError):
    """Raised when a backend cannot read or write its backing store."""


class StorageQuotaExceededError(StorageBackendError):
    """Raised when a write would grow the backing store past its quota."""


class StorageUnavailableError(StorageBackendError):
    """Raised when durable storage is disabled or cannot be opened."""


class PayloadDecodeError(StorageError):
    """Raised when a stored payload is not well-formed JSON."""


class PayloadEncodeError(StorageError):
    """Raised when a value cannot be serialized to JSON."""


class MigrationError(StorageError):
    """Raised by migration steps that cannot transform the stored data."""
