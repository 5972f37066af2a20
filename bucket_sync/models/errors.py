"""
Exception hierarchy for the bucket sync tool.
"""


class SyncError(Exception):
    """Base class for all sync errors."""
    pass


class InvalidConfig(SyncError):
    """Raised when a sync job or store configuration is malformed."""
    pass


class DirectoryNotFound(SyncError):
    """Raised when the directory to sync does not exist."""
    pass


class FileReadError(SyncError):
    """Raised when a single local file cannot be read."""
    pass


class TransferError(SyncError):
    """Raised when the object store rejects or fails an upload."""
    pass
