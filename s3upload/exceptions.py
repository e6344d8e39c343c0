"""
Error types raised by the sync core.
"""


class SyncError(Exception):
    """Base class for errors that abort a sync run."""


class ConfigurationError(SyncError, ValueError):
    """Raised when the run configuration is missing or invalid."""


class TransportError(SyncError):
    """Raised when a listing, credential or upload call to the store fails."""


class FilesystemError(SyncError):
    """Raised when a local directory cannot be listed or a file cannot be read."""
